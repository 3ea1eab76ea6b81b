import json
import logging
import os
from datetime import datetime, timezone
from typing import Any


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class JsonLineFormatter(logging.Formatter):
    """One JSON object per line; dict messages are merged in as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = dict(record.msg) if isinstance(record.msg, dict) else {"message": record.getMessage()}
        payload.setdefault("ts", _now())
        payload.setdefault("level", record.levelname)
        payload.setdefault("logger", record.name)
        if record.exc_info:
            payload["exc_type"] = record.exc_info[0].__name__ if record.exc_info[0] else None
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=str)


class JsonLineHandler(logging.StreamHandler):
    def __init__(self) -> None:
        super().__init__()
        self.setFormatter(JsonLineFormatter())


def setup_logging() -> None:
    level = logging.getLevelName(os.getenv("MODEGATE_LOG_LEVEL", "INFO").strip().upper())
    if not isinstance(level, int):
        level = logging.INFO
    root = logging.getLogger()
    root.setLevel(level)

    handler = next((h for h in root.handlers if isinstance(h, JsonLineHandler)), None)
    if handler is None:
        handler = JsonLineHandler()
        root.addHandler(handler)
    handler.setLevel(level)


def log_event(logger: logging.Logger, event: dict[str, Any], *, level: int = logging.INFO) -> None:
    logger.log(level, {"ts": _now(), "level": logging.getLevelName(level), **event})
