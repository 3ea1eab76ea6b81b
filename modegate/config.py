import logging
import os
from dataclasses import dataclass

from modegate.modes import DEFAULT_MODE, DEFAULT_STATUS_PAGE_URL
from modegate.observability.logging import log_event

logger = logging.getLogger("modegate.config")


def is_enabled(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Env:
    mode: str = DEFAULT_MODE.value
    status_page_url: str = DEFAULT_STATUS_PAGE_URL
    retry_after_seconds: int | None = None


def _retry_after_seconds() -> int | None:
    raw = os.getenv("MODEGATE_RETRY_AFTER_SECONDS", "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value <= 0:
        # Invalid values drop the header, they never block traffic.
        log_event(
            logger,
            {"event": "config.invalid_retry_after", "value": raw},
            level=logging.WARNING,
        )
        return None
    return value


def load_env() -> Env:
    # Read on every call so an operator can flip the mode without a restart.
    # Also used directly as a FastAPI dependency: Depends(load_env).
    raw_mode = os.getenv("MODEGATE_MODE")
    mode = DEFAULT_MODE.value if raw_mode is None else raw_mode.strip()
    status_page_url = os.getenv("MODEGATE_STATUS_PAGE_URL", "").strip() or DEFAULT_STATUS_PAGE_URL
    return Env(mode=mode, status_page_url=status_page_url, retry_after_seconds=_retry_after_seconds())
