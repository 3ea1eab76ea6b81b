import functools
import inspect
import logging
from typing import Any, Callable

from modegate.errors import BadConfigError, InvalidRequirementError, MaintenanceError
from modegate.modes import DEFAULT_MODE, DEFAULT_STATUS_PAGE_URL, MODES, Mode
from modegate.observability.logging import log_event

logger = logging.getLogger("modegate.maintenance")

__all__ = [
    "DEFAULT_MODE",
    "DEFAULT_STATUS_PAGE_URL",
    "MODES",
    "BadConfigError",
    "InvalidRequirementError",
    "MaintenanceError",
    "Mode",
    "check_mode",
    "enforce_mode",
    "maintenance_message",
    "mode_bits",
    "mode_enabled",
    "parse_requirement",
    "with_mode",
]


def maintenance_message(status_page_url: str = DEFAULT_STATUS_PAGE_URL) -> str:
    return f"API undergoing maintenance, check {status_page_url} for more info"


def parse_requirement(requirement: Any) -> Mode:
    """Resolve a handler requirement to READ_ONLY or READ_WRITE.

    A handler that needs neither read nor write access makes no sense, so "--"
    is rejected here, when the handler is registered, instead of per request.
    """
    try:
        mode = Mode(requirement)
    except ValueError:
        raise InvalidRequirementError(f"invalid mode requirement: {requirement!r}") from None
    if mode is Mode.NO_READ_OR_WRITE:
        raise InvalidRequirementError("invalid mode")
    return mode


def mode_bits(value: Any) -> tuple[str, str]:
    if not isinstance(value, str) or value not in MODES:
        raise BadConfigError(f'invalid maintenance mode, wanted one of {",".join(MODES)} but got "{value}"')
    return value[0], value[1]


def mode_enabled(requirement: Any, current: Any) -> bool:
    """Return True when ``current`` grants every capability ``requirement`` asks for.

    A "--" or unknown requirement is a programming error and raises
    InvalidRequirementError. The current mode is validated next, so a
    misconfigured runtime mode raises BadConfigError before any comparison.
    """
    required_bits = mode_bits(parse_requirement(requirement))
    current_bits = mode_bits(current)
    return all(bit == "-" or bit == current_bit for bit, current_bit in zip(required_bits, current_bits))


def check_mode(
    requirement: Any,
    current: Any,
    *,
    status_page_url: str = DEFAULT_STATUS_PAGE_URL,
    retry_after_seconds: int | None = None,
) -> None:
    if not mode_enabled(requirement, current):
        raise MaintenanceError(maintenance_message(status_page_url), retry_after_seconds=retry_after_seconds)


def enforce_mode(requirement: Mode, env: Any, *, request_id: str | None = None) -> None:
    current = env.mode
    try:
        check_mode(
            requirement,
            current,
            status_page_url=getattr(env, "status_page_url", DEFAULT_STATUS_PAGE_URL),
            retry_after_seconds=getattr(env, "retry_after_seconds", None),
        )
    except MaintenanceError:
        log_event(
            logger,
            {"event": "mode.blocked", "request_id": request_id, "mode": current, "required_mode": requirement.value},
        )
        raise
    except BadConfigError:
        log_event(
            logger,
            {"event": "mode.bad_config", "request_id": request_id, "mode": str(current)},
            level=logging.ERROR,
        )
        raise


def with_mode(handler: Callable[..., Any], requirement: Any) -> Callable[..., Any]:
    """Wrap ``handler`` so it only runs when the current mode satisfies ``requirement``.

    ``handler`` is called as ``handler(request, env, ...)``; the wrapper keeps that
    contract and reads ``env.mode`` on every call. Coroutine handlers stay
    coroutine functions.

    r- = only needs read permission, enabled in read-only and read+write modes.
    rw = needs read and write, enabled in read+write mode only.
    """
    required = parse_requirement(requirement)

    if inspect.iscoroutinefunction(handler):

        @functools.wraps(handler)
        async def async_gated(request, env, *args, **kwargs):
            enforce_mode(required, env, request_id=_request_id(request))
            return await handler(request, env, *args, **kwargs)

        async_gated.required_mode = required  # type: ignore[attr-defined]
        return async_gated

    @functools.wraps(handler)
    def gated(request, env, *args, **kwargs):
        enforce_mode(required, env, request_id=_request_id(request))
        return handler(request, env, *args, **kwargs)

    gated.required_mode = required  # type: ignore[attr-defined]
    return gated


def _request_id(request: Any) -> str | None:
    state = getattr(request, "state", None)
    value = getattr(state, "request_id", None)
    return value if isinstance(value, str) else None
