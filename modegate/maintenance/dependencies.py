from typing import Any, Callable

from fastapi import Request

from modegate.config import load_env
from modegate.maintenance.mode import enforce_mode, parse_requirement


def require_mode(requirement: Any) -> Callable[[Request], None]:
    required = parse_requirement(requirement)

    def mode_dependency(request: Request) -> None:
        env = load_env()
        request.state.mode = env.mode
        request.state.required_mode = required.value
        enforce_mode(required, env, request_id=getattr(request.state, "request_id", None))

    return mode_dependency
