from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from modegate.errors import BadConfigError, HTTPError, MaintenanceError
from modegate.middleware.request_id import request_id_from_state
from modegate.schemas import ErrorResponse


def _error_response(
    request: Request,
    *,
    code: str,
    message: str,
    status_code: int,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    request.state.error_code = code
    body = ErrorResponse(code=code, message=message, request_id=request_id_from_state(request)).model_dump()
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def install_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(MaintenanceError)
    async def maintenance_handler(request: Request, exc: MaintenanceError):
        headers = None
        if exc.retry_after_seconds is not None:
            headers = {"Retry-After": str(exc.retry_after_seconds)}
        return _error_response(
            request,
            code=exc.code,
            message=exc.message,
            status_code=exc.status_code,
            headers=headers,
        )

    @app.exception_handler(BadConfigError)
    async def bad_config_handler(request: Request, exc: BadConfigError):
        return _error_response(request, code=exc.code, message=exc.message, status_code=exc.status_code)

    @app.exception_handler(HTTPError)
    async def http_error_handler(request: Request, exc: HTTPError):
        return _error_response(request, code=exc.code, message=exc.message, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_failed_handler(request: Request, exc: RequestValidationError):  # noqa: ARG001
        return _error_response(
            request,
            code="REQUEST_VALIDATION_FAILED",
            message="Request validation failed.",
            status_code=422,
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):  # noqa: ARG001
        return _error_response(
            request,
            code="INTERNAL_ERROR",
            message="Internal server error.",
            status_code=500,
        )
