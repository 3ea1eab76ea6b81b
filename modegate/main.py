import logging
import os

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request

from modegate.api.exception_handlers import install_exception_handlers
from modegate.config import Env, is_enabled, load_env
from modegate.maintenance.mode import mode_bits
from modegate.middleware.observability import install_observability_middleware
from modegate.middleware.request_id import install_request_id_middleware
from modegate.observability.logging import log_event, setup_logging
from modegate.schemas import HealthResponse, VersionResponse

logger = logging.getLogger("modegate.app")

APP_VERSION = "0.1.0"


def create_app() -> FastAPI:
    load_dotenv()
    setup_logging()
    environment = os.getenv("MODEGATE_ENV", "dev").lower()
    version = os.getenv("MODEGATE_VERSION", "").strip() or APP_VERSION
    startup_env = load_env()
    if is_enabled(os.getenv("MODEGATE_STRICT_STARTUP", "0")):
        mode_bits(startup_env.mode)

    app = FastAPI(
        title="modegate",
        version=version,
        docs_url=None if environment == "prod" else "/docs",
        redoc_url=None if environment == "prod" else "/redoc",
        openapi_url=None if environment == "prod" else "/openapi.json",
    )
    install_observability_middleware(app)
    install_request_id_middleware(app)
    install_exception_handlers(app)

    @app.get("/health", response_model=HealthResponse)
    def health(request: Request, env: Env = Depends(load_env)) -> HealthResponse:
        request.state.mode = env.mode
        return HealthResponse(status="ok", mode=env.mode)

    @app.get("/version", response_model=VersionResponse)
    def version_info(request: Request, env: Env = Depends(load_env)) -> VersionResponse:
        request.state.mode = env.mode
        return VersionResponse(version=version, mode=env.mode)

    log_event(logger, {"event": "app.started", "version": version, "mode": startup_env.mode, "env": environment})
    return app
