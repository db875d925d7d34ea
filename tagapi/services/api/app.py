from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from tagapi.common.logging import configure_logging, get_logger
from tagapi.common.settings import get_settings
from tagapi.domain.errors import InvalidArgumentError, NotFoundError
from tagapi.services.api.routers import health, tags

cfg = get_settings()
dev = cfg.app_env.lower() == "development"
log = get_logger(__name__, cfg.log_level)


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        return JSONResponse(
            status_code=HTTPStatus.BAD_REQUEST,
            content={"detail": exc.message, "errors": exc.errors},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=HTTPStatus.NOT_FOUND, content={"detail": exc.message})

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        log.warning("Integrity violation on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=HTTPStatus.CONFLICT,
            content={"detail": "Request conflicts with existing data"},
        )


def create_app() -> FastAPI:
    configure_logging(cfg.log_level)

    app = FastAPI(
        title="Tag Management API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    _register_exception_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(tags.router)

    return app

app = create_app()
