from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.trustedhost import TrustedHostMiddleware

from app.api.deps import AUTH_REALM
from app.api.router import api_router
from app.core.config import Settings, load_settings
from app.core.errors import InternalError, UnauthorizedError, UsageError
from app.core.logging import configure_logging
from app.db.session import create_db_engine, create_session_factory, init_schema

logger = logging.getLogger(__name__)


def _error_response(exc: UsageError, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.status_code, "reason": exc.reason}},
        headers=headers,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_db_engine(settings)
        if settings.create_schema:
            init_schema(engine)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        logger.info("Usage API ready")
        yield
        engine.dispose()

    docs_enabled = settings.docs_enabled and not settings.is_production
    app = FastAPI(
        title="Usage API",
        version="0.1.0",
        debug=settings.debug,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(GZipMiddleware, minimum_size=1024)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )
    if settings.trusted_hosts:
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.trusted_hosts)

    @app.middleware("http")
    async def security_headers(request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        if settings.is_production:
            response.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return response

    @app.exception_handler(UnauthorizedError)
    async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
        return _error_response(
            exc, headers={"WWW-Authenticate": f'Basic realm="{AUTH_REALM}"'}
        )

    @app.exception_handler(InternalError)
    async def internal_handler(request: Request, exc: InternalError) -> JSONResponse:
        logger.error(
            "Request failed: %s",
            exc.__cause__ or exc,
            extra={"reason": type(exc.__cause__).__name__ if exc.__cause__ else None},
        )
        return _error_response(exc)

    @app.exception_handler(UsageError)
    async def usage_error_handler(request: Request, exc: UsageError) -> JSONResponse:
        return _error_response(exc)

    app.include_router(api_router)
    return app
