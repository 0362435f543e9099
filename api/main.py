"""FastAPI application for the docs redirect service."""

import logging
from contextlib import asynccontextmanager

import fastapi
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.config import get_settings
from core.logger import configure_logging
from core.redirects import LegacyRedirectMiddleware
from routes import health_router, redirects_router
from services.redirect_service import audit_redirects, lookup, redirects

configure_logging()
logger = logging.getLogger(__name__)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for unhandled exceptions."""
    logger.exception(
        "unhandled.exception",
        extra={
            "exc_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected error occurred. Please try again."},
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handler for request validation errors."""
    if not isinstance(exc, RequestValidationError):
        return JSONResponse(status_code=500, content={"detail": "Unexpected error"})

    logger.warning(
        "request.validation_error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_count": len(exc.errors()),
        },
    )
    return JSONResponse(
        status_code=422,
        content={"detail": exc.errors()},
    )


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    """Report the redirect table's health once at startup."""
    # Duplicates and invalid entries already failed the import; chains are
    # only worth a warning.
    audit_redirects(redirects)
    logger.info("init.complete", extra={"redirects": len(redirects)})
    yield


_settings = get_settings()

app = fastapi.FastAPI(
    title="Docs Redirects",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if _settings.docs_enabled else None,
    redoc_url="/redoc" if _settings.docs_enabled else None,
    openapi_url="/openapi.json" if _settings.docs_enabled else None,
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# Outermost: legacy paths never reach the routers.
app.add_middleware(
    LegacyRedirectMiddleware,
    resolver=lookup,
    status_code=_settings.redirect_status_code,
    preserve_query_string=_settings.preserve_query_string,
    strip_trailing_slash=_settings.strip_trailing_slash,
    cache_control=_settings.redirect_cache_control,
)

app.include_router(health_router)
app.include_router(redirects_router)
