"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from modules.auth.routes import router as auth_router
from modules.customers.routes import router as customers_router
from modules.orders.routes import router as orders_router
from modules.products.routes import router as products_router
from shared.config import ensure_runtime_config, get_settings
from shared.database import dispose_engine, init_models
from shared.exceptions import PhotostoreError
from shared.logging import configure_logging

from .middleware.logging import AccessLogMiddleware, SecurityHeadersMiddleware
from .models.errors import ErrorResponse, ValidationErrorResponse, ValidationIssue
from .routes import health

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
SERVER_ERROR = "Server error"
_LOCATIONS = {"body", "path", "query", "header", "cookie"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Fails startup on missing required config, then creates any
    missing tables before serving.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format, settings.log_dir)
    ensure_runtime_config(settings)
    await init_models()
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    await dispose_engine()
    logger.info("Shutting down %s", settings.app_name)


def _issue_from_error(error: dict) -> ValidationIssue:
    loc = [str(part) for part in error.get("loc", ())]
    if len(loc) > 1 and loc[0] in _LOCATIONS:
        loc = loc[1:]
    message = error.get("msg", "Invalid value")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return ValidationIssue(message=message, path=".".join(loc), type=error.get("type", "value_error"))


def _json(status_code: int, body, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [_issue_from_error(e) for e in exc.errors()]
    return _json(400, ValidationErrorResponse(details=details))


async def photostore_error_handler(request: Request, exc: PhotostoreError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.to_dict())
        return _json(exc.status_code, ErrorResponse(msg=SERVER_ERROR))

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return _json(exc.status_code, ErrorResponse(msg=exc.message), headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _json(exc.status_code, ErrorResponse(msg=str(exc.detail)), headers=exc.headers)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s failed with unhandled error", request.method, request.url.path)
    return _json(500, ErrorResponse(msg=SERVER_ERROR))


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Role-based store API: products, customers, orders",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(AccessLogMiddleware)

    # Error rendering
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PhotostoreError, photostore_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix=f"{API_PREFIX}/auth", tags=["auth"])
    app.include_router(products_router, prefix=f"{API_PREFIX}/products", tags=["products"])
    app.include_router(customers_router, prefix=f"{API_PREFIX}/customers", tags=["customers"])
    app.include_router(orders_router, prefix=f"{API_PREFIX}/orders", tags=["orders"])

    return app


# Application instance for uvicorn
app = create_app()
