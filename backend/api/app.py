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

from shared.app_logging import configure_logging
from shared.config import get_settings
from shared.database import bootstrap_database

from .dependencies import get_container
from .models.errors import ErrorResponse, ValidationErrorResponse
from .routes import health
from modules.auth.routes import router as auth_router
from modules.catalog.routes import router as catalog_router
from modules.contact.routes import router as contact_router

logger = logging.getLogger("pricebite")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Loads the catalog before serving and connects to the user store,
    which gets one scheduled retry if the first attempt fails.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    store = get_container().catalog_store
    app.state.catalog = store
    logger.info("Catalog ready with %d products", len(store))
    retry_task = await bootstrap_database()
    logger.info("Starting PriceBite API on %s:%s", settings.host, settings.port)
    yield
    # Shutdown
    if retry_task is not None and not retry_task.done():
        retry_task.cancel()
    logger.info("Shutting down PriceBite API")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": <message>}."""
    body = ErrorResponse(error=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies and parameters are a 400."""
    body = ValidationErrorResponse(details=[
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ])
    return JSONResponse(status_code=400, content=body.model_dump())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log and return a generic 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal server error").model_dump(exclude_none=True),
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Grocery and retail price comparison across delivery platforms",
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

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(contact_router, prefix="/api/contact", tags=["contact"])
    app.include_router(catalog_router, tags=["catalog"])

    return app


# Application instance for uvicorn
app = create_app()
