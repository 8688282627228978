"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.logging import configure_logging

from .errors import register_error_handlers
from .routes import health, users, classes, cart, payments, enrollments

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.debug)
    if not settings.jwt_secret:
        logger.warning("YOGA_JWT_SECRET is not set; every authenticated request will be rejected")
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Class marketplace: role-gated catalog, cart, payments and enrollment",
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

    register_error_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(classes.router, prefix="/api/classes", tags=["classes"])
    app.include_router(cart.router, prefix="/api/cart", tags=["cart"])
    app.include_router(payments.router, prefix="/api/payments", tags=["payments"])
    app.include_router(enrollments.router, prefix="/api/enrollments", tags=["enrollments"])

    return app


# Application instance for uvicorn
app = create_app()
