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
from .errors import register_exception_handlers
from .routes import health
from modules.auth.routes import router as login_router
from modules.users.routes import router as users_router
from modules.hosts.routes import router as hosts_router
from modules.properties.routes import router as properties_router
from modules.amenities.routes import router as amenities_router
from modules.bookings.routes import router as bookings_router
from modules.reviews.routes import router as reviews_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Refuses to start without a token signing secret.
    """
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    if not settings.jwt_secret:
        raise RuntimeError("JWT secret is not configured. Set the JWT_SECRET environment variable.")
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Vacation rental marketplace API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(login_router, prefix="/login", tags=["auth"])
    app.include_router(users_router, prefix="/users", tags=["users"])
    app.include_router(hosts_router, prefix="/hosts", tags=["hosts"])
    app.include_router(properties_router, prefix="/properties", tags=["properties"])
    app.include_router(amenities_router, prefix="/amenities", tags=["amenities"])
    app.include_router(bookings_router, prefix="/bookings", tags=["bookings"])
    app.include_router(reviews_router, prefix="/reviews", tags=["reviews"])

    return app


# Application instance for uvicorn
app = create_app()
