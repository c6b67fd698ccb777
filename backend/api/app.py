"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.database import init_supabase_client
from shared.exceptions import StoreUnavailableError
from modules.auth.routes import router as auth_router
from modules.users.routes import router as users_router
from modules.movies.routes import router as movies_router

from .models.errors import ErrorResponse
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.store_backend == "supabase":
        await init_supabase_client()
    logger.info(
        f"Starting {settings.app_name} on {settings.host}:{settings.port} "
        f"({settings.store_backend} store)"
    )
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
    """Store failures are a 503, never an authentication failure."""
    return JSONResponse(
        status_code=503,
        content=ErrorResponse(
            error="Service Unavailable",
            detail=exc.message,
            code=exc.code,
        ).model_dump(),
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
        description="Movie catalog API with bearer token authentication",
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

    app.add_exception_handler(StoreUnavailableError, store_unavailable_handler)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, tags=["auth"])
    app.include_router(users_router, prefix="/users", tags=["users"])
    app.include_router(movies_router, prefix="/movies", tags=["movies"])

    return app


# Application instance for uvicorn
app = create_app()
