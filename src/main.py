"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from infrastructure.config import Settings, get_logger, get_settings, setup_logger
from infrastructure.database import init_db, close_db
from presentation.api.errors import register_exception_handlers
from presentation.api.v1.endpoints import health, webinars


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = app.state.settings

    # Setup logging
    setup_logger(
        level=settings.log_level,
        log_format=settings.log_format,
    )
    get_logger(__name__).info(f"Starting {settings.app_name} ({settings.environment})")

    # Initialize database
    await init_db()

    yield

    # Shutdown
    await close_db()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Explicit settings replace get_settings() for every dependency and for
    the lifespan, so the factory argument is the single source of config.
    """
    custom_settings = settings is not None
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    if custom_settings:
        app.dependency_overrides[get_settings] = lambda: settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(webinars.router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().debug,
    )
