"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from inkwell.interface.api.routes import health, posts
from inkwell.util.di.container import create_container, setup_di
from inkwell.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container by default

    Returns:
        Configured application
    """
    app_instance = FastAPI(
        title="Inkwell API",
        description="Backend API for Inkwell - blog posts with keyword, tag and recency search",
        version="0.1.0",
    )

    # Automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
