"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, docs_chat.api, docs_chat.observability, docs_chat.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docs_chat import __version__
from docs_chat.api import api_router
from docs_chat.api.deps import AppContext
from docs_chat.configs import Settings, get_settings
from docs_chat.observability.logger import configure_logging
from docs_chat.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    context: AppContext | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Application settings (loaded from env if None)
        context: Pre-built application context (built in lifespan if None)

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or (context.settings if context else get_settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan context manager.

        Builds the shared application context and starts the index build
        without waiting for it, so requests are served while it runs.
        """
        # Startup
        configure_logging(settings.log_level)
        logger.info(
            f"Application startup: environment={settings.environment}, debug={settings.debug}"
        )

        app_context = context or AppContext(settings)
        app.state.context = app_context

        if settings.build_index_on_startup:
            app_context.start_index_build()
            logger.info("Embedding index build started")

        yield

        # Shutdown
        await app_context.aclose()
        logger.info("Application shutdown")

    app = FastAPI(
        title="Docs Chat API",
        description="Q&A over the sales dataset and project description via Amazon Bedrock",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Added first = innermost; correlation wraps request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")

    return app


def run() -> None:
    """Run the API with uvicorn using host/port from settings."""
    import uvicorn

    load_dotenv()
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
