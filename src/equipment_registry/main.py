"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from equipment_registry import __version__
from equipment_registry.config import RegistryConfig
from equipment_registry.context import RegistryContext
from equipment_registry.routes.equipment import router as equipment_router

logger = logging.getLogger(__name__)

APP_TITLE = "Equipment Registry"
APP_DESCRIPTION = "Registry of physical equipment records with guarded health and status updates"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler.

    Creates the production context on startup. Records live until the
    process exits.
    """
    app.state.context = RegistryContext.create()
    logger.info("Equipment registry started with an empty store")
    yield


def create_app(context: RegistryContext | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        context: Optional RegistryContext for testing. If None, uses lifespan
                 to create production context.

    Returns:
        Configured FastAPI application
    """
    if context is not None:
        # Test mode: use provided context, no lifespan
        app = FastAPI(title=APP_TITLE, description=APP_DESCRIPTION, version=__version__)
        app.state.context = context
    else:
        app = FastAPI(
            title=APP_TITLE,
            description=APP_DESCRIPTION,
            version=__version__,
            lifespan=lifespan,
        )

    app.include_router(equipment_router)

    return app


def run(config: RegistryConfig | None = None) -> None:
    """Run the server with uvicorn.

    Args:
        config: Optional configuration; loaded from the environment if None
    """
    if config is None:
        config = RegistryConfig.from_env()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if config.debug:
        # reload needs an import string rather than an app instance
        uvicorn.run(
            "equipment_registry.main:create_app",
            factory=True,
            host=config.host,
            port=config.port,
            reload=True,
            log_level=config.log_level,
        )
        return
    uvicorn.run(
        create_app(),
        host=config.host,
        port=config.port,
        log_level=config.log_level,
    )


if __name__ == "__main__":
    run()
