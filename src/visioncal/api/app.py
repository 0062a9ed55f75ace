"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from visioncal.api.models import AchievementOut, CatalogGroupOut
from visioncal.api.users import router as users_router
from visioncal.app_logging import configure_logging
from visioncal.containers import AppContainer
from visioncal.services.catalog import catalog_by_category


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting visioncal API: environment=%s", container.settings.environment
        )
        yield
        logger.info("Stopping visioncal API")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(users_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/achievements")
    async def achievement_catalog() -> list[CatalogGroupOut]:
        """Return the achievement catalog grouped by category."""
        return [
            CatalogGroupOut(
                category=category,
                achievements=[AchievementOut.from_domain(item) for item in items],
            )
            for category, items in catalog_by_category().items()
        ]

    return app
