"""
Application lifecycle management using the FastAPI lifespan pattern.

Startup builds the Database handle and the dependency container, optionally
creates the schema and seeds the administrator account. Shutdown disposes
the engine.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from storefront.config.settings import Settings
from storefront.core.container import DependencyContainer
from storefront.database import Database

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Handles startup initialization and graceful shutdown.
    """

    def __init__(self, app: FastAPI, settings: Settings) -> None:
        self._app = app
        self._settings = settings
        self._database: Database | None = None

    async def startup(self) -> None:
        if self._database is not None:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")

        self._database = Database.from_settings(self._settings)
        container = DependencyContainer(self._settings, self._database)
        self._app.state.database = self._database
        self._app.state.container = container

        if self._settings.DB_CREATE_TABLES:
            await self._database.create_all()
            logger.info("Database tables ensured")

        await self._seed_admin(container)

        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        if self._database is None:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")
        await self._database.dispose()
        self._database = None
        logger.info("Application lifecycle shutdown completed")

    async def _seed_admin(self, container: DependencyContainer) -> None:
        """Create or promote the administrator named by ADMIN_EMAIL."""
        if not self._settings.ADMIN_EMAIL or not self._settings.ADMIN_PASSWORD:
            logger.info("ADMIN_EMAIL/ADMIN_PASSWORD not configured - no administrator seeded")
            return

        async with container.database.session() as session:
            use_case = container.create_bootstrap_admin_use_case(session)
            await use_case.execute(
                email=self._settings.ADMIN_EMAIL,
                password=self._settings.ADMIN_PASSWORD,
                name=self._settings.ADMIN_NAME,
            )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Reads the settings stored on app.state by the application factory.
    """
    lifecycle = LifecycleManager(app, app.state.settings)

    # Startup
    await lifecycle.startup()

    yield  # Application runs here

    # Shutdown
    await lifecycle.shutdown()
