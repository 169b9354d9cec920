"""
Application-wide FastAPI dependencies.

Everything is read from app.state, set up by the lifespan.
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.config.settings import Settings
from storefront.core.container import DependencyContainer
from storefront.database import Database


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_container(request: Request) -> DependencyContainer:
    return request.app.state.container


async def get_db_session(database: Database = Depends(get_database)) -> AsyncGenerator[AsyncSession, None]:
    """
    Request-scoped session.

    Committed after the endpoint returns, rolled back if it raises.
    """
    async with database.session() as session:
        yield session
