"""
Transaction retry helpers.

A unit of work that hits a serialization failure, a deadlock or a locked
SQLite file is rolled back and started again on a fresh session.
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain.exceptions import PersistenceException
from storefront.database.async_db import Database

logger = logging.getLogger(__name__)

T = TypeVar("T")

# PostgreSQL: serialization_failure, deadlock_detected
RETRYABLE_SQLSTATES = {"40001", "40P01"}
RETRYABLE_MESSAGES = ("deadlock detected", "could not serialize access", "database is locked")


def _sqlstate_from(exc: BaseException) -> str | None:
    orig = getattr(exc, "orig", None)
    for candidate in (orig, exc, exc.__cause__):
        if candidate is None:
            continue
        code = getattr(candidate, "pgcode", None) or getattr(candidate, "sqlstate", None)
        if code:
            return str(code)
    return None


def is_transient_error(exc: BaseException) -> bool:
    """Whether a failed transaction may succeed if simply run again."""
    if not isinstance(exc, DBAPIError):
        return False
    if getattr(exc, "connection_invalidated", False):
        return True
    if _sqlstate_from(exc) in RETRYABLE_SQLSTATES:
        return True
    msg = str(exc).lower()
    return any(k in msg for k in RETRYABLE_MESSAGES)


async def run_in_transaction(
    database: Database,
    work: Callable[[AsyncSession], Awaitable[T]],
    *,
    operation: str,
    max_attempts: int = 3,
    backoff: float = 0.05,
) -> T:
    """
    Run ``work`` inside one committed session, retrying transient failures.

    Domain exceptions raised by ``work`` roll the session back and propagate
    unchanged. Database errors that survive every attempt, or are not
    transient, become PersistenceException.
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            async with database.session() as session:
                return await work(session)
        except SQLAlchemyError as e:
            if attempt < max_attempts and is_transient_error(e):
                logger.warning(f"Transient failure in '{operation}' (attempt {attempt}/{max_attempts}): {e}")
                await asyncio.sleep(backoff * attempt)
                continue
            logger.exception(f"Database failure in '{operation}' after {attempt} attempt(s)")
            raise PersistenceException(operation, e) from e
