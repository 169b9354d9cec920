"""
Unit Tests for the transaction retry helpers
"""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from storefront.core.domain import InsufficientStockException, PersistenceException
from storefront.database import is_transient_error, run_in_transaction


class _PgError(Exception):
    def __init__(self, message: str, pgcode: str):
        super().__init__(message)
        self.pgcode = pgcode


class FakeDatabase:
    def __init__(self):
        self.sessions = 0

    @asynccontextmanager
    async def session(self):
        self.sessions += 1
        yield AsyncMock()


def locked_error() -> OperationalError:
    return OperationalError("UPDATE products", {}, Exception("database is locked"))


@pytest.mark.unit
class TestIsTransientError:
    def test_sqlite_lock(self):
        assert is_transient_error(locked_error())

    @pytest.mark.parametrize("pgcode", ["40001", "40P01"])
    def test_postgres_serialization_and_deadlock(self, pgcode):
        exc = OperationalError("UPDATE products", {}, _PgError("conflict", pgcode))
        assert is_transient_error(exc)

    def test_integrity_error_is_not_transient(self):
        exc = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: users.email"))
        assert not is_transient_error(exc)

    def test_plain_exception_is_not_transient(self):
        assert not is_transient_error(RuntimeError("database is locked"))


class TestRunInTransaction:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_returns_result(self):
        database = FakeDatabase()
        work = AsyncMock(return_value=42)

        assert await run_in_transaction(database, work, operation="test") == 42
        assert database.sessions == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_retries_transient_failure(self):
        database = FakeDatabase()
        work = AsyncMock(side_effect=[locked_error(), locked_error(), "done"])

        result = await run_in_transaction(database, work, operation="test", max_attempts=3, backoff=0)

        assert result == "done"
        assert work.await_count == 3
        assert database.sessions == 3

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_exhausted_attempts_raise_persistence_error(self):
        work = AsyncMock(side_effect=locked_error())

        with pytest.raises(PersistenceException) as exc_info:
            await run_in_transaction(FakeDatabase(), work, operation="checkout", max_attempts=2, backoff=0)

        assert work.await_count == 2
        assert exc_info.value.details["operation"] == "checkout"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_non_transient_failure_not_retried(self):
        work = AsyncMock(side_effect=IntegrityError("INSERT", {}, Exception("constraint failed")))

        with pytest.raises(PersistenceException):
            await run_in_transaction(FakeDatabase(), work, operation="test", max_attempts=5, backoff=0)

        assert work.await_count == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_domain_errors_propagate_unchanged(self):
        work = AsyncMock(side_effect=InsufficientStockException(1, 3, 2))

        with pytest.raises(InsufficientStockException):
            await run_in_transaction(FakeDatabase(), work, operation="test", max_attempts=5, backoff=0)

        assert work.await_count == 1
