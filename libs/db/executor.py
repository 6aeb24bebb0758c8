"""Single entry point for running statements against the database.

Every driver or SQL failure surfaces as one error type, ``QueryError``,
carrying the driver message for logging. Nothing is retried.
"""

from typing import Any, Optional

from sqlalchemy import Executable
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from libs.common.logging import get_logger

logger = get_logger(__name__)


class QueryError(Exception):
    """A statement failed to execute or its rows could not be read."""

    def __init__(self, message: str = "Database query failed", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.detail = detail


class QueryExecutor:
    """Runs statements on a session and normalizes failures."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def fetch_all(self, statement: Executable) -> list[RowMapping]:
        try:
            result = await self.session.execute(statement)
            return list(result.mappings().all())
        except SQLAlchemyError as exc:
            raise self._wrap(exc) from exc

    async def fetch_one(self, statement: Executable) -> Optional[RowMapping]:
        try:
            result = await self.session.execute(statement)
            return result.mappings().first()
        except SQLAlchemyError as exc:
            raise self._wrap(exc) from exc

    async def scalar(self, statement: Executable, default: Any = None) -> Any:
        try:
            value = await self.session.scalar(statement)
        except SQLAlchemyError as exc:
            raise self._wrap(exc) from exc
        return default if value is None else value

    async def execute_write(self, statement: Executable) -> int:
        """Run a write statement, commit, and return the affected row count."""
        try:
            result = await self.session.execute(statement)
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            raise self._wrap(exc) from exc
        return result.rowcount

    @staticmethod
    def _wrap(exc: SQLAlchemyError) -> QueryError:
        detail = str(getattr(exc, "orig", None) or exc)
        logger.error("Database query failed: %s", detail)
        return QueryError(detail=detail)
