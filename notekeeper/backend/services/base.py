"""
Base Service.

Base class for all services providing common patterns for business logic.
Services orchestrate repositories, own the unit of work, and implement
business rules.

Usage:
    from notekeeper.backend.services.base import BaseService

    class NoteService(BaseService):
        def __init__(self, session: AsyncSession) -> None:
            super().__init__(session)
            self.note_repo = NoteRepository(session)

        async def rename(self, note_id: str, title: str) -> Note:
            note = await self.note_repo.get_by_id(note_id)
            note.title = title
            return await self._execute_db_operation(
                "rename", self.note_repo.save(note)
            )
"""

from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.backend.core.database import UnitOfWork
from notekeeper.backend.core.exceptions import DatabaseError
from notekeeper.backend.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class BaseService:
    """
    Holds the request session and runs writes as one unit of work.

    Subclasses build their repositories on the same session in __init__,
    so everything they write lands in the same transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._logger = get_logger(self.__class__.__module__)

    @property
    def session(self) -> AsyncSession:
        """The session every repository of this service shares."""
        return self._session

    async def _execute_db_operation(
        self,
        operation: str,
        coro: Any,
    ) -> T:
        """
        Execute database writes as one unit of work.

        Everything the coroutine writes is committed together. On any
        exception the unit of work is rolled back, and SQLAlchemy
        exceptions are converted to application-specific exceptions.

        Args:
            operation: Description of the operation for logging
            coro: Coroutine to execute

        Returns:
            Result of the coroutine

        Raises:
            DatabaseError: For any database error, constraint violations included
        """
        try:
            async with UnitOfWork(self._session):
                return await coro
        except IntegrityError as e:
            self._logger.warning(
                "Database integrity error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database constraint violation: {operation}") from e
        except SQLAlchemyError as e:
            self._logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database operation failed: {operation}") from e

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """Log debug information with service context."""
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
