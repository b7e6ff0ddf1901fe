"""
Unit of Work for multi-step writes.

One ``UnitOfWork`` wraps one SQLAlchemy session for the duration of an
operation. Collaborators stage rows with ``add`` and read through
``session``; only the caller that opened the unit commits it. Leaving the
block without a commit, or with an exception, rolls everything back.
"""

import logging
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .errors import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UnitOfWork:
    def __init__(self, session: Session):
        self.session = session
        self._active = False
        self._committed = False

    def __enter__(self) -> "UnitOfWork":
        if self._active:
            raise RuntimeError("UnitOfWork is already active")
        self._active = True
        self._committed = False
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._active = False
        if exc_type is None and self._committed:
            return False

        self.rollback()
        if exc_type is None:
            logger.warning("UnitOfWork left without commit - changes rolled back")
            return False

        logger.error(f"Transaction rolled back due to: {exc_val}")
        if issubclass(exc_type, SQLAlchemyError):
            raise StorageError("Database operation failed") from exc_val
        return False

    def add(self, entity: T) -> T:
        """Stage a new row and flush it so generated values are available"""
        self._ensure_active()
        self.session.add(entity)
        self.session.flush()
        return entity

    def commit(self) -> None:
        self._ensure_active()
        self.session.commit()
        self._committed = True

    def rollback(self) -> None:
        try:
            self.session.rollback()
        except SQLAlchemyError as e:
            logger.error(f"Rollback failed: {e}")
            raise

    def _ensure_active(self) -> None:
        if not self._active:
            raise RuntimeError("UnitOfWork is not active")
