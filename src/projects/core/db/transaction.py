"""Transaction scope: one connection, one transaction, one terminal action."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from sqlalchemy import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from src.projects.core.db.engine import get_engine
from src.projects.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TransactionScope:
    """Runs units of work inside an explicit begin/commit/rollback.

    Each call acquires its own connection from the engine and closes it
    before returning, whether the work succeeded or not. Exceptions raised by
    the work are re-raised unchanged after the rollback; translating them is
    the caller's job.
    """

    def __init__(self, engine: Engine | None = None):
        self._engine = engine

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = get_engine()
        return self._engine

    @contextmanager
    def begin(self) -> Iterator[Connection]:
        """Yield a connection bound to a freshly started transaction."""
        connection = self.engine.connect()
        try:
            transaction = connection.begin()
            try:
                yield connection
            except BaseException:
                try:
                    transaction.rollback()
                    logger.debug("Transaction rolled back")
                except SQLAlchemyError:
                    logger.exception("Rollback failed")
                raise
            transaction.commit()
            logger.debug("Transaction committed")
        finally:
            connection.close()

    def with_transaction(self, work: Callable[[Connection], T]) -> T:
        """Invoke ``work`` with a transactional connection and return its result.

        Commits when ``work`` returns; rolls back and re-raises when it raises.
        """
        with self.begin() as connection:
            return work(connection)
