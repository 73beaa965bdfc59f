"""Database engine management."""

from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.pool import NullPool

from src.projects.core.config import get_settings

_engine: Engine | None = None


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    """SQLite ignores REFERENCES clauses unless enabled per connection."""
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA foreign_keys=ON")
    finally:
        cursor.close()


def build_engine(
    database_url: str,
    *,
    pooling: bool = False,
    pool_size: int = 5,
    max_overflow: int = 10,
    echo: bool = False,
) -> Engine:
    """Create a synchronous engine.

    Without pooling every ``connect()`` opens a fresh DBAPI connection and
    ``close()`` really closes it, so no connection outlives one operation.
    """
    options: dict[str, Any] = {"echo": echo}
    if pooling:
        options.update(pool_size=pool_size, max_overflow=max_overflow, pool_pre_ping=True)
    else:
        options["poolclass"] = NullPool

    engine = create_engine(database_url, **options)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def get_engine() -> Engine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = build_engine(
            settings.database_url,
            pooling=settings.database_pooling,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=settings.database_echo,
        )
    return _engine


def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None
