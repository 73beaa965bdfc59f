"""Table creation from the SQLModel metadata (no migrations)."""

from sqlalchemy import Engine
from sqlmodel import SQLModel

# Registers every table on SQLModel.metadata
import src.projects.models  # noqa: F401
from src.projects.core.logging import get_logger

logger = get_logger(__name__)


def create_schema(engine: Engine) -> None:
    """Create any missing tables. Existing tables are left untouched."""
    SQLModel.metadata.create_all(engine)
    logger.info("Schema ensured", tables=sorted(SQLModel.metadata.tables))


def drop_schema(engine: Engine) -> None:
    """Drop every table this package owns."""
    SQLModel.metadata.drop_all(engine)
