"""Database utilities - engine, transaction scope, schema."""

from src.projects.core.db.engine import build_engine, dispose_engine, get_engine
from src.projects.core.db.schema import create_schema, drop_schema
from src.projects.core.db.transaction import TransactionScope

__all__ = [
    # Engine
    "build_engine",
    "dispose_engine",
    "get_engine",
    # Schema
    "create_schema",
    "drop_schema",
    # Transactions
    "TransactionScope",
]
