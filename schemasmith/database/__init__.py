"""Database access: the aggregate, engine dialects and the connection layer."""

from .database import Database
from .engine import create_database_engine
from .factory import create_dialect, get_supported_backends
from .implementations import SQLAlchemyConnection
from .schema import ColumnDefinition, ForeignKeyDefinition, TableDefinition

__all__ = [
    "ColumnDefinition",
    "Database",
    "ForeignKeyDefinition",
    "SQLAlchemyConnection",
    "TableDefinition",
    "create_database_engine",
    "create_dialect",
    "get_supported_backends",
]
