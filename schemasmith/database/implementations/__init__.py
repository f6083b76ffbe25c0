"""Database implementations for different backends."""

from .mysql import MySQLDialect
from .postgresql import PostgreSQLDialect
from .sqlalchemy_connection import SQLAlchemyConnection, SQLAlchemyTransaction
from .sqlite import SQLiteDialect
from .sqlserver import SQLServerDialect

__all__ = [
    "MySQLDialect",
    "PostgreSQLDialect",
    "SQLAlchemyConnection",
    "SQLAlchemyTransaction",
    "SQLiteDialect",
    "SQLServerDialect",
]
