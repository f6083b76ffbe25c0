"""SQLite database implementation."""

from .dialect import SQLiteDialect
from .information_schema import SQLiteInformationSchema
from .query_builder import SQLiteQueryBuilder
from .schema_builder import SQLiteSchemaBuilder

__all__ = [
    "SQLiteDialect",
    "SQLiteInformationSchema",
    "SQLiteQueryBuilder",
    "SQLiteSchemaBuilder",
]
