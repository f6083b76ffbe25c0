"""PostgreSQL database implementation."""

from .dialect import PostgreSQLDialect
from .information_schema import PostgreSQLInformationSchema
from .query_builder import PostgreSQLQueryBuilder
from .schema_builder import PostgreSQLSchemaBuilder

__all__ = [
    "PostgreSQLDialect",
    "PostgreSQLInformationSchema",
    "PostgreSQLQueryBuilder",
    "PostgreSQLSchemaBuilder",
]
