"""MySQL database implementation."""

from .dialect import MySQLDialect
from .information_schema import MySQLInformationSchema
from .query_builder import MySQLQueryBuilder
from .schema_builder import MySQLSchemaBuilder

__all__ = [
    "MySQLDialect",
    "MySQLInformationSchema",
    "MySQLQueryBuilder",
    "MySQLSchemaBuilder",
]
