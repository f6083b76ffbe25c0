"""Database interfaces module."""

from .connection import DatabaseConnection, DatabaseTransaction
from .dialect import Dialect
from .information_schema import InformationSchema
from .query_builder import QueryBuilder
from .schema_builder import SchemaBuilder

__all__ = [
    "DatabaseConnection",
    "DatabaseTransaction",
    "Dialect",
    "InformationSchema",
    "QueryBuilder",
    "SchemaBuilder",
]
