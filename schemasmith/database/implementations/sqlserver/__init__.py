"""SQL Server database implementation."""

from .dialect import SQLServerDialect
from .information_schema import SQLServerInformationSchema
from .query_builder import SQLServerQueryBuilder
from .schema_builder import SQLServerSchemaBuilder

__all__ = [
    "SQLServerDialect",
    "SQLServerInformationSchema",
    "SQLServerQueryBuilder",
    "SQLServerSchemaBuilder",
]
