"""SQL Server query builder implementation."""

from typing import Any

from schemasmith.database.implementations.ansi import StandardQueryBuilder
from schemasmith.database.utils import build_where_clause
from schemasmith.types import DatabaseParamType


class SQLServerQueryBuilder(StandardQueryBuilder):
    """SQL Server-specific query builder."""

    def exists(
        self, table: str, where: dict[str, Any] | None = None
    ) -> tuple[str, DatabaseParamType]:
        query = f"SELECT TOP 1 1 AS present FROM {self.dialect.escape_identifier(table)}"

        where_clause, params = build_where_clause(where, self.dialect.escape_identifier)
        if where_clause:
            query += f" {where_clause}"

        return query, params

    def last_identity_sql(self, table: str, column: str) -> str:
        # Each statement is its own batch, so SCOPE_IDENTITY() would be NULL.
        return "SELECT CAST(@@IDENTITY AS BIGINT) AS value"
