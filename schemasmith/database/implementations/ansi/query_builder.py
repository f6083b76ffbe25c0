"""Query builder for engines that follow standard SQL."""

from typing import Any

from schemasmith.database.interfaces.query_builder import QueryBuilder
from schemasmith.database.utils import (
    build_assignments,
    build_values,
    build_where_clause,
)
from schemasmith.exceptions import SchemaValidationError
from schemasmith.types import DatabaseParamType


class StandardQueryBuilder(QueryBuilder):
    """Standard SQL query builder; engines override the non-standard parts."""

    def select(
        self,
        table: str,
        columns: list[str] | None = None,
        where: dict[str, Any] | None = None,
    ) -> tuple[str, DatabaseParamType]:
        cols = "*" if not columns else self.dialect.escape_identifiers(columns)
        query = f"SELECT {cols} FROM {self.dialect.escape_identifier(table)}"

        where_clause, params = build_where_clause(where, self.dialect.escape_identifier)
        if where_clause:
            query += f" {where_clause}"

        return query, params

    def exists(
        self, table: str, where: dict[str, Any] | None = None
    ) -> tuple[str, DatabaseParamType]:
        query = f"SELECT 1 AS present FROM {self.dialect.escape_identifier(table)}"

        where_clause, params = build_where_clause(where, self.dialect.escape_identifier)
        if where_clause:
            query += f" {where_clause}"

        return f"{query} LIMIT 1", params

    def count(
        self, table: str, where: dict[str, Any] | None = None
    ) -> tuple[str, DatabaseParamType]:
        query = f"SELECT COUNT(*) AS value FROM {self.dialect.escape_identifier(table)}"

        where_clause, params = build_where_clause(where, self.dialect.escape_identifier)
        if where_clause:
            query += f" {where_clause}"

        return query, params

    def insert(self, table: str, data: dict[str, Any]) -> tuple[str, DatabaseParamType]:
        table_sql = self.dialect.escape_identifier(table)
        if not data:
            return self.insert_defaults_sql(table_sql), {}

        columns_sql, placeholders_sql, params = build_values(
            data, self.dialect.escape_identifier
        )
        query = f"INSERT INTO {table_sql} ({columns_sql}) VALUES ({placeholders_sql})"
        return query, params

    def insert_defaults_sql(self, table_sql: str) -> str:
        return f"INSERT INTO {table_sql} DEFAULT VALUES"

    def update(
        self,
        table: str,
        data: dict[str, Any],
        where: dict[str, Any] | None = None,
    ) -> tuple[str, DatabaseParamType]:
        if not data:
            raise SchemaValidationError("data", "Cannot update with empty data.")

        set_clause, params = build_assignments(data, self.dialect.escape_identifier)
        query = f"UPDATE {self.dialect.escape_identifier(table)} SET {set_clause}"

        where_clause, where_params = build_where_clause(
            where, self.dialect.escape_identifier
        )
        if where_clause:
            query += f" {where_clause}"
            params.update(where_params)

        return query, params

    def delete(
        self, table: str, where: dict[str, Any] | None = None
    ) -> tuple[str, DatabaseParamType]:
        query = f"DELETE FROM {self.dialect.escape_identifier(table)}"

        where_clause, params = build_where_clause(where, self.dialect.escape_identifier)
        if where_clause:
            query += f" {where_clause}"

        return query, params

    def set_column_value(
        self, table: str, column: str, value: Any
    ) -> tuple[str, DatabaseParamType]:
        return self.update(table, {column: value})
