"""PostgreSQL information schema reader."""

from typing import Any

from schemasmith.database.implementations.ansi import StandardInformationSchema

INDEX_FROM = """
    FROM pg_index x
    JOIN pg_class i ON i.oid = x.indexrelid
    JOIN pg_class t ON t.oid = x.indrelid
    JOIN pg_namespace n ON n.oid = t.relnamespace
    WHERE n.nspname = current_schema()
      AND t.relname = :table_name
      AND NOT x.indisprimary
"""


class PostgreSQLInformationSchema(StandardInformationSchema):
    """Metadata reader for PostgreSQL.

    Tables and constraints come from INFORMATION_SCHEMA; indexes come from the
    ``pg_index`` catalog, where ``indnkeyatts`` separates key columns from
    INCLUDE columns.
    """

    schema_expression = "current_schema()"

    def database_exists(self, database_name: str) -> bool:
        query = "SELECT datname AS name FROM pg_database WHERE datname = :database_name"
        return bool(self._fetch_names(query, {"database_name": database_name}))

    def get_column_auto_increment(self, table_name: str, column_name: str) -> bool:
        query = f"""
            SELECT column_default, is_identity
            FROM information_schema.columns
            WHERE table_schema = {self.schema_expression}
              AND table_name = :table_name
              AND column_name = :column_name
        """
        column = self.connection.fetch_one(
            query, {"table_name": table_name, "column_name": column_name}
        )
        if column is None:
            return False
        default = column["column_default"] or ""
        return default.startswith("nextval(") or column["is_identity"] == "YES"

    def _get_index(self, table_name: str, index_name: str) -> dict[str, Any] | None:
        query = (
            f"SELECT i.relname AS name, x.indisunique AS is_unique {INDEX_FROM}"
            " AND i.relname = :index_name"
        )
        return self.connection.fetch_one(
            query, {"table_name": table_name, "index_name": index_name}
        )

    def get_index_names(self, table_name: str) -> list[str]:
        query = f"SELECT i.relname AS name {INDEX_FROM} ORDER BY i.relname"
        return self._fetch_names(query, {"table_name": table_name})

    def get_index_unique(self, table_name: str, index_name: str) -> bool | None:
        index = self._get_index(table_name, index_name)
        return bool(index["is_unique"]) if index is not None else None

    def _get_index_columns(
        self, table_name: str, index_name: str, included: bool
    ) -> list[str]:
        operator = ">" if included else "<="
        query = f"""
            SELECT a.attname AS name
            FROM pg_index x
            JOIN pg_class i ON i.oid = x.indexrelid
            JOIN pg_class t ON t.oid = x.indrelid
            JOIN pg_namespace n ON n.oid = t.relnamespace
            CROSS JOIN LATERAL unnest(x.indkey::int2[]) WITH ORDINALITY AS k(attnum, position)
            JOIN pg_attribute a ON a.attrelid = t.oid AND a.attnum = k.attnum
            WHERE n.nspname = current_schema()
              AND t.relname = :table_name
              AND i.relname = :index_name
              AND NOT x.indisprimary
              AND k.position {operator} x.indnkeyatts
            ORDER BY k.position
        """
        return self._fetch_names(
            query, {"table_name": table_name, "index_name": index_name}
        )

    def get_index_column_names(self, table_name: str, index_name: str) -> list[str]:
        return self._get_index_columns(table_name, index_name, included=False)

    def get_index_include_column_names(
        self, table_name: str, index_name: str
    ) -> list[str]:
        return self._get_index_columns(table_name, index_name, included=True)
