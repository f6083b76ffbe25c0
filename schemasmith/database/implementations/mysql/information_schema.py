"""MySQL information schema reader."""

from typing import Any

from schemasmith.database.implementations.ansi import StandardInformationSchema


class MySQLInformationSchema(StandardInformationSchema):
    """Metadata reader for MySQL.

    A database is the schema here. Foreign key targets are read from the
    ``REFERENCED_*`` columns of KEY_COLUMN_USAGE and indexes from STATISTICS.
    The index MySQL creates behind each foreign key is not reported.
    """

    schema_expression = "DATABASE()"

    def database_exists(self, database_name: str) -> bool:
        query = """
            SELECT SCHEMA_NAME AS name
            FROM INFORMATION_SCHEMA.SCHEMATA
            WHERE SCHEMA_NAME = :database_name
        """
        return bool(self._fetch_names(query, {"database_name": database_name}))

    def _get_column(self, table_name: str, column_name: str) -> dict[str, Any] | None:
        query = f"""
            SELECT IS_NULLABLE AS is_nullable,
                   COLUMN_TYPE AS data_type,
                   COLUMN_DEFAULT AS column_default,
                   EXTRA AS extra
            FROM INFORMATION_SCHEMA.COLUMNS
            WHERE TABLE_SCHEMA = {self.schema_expression}
              AND TABLE_NAME = :table_name
              AND COLUMN_NAME = :column_name
        """
        return self.connection.fetch_one(
            query, {"table_name": table_name, "column_name": column_name}
        )

    def get_column_data_type(self, table_name: str, column_name: str) -> str | None:
        column = self._get_column(table_name, column_name)
        return column["data_type"] if column is not None else None

    def get_column_auto_increment(self, table_name: str, column_name: str) -> bool:
        column = self._get_column(table_name, column_name)
        if column is None:
            return False
        return "auto_increment" in (column["extra"] or "").lower()

    def get_column_default_sql(self, table_name: str, column_name: str) -> str | None:
        """Return the column default as SQL to restate it, None if it has none."""
        column = self._get_column(table_name, column_name)
        if column is None or column["column_default"] is None:
            return None
        if "default_generated" in (column["extra"] or "").lower():
            return f"({column['column_default']})"
        return self.dialect.render_literal(column["column_default"])

    def _get_foreign_key_references(
        self, table_name: str, foreign_key_name: str
    ) -> list[dict[str, Any]]:
        query = f"""
            SELECT REFERENCED_TABLE_NAME AS table_name,
                   REFERENCED_COLUMN_NAME AS column_name
            FROM INFORMATION_SCHEMA.KEY_COLUMN_USAGE
            WHERE TABLE_SCHEMA = {self.schema_expression}
              AND TABLE_NAME = :table_name
              AND CONSTRAINT_NAME = :foreign_key_name
              AND REFERENCED_TABLE_NAME IS NOT NULL
            ORDER BY ORDINAL_POSITION
        """
        return self.connection.fetch_all(
            query, {"table_name": table_name, "foreign_key_name": foreign_key_name}
        )

    def get_index_names(self, table_name: str) -> list[str]:
        query = f"""
            SELECT DISTINCT s.INDEX_NAME AS name
            FROM INFORMATION_SCHEMA.STATISTICS s
            WHERE s.TABLE_SCHEMA = {self.schema_expression}
              AND s.TABLE_NAME = :table_name
              AND s.INDEX_NAME <> 'PRIMARY'
              AND NOT EXISTS (
                  SELECT 1
                  FROM INFORMATION_SCHEMA.TABLE_CONSTRAINTS c
                  WHERE c.TABLE_SCHEMA = s.TABLE_SCHEMA
                    AND c.TABLE_NAME = s.TABLE_NAME
                    AND c.CONSTRAINT_NAME = s.INDEX_NAME
                    AND c.CONSTRAINT_TYPE = 'FOREIGN KEY'
              )
            ORDER BY s.INDEX_NAME
        """
        return self._fetch_names(query, {"table_name": table_name})

    def _get_index_rows(self, table_name: str, index_name: str) -> list[dict[str, Any]]:
        query = f"""
            SELECT COLUMN_NAME AS name, NON_UNIQUE AS non_unique
            FROM INFORMATION_SCHEMA.STATISTICS
            WHERE TABLE_SCHEMA = {self.schema_expression}
              AND TABLE_NAME = :table_name
              AND INDEX_NAME = :index_name
              AND INDEX_NAME <> 'PRIMARY'
            ORDER BY SEQ_IN_INDEX
        """
        return self.connection.fetch_all(
            query, {"table_name": table_name, "index_name": index_name}
        )

    def get_index_unique(self, table_name: str, index_name: str) -> bool | None:
        rows = self._get_index_rows(table_name, index_name)
        if not rows:
            return None
        return int(rows[0]["non_unique"]) == 0

    def get_index_column_names(self, table_name: str, index_name: str) -> list[str]:
        return [row["name"] for row in self._get_index_rows(table_name, index_name)]
