"""SQL Server information schema reader."""

from typing import Any

from schemasmith.database.implementations.ansi import StandardInformationSchema

INDEX_FROM = """
    FROM sys.indexes i
    JOIN sys.tables t ON t.object_id = i.object_id
    WHERE t.schema_id = SCHEMA_ID()
      AND t.name = :table_name
      AND i.type > 0
      AND i.is_primary_key = 0
      AND i.is_unique_constraint = 0
"""


class SQLServerInformationSchema(StandardInformationSchema):
    """Metadata reader for SQL Server; indexes come from the ``sys`` catalog views."""

    schema_expression = "SCHEMA_NAME()"

    def database_exists(self, database_name: str) -> bool:
        query = "SELECT name FROM sys.databases WHERE name = :database_name"
        return bool(self._fetch_names(query, {"database_name": database_name}))

    def get_column_auto_increment(self, table_name: str, column_name: str) -> bool:
        query = """
            SELECT COLUMNPROPERTY(
                OBJECT_ID(QUOTENAME(SCHEMA_NAME()) + '.' + QUOTENAME(:table_name)),
                :column_name,
                'IsIdentity'
            ) AS value
        """
        value = self._fetch_value(
            query, {"table_name": table_name, "column_name": column_name}
        )
        return value == 1

    def get_index_names(self, table_name: str) -> list[str]:
        query = f"SELECT i.name AS name {INDEX_FROM} ORDER BY i.name"
        return self._fetch_names(query, {"table_name": table_name})

    def _get_index(self, table_name: str, index_name: str) -> dict[str, Any] | None:
        query = (
            f"SELECT i.name AS name, i.is_unique AS is_unique {INDEX_FROM}"
            " AND i.name = :index_name"
        )
        return self.connection.fetch_one(
            query, {"table_name": table_name, "index_name": index_name}
        )

    def get_index_unique(self, table_name: str, index_name: str) -> bool | None:
        index = self._get_index(table_name, index_name)
        return bool(index["is_unique"]) if index is not None else None

    def _get_index_columns(
        self, table_name: str, index_name: str, included: bool
    ) -> list[str]:
        order = "ic.index_column_id" if included else "ic.key_ordinal"
        query = f"""
            SELECT c.name AS name
            FROM sys.index_columns ic
            JOIN sys.indexes i ON i.object_id = ic.object_id AND i.index_id = ic.index_id
            JOIN sys.tables t ON t.object_id = i.object_id
            JOIN sys.columns c ON c.object_id = ic.object_id AND c.column_id = ic.column_id
            WHERE t.schema_id = SCHEMA_ID()
              AND t.name = :table_name
              AND i.name = :index_name
              AND i.is_primary_key = 0
              AND ic.is_included_column = :included
            ORDER BY {order}
        """
        return self._fetch_names(
            query,
            {"table_name": table_name, "index_name": index_name, "included": int(included)},
        )

    def get_index_column_names(self, table_name: str, index_name: str) -> list[str]:
        return self._get_index_columns(table_name, index_name, included=False)

    def get_index_include_column_names(
        self, table_name: str, index_name: str
    ) -> list[str]:
        return self._get_index_columns(table_name, index_name, included=True)

    def _get_foreign_key_references(
        self, table_name: str, foreign_key_name: str
    ) -> list[dict[str, Any]]:
        # KEY_COLUMN_USAGE has no POSITION_IN_UNIQUE_CONSTRAINT on SQL Server.
        query = """
            SELECT OBJECT_NAME(fkc.referenced_object_id) AS table_name,
                   COL_NAME(fkc.referenced_object_id, fkc.referenced_column_id) AS column_name
            FROM sys.foreign_keys fk
            JOIN sys.foreign_key_columns fkc ON fkc.constraint_object_id = fk.object_id
            JOIN sys.tables t ON t.object_id = fk.parent_object_id
            WHERE t.schema_id = SCHEMA_ID()
              AND t.name = :table_name
              AND fk.name = :foreign_key_name
            ORDER BY fkc.constraint_column_id
        """
        return self.connection.fetch_all(
            query, {"table_name": table_name, "foreign_key_name": foreign_key_name}
        )

    def get_column_default_constraint_name(
        self, table_name: str, column_name: str
    ) -> str | None:
        """Return the default constraint bound to a column, None if it has none."""
        query = """
            SELECT dc.name AS value
            FROM sys.default_constraints dc
            JOIN sys.tables t ON t.object_id = dc.parent_object_id
            JOIN sys.columns c
              ON c.object_id = dc.parent_object_id
             AND c.column_id = dc.parent_column_id
            WHERE t.schema_id = SCHEMA_ID()
              AND t.name = :table_name
              AND c.name = :column_name
        """
        return self._fetch_value(
            query, {"table_name": table_name, "column_name": column_name}
        )
