"""Information schema reader built on the standard INFORMATION_SCHEMA views."""

from typing import Any, ClassVar

from schemasmith.database.interfaces.information_schema import InformationSchema


class StandardInformationSchema(InformationSchema):
    """Reader for engines exposing the standard INFORMATION_SCHEMA views.

    Subclasses provide the SQL expression naming the current schema, plus the
    index queries, which are not covered by the standard.
    """

    schema_expression: ClassVar[str]

    def get_schema(self) -> str | None:
        return self._fetch_value(f"SELECT {self.schema_expression} AS value")

    def get_table_names(self) -> list[str]:
        query = f"""
            SELECT TABLE_NAME AS name
            FROM INFORMATION_SCHEMA.TABLES
            WHERE TABLE_SCHEMA = {self.schema_expression}
              AND TABLE_TYPE = 'BASE TABLE'
            ORDER BY TABLE_NAME
        """
        return self._fetch_names(query)

    def get_column_names(self, table_name: str) -> list[str]:
        query = f"""
            SELECT COLUMN_NAME AS name
            FROM INFORMATION_SCHEMA.COLUMNS
            WHERE TABLE_SCHEMA = {self.schema_expression}
              AND TABLE_NAME = :table_name
            ORDER BY ORDINAL_POSITION
        """
        return self._fetch_names(query, {"table_name": table_name})

    def _get_column(self, table_name: str, column_name: str) -> dict[str, Any] | None:
        query = f"""
            SELECT IS_NULLABLE AS is_nullable,
                   DATA_TYPE AS data_type,
                   CHARACTER_MAXIMUM_LENGTH AS max_length,
                   COLUMN_DEFAULT AS column_default
            FROM INFORMATION_SCHEMA.COLUMNS
            WHERE TABLE_SCHEMA = {self.schema_expression}
              AND TABLE_NAME = :table_name
              AND COLUMN_NAME = :column_name
        """
        return self.connection.fetch_one(
            query, {"table_name": table_name, "column_name": column_name}
        )

    def get_column_nullable(self, table_name: str, column_name: str) -> bool | None:
        column = self._get_column(table_name, column_name)
        if column is None:
            return None
        return column["is_nullable"] == "YES"

    def get_column_data_type(self, table_name: str, column_name: str) -> str | None:
        column = self._get_column(table_name, column_name)
        if column is None:
            return None
        return self.format_data_type(column["data_type"], column["max_length"])

    def format_data_type(self, data_type: str, max_length: int | None) -> str:
        if max_length is None:
            return data_type
        if max_length == -1:
            return f"{data_type}(max)"
        return f"{data_type}({max_length})"

    def _get_constraint_names(self, table_name: str, constraint_type: str) -> list[str]:
        query = f"""
            SELECT CONSTRAINT_NAME AS name
            FROM INFORMATION_SCHEMA.TABLE_CONSTRAINTS
            WHERE TABLE_SCHEMA = {self.schema_expression}
              AND TABLE_NAME = :table_name
              AND CONSTRAINT_TYPE = :constraint_type
            ORDER BY CONSTRAINT_NAME
        """
        return self._fetch_names(
            query, {"table_name": table_name, "constraint_type": constraint_type}
        )

    def _get_constraint_column_names(
        self, table_name: str, constraint_name: str
    ) -> list[str]:
        query = f"""
            SELECT COLUMN_NAME AS name
            FROM INFORMATION_SCHEMA.KEY_COLUMN_USAGE
            WHERE TABLE_SCHEMA = {self.schema_expression}
              AND TABLE_NAME = :table_name
              AND CONSTRAINT_NAME = :constraint_name
            ORDER BY ORDINAL_POSITION
        """
        return self._fetch_names(
            query, {"table_name": table_name, "constraint_name": constraint_name}
        )

    def get_primary_key_name(self, table_name: str) -> str | None:
        names = self._get_constraint_names(table_name, "PRIMARY KEY")
        return names[0] if names else None

    def get_primary_key_column_names(
        self, table_name: str, primary_key_name: str
    ) -> list[str]:
        return self._get_constraint_column_names(table_name, primary_key_name)

    def get_foreign_key_names(self, table_name: str) -> list[str]:
        return self._get_constraint_names(table_name, "FOREIGN KEY")

    def get_foreign_key_column_names(
        self, table_name: str, foreign_key_name: str
    ) -> list[str]:
        return self._get_constraint_column_names(table_name, foreign_key_name)

    def _get_foreign_key_references(
        self, table_name: str, foreign_key_name: str
    ) -> list[dict[str, Any]]:
        query = f"""
            SELECT target.TABLE_NAME AS table_name, target.COLUMN_NAME AS column_name
            FROM INFORMATION_SCHEMA.REFERENTIAL_CONSTRAINTS rc
            JOIN INFORMATION_SCHEMA.KEY_COLUMN_USAGE source
              ON source.CONSTRAINT_SCHEMA = rc.CONSTRAINT_SCHEMA
             AND source.CONSTRAINT_NAME = rc.CONSTRAINT_NAME
            JOIN INFORMATION_SCHEMA.KEY_COLUMN_USAGE target
              ON target.CONSTRAINT_SCHEMA = rc.UNIQUE_CONSTRAINT_SCHEMA
             AND target.CONSTRAINT_NAME = rc.UNIQUE_CONSTRAINT_NAME
             AND target.ORDINAL_POSITION = source.POSITION_IN_UNIQUE_CONSTRAINT
            WHERE rc.CONSTRAINT_SCHEMA = {self.schema_expression}
              AND rc.CONSTRAINT_NAME = :foreign_key_name
              AND source.TABLE_NAME = :table_name
            ORDER BY source.ORDINAL_POSITION
        """
        return self.connection.fetch_all(
            query, {"table_name": table_name, "foreign_key_name": foreign_key_name}
        )

    def get_foreign_key_foreign_table_name(
        self, table_name: str, foreign_key_name: str
    ) -> str | None:
        references = self._get_foreign_key_references(table_name, foreign_key_name)
        return references[0]["table_name"] if references else None

    def get_foreign_key_foreign_column_names(
        self, table_name: str, foreign_key_name: str
    ) -> list[str]:
        references = self._get_foreign_key_references(table_name, foreign_key_name)
        return [reference["column_name"] for reference in references]
