"""PostgreSQL schema builder implementation."""

from schemasmith.database.implementations.ansi import StandardSchemaBuilder
from schemasmith.database.schema import ColumnDefinition
from schemasmith.types import Operation


class PostgreSQLSchemaBuilder(StandardSchemaBuilder):
    """PostgreSQL-specific schema builder."""

    def change_column_sql(
        self, table_name: str, column: ColumnDefinition
    ) -> list[str]:
        self.dialect.require(Operation.CHANGE_COLUMN)
        column_sql = self.q(column.name)
        data_type = self.dialect.map_type(column.data_type, column.length)
        nullability = "DROP NOT NULL" if column.nullable else "SET NOT NULL"
        return [
            f"ALTER TABLE {self.q(table_name)} "
            f"ALTER COLUMN {column_sql} TYPE {data_type} USING {column_sql}::{data_type}, "
            f"ALTER COLUMN {column_sql} {nullability}"
        ]
