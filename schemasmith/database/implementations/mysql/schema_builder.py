"""MySQL schema builder implementation."""

from dataclasses import replace

from schemasmith.database.implementations.ansi import StandardSchemaBuilder
from schemasmith.database.schema import ColumnDefinition
from schemasmith.types import Operation


class MySQLSchemaBuilder(StandardSchemaBuilder):
    """MySQL-specific schema builder.

    MODIFY COLUMN replaces the whole column definition, so changing a column
    carries over its AUTO_INCREMENT and its default unless new ones are given.
    """

    def change_column_sql(
        self, table_name: str, column: ColumnDefinition
    ) -> list[str]:
        self.dialect.require(Operation.CHANGE_COLUMN)
        if not column.auto_increment:
            column = replace(
                column,
                auto_increment=self.information_schema.get_column_auto_increment(
                    table_name, column.name
                ),
            )

        definition = self.column_definition_sql(column)
        if column.default is None and not column.auto_increment:
            default_sql = self.information_schema.get_column_default_sql(
                table_name, column.name
            )
            if default_sql is not None:
                definition += f" DEFAULT {default_sql}"

        return [f"ALTER TABLE {self.q(table_name)} MODIFY COLUMN {definition}"]

    def drop_primary_key_sql(
        self, table_name: str, primary_key_name: str
    ) -> list[str]:
        self.dialect.require(Operation.REMOVE_PRIMARY_KEY)
        return [f"ALTER TABLE {self.q(table_name)} DROP PRIMARY KEY"]

    def drop_foreign_key_sql(
        self, table_name: str, foreign_key_name: str
    ) -> list[str]:
        self.dialect.require(Operation.REMOVE_FOREIGN_KEY)
        return [
            f"ALTER TABLE {self.q(table_name)} DROP FOREIGN KEY {self.q(foreign_key_name)}"
        ]

    def drop_index_sql(self, table_name: str, index_name: str) -> list[str]:
        return [f"DROP INDEX {self.q(index_name)} ON {self.q(table_name)}"]
