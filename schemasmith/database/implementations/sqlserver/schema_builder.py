"""SQL Server schema builder implementation."""

from typing import Any

from schemasmith.database.implementations.ansi import StandardSchemaBuilder
from schemasmith.database.schema import ColumnDefinition
from schemasmith.types import Operation


class SQLServerSchemaBuilder(StandardSchemaBuilder):
    """SQL Server-specific schema builder.

    Defaults are named constraints here, so adding a column with a fill value
    names its default constraint in order to drop it again afterwards.
    Renames go through ``sp_rename``.
    """

    add_column_keyword = "ADD"

    def drop_database_sql(self, database_name: str) -> list[str]:
        return [
            f"ALTER DATABASE {self.q(database_name)} SET SINGLE_USER WITH ROLLBACK IMMEDIATE",
            f"DROP DATABASE {self.q(database_name)}",
        ]

    def rename_table_sql(self, table_name: str, new_table_name: str) -> list[str]:
        return [
            f"EXEC sp_rename {self.dialect.quote_string(self.q(table_name))}, "
            f"{self.dialect.quote_string(new_table_name)}"
        ]

    def rename_column_sql(
        self, table_name: str, column_name: str, new_column_name: str
    ) -> list[str]:
        self.dialect.require(Operation.RENAME_COLUMN)
        qualified = f"{self.q(table_name)}.{self.q(column_name)}"
        return [
            f"EXEC sp_rename {self.dialect.quote_string(qualified)}, "
            f"{self.dialect.quote_string(new_column_name)}, N'COLUMN'"
        ]

    def add_column_with_default_sql(
        self,
        table_name: str,
        column: ColumnDefinition,
        default_value: Any,
        default_constraint_name: str,
    ) -> list[str]:
        definition = ColumnDefinition(
            column.name, column.data_type, nullable=column.nullable, length=column.length
        )
        # WITH VALUES fills existing rows of nullable columns too.
        with_values = " WITH VALUES" if column.nullable else ""
        statements = [
            f"ALTER TABLE {self.q(table_name)} ADD {self.column_definition_sql(definition)} "
            f"CONSTRAINT {self.q(default_constraint_name)} "
            f"DEFAULT {self.dialect.render_literal(default_value)}{with_values}"
        ]
        if column.default == default_value:
            return statements

        statements += self.drop_default_sql(table_name, column.name, default_constraint_name)
        if column.default is not None:
            statements += self.set_default_sql(
                table_name, column.name, column.default, default_constraint_name
            )
        return statements

    def drop_default_sql(
        self, table_name: str, column_name: str, default_constraint_name: str
    ) -> list[str]:
        self.dialect.require(Operation.DROP_DEFAULT)
        return [
            f"ALTER TABLE {self.q(table_name)} "
            f"DROP CONSTRAINT {self.q(default_constraint_name)}"
        ]

    def set_default_sql(
        self,
        table_name: str,
        column_name: str,
        value: Any,
        default_constraint_name: str,
    ) -> list[str]:
        return [
            f"ALTER TABLE {self.q(table_name)} "
            f"ADD CONSTRAINT {self.q(default_constraint_name)} "
            f"DEFAULT {self.dialect.render_literal(value)} FOR {self.q(column_name)}"
        ]

    def change_column_sql(
        self, table_name: str, column: ColumnDefinition
    ) -> list[str]:
        # ALTER COLUMN takes neither DEFAULT nor IDENTITY.
        self.dialect.require(Operation.CHANGE_COLUMN)
        data_type = self.dialect.map_type(column.data_type, column.length)
        nullability = "NULL" if column.nullable else "NOT NULL"
        return [
            f"ALTER TABLE {self.q(table_name)} "
            f"ALTER COLUMN {self.q(column.name)} {data_type} {nullability}"
        ]

    def drop_index_sql(self, table_name: str, index_name: str) -> list[str]:
        return [f"DROP INDEX {self.q(index_name)} ON {self.q(table_name)}"]

    def drop_column_sql(self, table_name: str, column_name: str) -> list[str]:
        # DROP COLUMN fails while a default constraint is bound to the column.
        self.dialect.require(Operation.REMOVE_COLUMN)
        statements = []
        constraint_name = self.information_schema.get_column_default_constraint_name(
            table_name, column_name
        )
        if constraint_name is not None:
            statements += self.drop_default_sql(table_name, column_name, constraint_name)
        statements.append(
            f"ALTER TABLE {self.q(table_name)} DROP COLUMN {self.q(column_name)}"
        )
        return statements
