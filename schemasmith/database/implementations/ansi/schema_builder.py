"""Schema builder for engines that follow standard SQL."""

from collections.abc import Sequence
from dataclasses import replace
from typing import Any

from schemasmith.database.interfaces.schema_builder import SchemaBuilder
from schemasmith.database.schema import (
    ColumnDefinition,
    ForeignKeyDefinition,
    TableDefinition,
)
from schemasmith.types import Operation


class StandardSchemaBuilder(SchemaBuilder):
    """Standard SQL schema builder; engines override the non-standard parts."""

    add_column_keyword = "ADD COLUMN"

    def create_database_sql(self, database_name: str) -> list[str]:
        return [f"CREATE DATABASE {self.q(database_name)}"]

    def drop_database_sql(self, database_name: str) -> list[str]:
        return [f"DROP DATABASE {self.q(database_name)}"]

    def column_definition_sql(self, column: ColumnDefinition) -> str:
        parts = [
            self.q(column.name),
            self.dialect.map_type(column.data_type, column.length, column.auto_increment),
            "NULL" if column.nullable else "NOT NULL",
        ]
        if column.default is not None:
            parts.append(f"DEFAULT {self.dialect.render_literal(column.default)}")
        if column.auto_increment and self.dialect.auto_increment_statement:
            parts.append(self.dialect.auto_increment_statement)
        return " ".join(parts)

    def primary_key_constraint_sql(
        self, primary_key_name: str, column_names: Sequence[str]
    ) -> str:
        columns_sql = self.dialect.escape_identifiers(list(column_names))
        return f"CONSTRAINT {self.q(primary_key_name)} PRIMARY KEY ({columns_sql})"

    def foreign_key_constraint_sql(self, foreign_key: ForeignKeyDefinition) -> str:
        if foreign_key.name is None:
            raise ValueError("Foreign key name must be resolved before building SQL")
        columns_sql = self.dialect.escape_identifiers(list(foreign_key.column_names))
        foreign_columns_sql = self.dialect.escape_identifiers(
            list(foreign_key.foreign_column_names or foreign_key.column_names)
        )
        return (
            f"CONSTRAINT {self.q(foreign_key.name)} FOREIGN KEY ({columns_sql}) "
            f"REFERENCES {self.q(foreign_key.foreign_table_name)} ({foreign_columns_sql})"
        )

    def create_table_sql(
        self, table: TableDefinition, primary_key_name: str | None
    ) -> list[str]:
        definitions = [self.column_definition_sql(column) for column in table.columns]

        primary_key_columns = table.primary_key_column_names
        if primary_key_columns:
            if primary_key_name is None:
                raise ValueError("Primary key name must be resolved before building SQL")
            definitions.append(
                self.primary_key_constraint_sql(primary_key_name, primary_key_columns)
            )

        for foreign_key in table.foreign_keys:
            definitions.append(self.foreign_key_constraint_sql(foreign_key))

        return [f"CREATE TABLE {self.q(table.name)} ({', '.join(definitions)})"]

    def drop_table_sql(self, table_name: str) -> list[str]:
        return [f"DROP TABLE {self.q(table_name)}"]

    def rename_table_sql(self, table_name: str, new_table_name: str) -> list[str]:
        return [f"ALTER TABLE {self.q(table_name)} RENAME TO {self.q(new_table_name)}"]

    def add_column_sql(self, table_name: str, column: ColumnDefinition) -> list[str]:
        return [
            f"ALTER TABLE {self.q(table_name)} {self.add_column_keyword} "
            f"{self.column_definition_sql(column)}"
        ]

    def add_column_with_default_sql(
        self,
        table_name: str,
        column: ColumnDefinition,
        default_value: Any,
        default_constraint_name: str,
    ) -> list[str]:
        # The column and its values arrive in one statement; the temporary
        # default is dropped afterwards unless it is also the declared one.
        statements = self.add_column_sql(table_name, replace(column, default=default_value))
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
            f"ALTER TABLE {self.q(table_name)} ALTER COLUMN {self.q(column_name)} "
            "DROP DEFAULT"
        ]

    def set_default_sql(
        self,
        table_name: str,
        column_name: str,
        value: Any,
        default_constraint_name: str,
    ) -> list[str]:
        return [
            f"ALTER TABLE {self.q(table_name)} ALTER COLUMN {self.q(column_name)} "
            f"SET DEFAULT {self.dialect.render_literal(value)}"
        ]

    def change_column_sql(
        self, table_name: str, column: ColumnDefinition
    ) -> list[str]:
        self.dialect.require(Operation.CHANGE_COLUMN)
        return [
            f"ALTER TABLE {self.q(table_name)} ALTER COLUMN "
            f"{self.column_definition_sql(column)}"
        ]

    def drop_column_sql(self, table_name: str, column_name: str) -> list[str]:
        self.dialect.require(Operation.REMOVE_COLUMN)
        return [f"ALTER TABLE {self.q(table_name)} DROP COLUMN {self.q(column_name)}"]

    def rename_column_sql(
        self, table_name: str, column_name: str, new_column_name: str
    ) -> list[str]:
        self.dialect.require(Operation.RENAME_COLUMN)
        return [
            f"ALTER TABLE {self.q(table_name)} RENAME COLUMN {self.q(column_name)} "
            f"TO {self.q(new_column_name)}"
        ]

    def add_primary_key_sql(
        self, table_name: str, column_names: Sequence[str], primary_key_name: str
    ) -> list[str]:
        self.dialect.require(Operation.ADD_PRIMARY_KEY)
        constraint = self.primary_key_constraint_sql(primary_key_name, column_names)
        return [f"ALTER TABLE {self.q(table_name)} ADD {constraint}"]

    def drop_primary_key_sql(
        self, table_name: str, primary_key_name: str
    ) -> list[str]:
        self.dialect.require(Operation.REMOVE_PRIMARY_KEY)
        return [
            f"ALTER TABLE {self.q(table_name)} DROP CONSTRAINT {self.q(primary_key_name)}"
        ]

    def add_foreign_key_sql(
        self, table_name: str, foreign_key: ForeignKeyDefinition
    ) -> list[str]:
        self.dialect.require(Operation.ADD_FOREIGN_KEY)
        constraint = self.foreign_key_constraint_sql(foreign_key)
        return [f"ALTER TABLE {self.q(table_name)} ADD {constraint}"]

    def drop_foreign_key_sql(
        self, table_name: str, foreign_key_name: str
    ) -> list[str]:
        self.dialect.require(Operation.REMOVE_FOREIGN_KEY)
        return [
            f"ALTER TABLE {self.q(table_name)} DROP CONSTRAINT {self.q(foreign_key_name)}"
        ]

    def create_index_sql(
        self,
        table_name: str,
        index_name: str,
        column_names: Sequence[str],
        unique: bool = False,
        include_column_names: Sequence[str] = (),
    ) -> list[str]:
        if include_column_names:
            self.dialect.require(Operation.INCLUDE_COLUMNS)

        unique_sql = "UNIQUE " if unique else ""
        columns_sql = self.dialect.escape_identifiers(list(column_names))
        query = (
            f"CREATE {unique_sql}INDEX {self.q(index_name)} "
            f"ON {self.q(table_name)} ({columns_sql})"
        )
        if include_column_names:
            include_sql = self.dialect.escape_identifiers(list(include_column_names))
            query += f" INCLUDE ({include_sql})"
        return [query]

    def drop_index_sql(self, table_name: str, index_name: str) -> list[str]:
        return [f"DROP INDEX {self.q(index_name)}"]
