"""SQLite schema builder implementation."""

import re
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any
from uuid import UUID

from schemasmith.database.implementations.ansi import StandardSchemaBuilder
from schemasmith.database.schema import (
    ColumnDefinition,
    ForeignKeyDefinition,
    TableDefinition,
)
from schemasmith.exceptions import SchemaObjectNotFoundError, UnsupportedOperationError
from schemasmith.types import Operation

from .information_schema import FOREIGN_KEY_PATTERN, unquote_identifier

REBUILD_PREFIX = "__rebuild_"

# Stand-in values for NOT NULL columns added to empty tables; SQLite
# rejects NOT NULL without a default even when no row needs a value.
IMPLICIT_DEFAULTS: dict[type, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    Decimal: Decimal(0),
    str: "",
    bytes: b"",
    datetime: datetime(1970, 1, 1),
    date: date(1970, 1, 1),
    time: time(0),
    UUID: UUID(int=0),
}
NUMERIC_TYPE_PATTERN = re.compile(
    r"INT|REAL|FLOA|DOUB|NUM|DEC|BOOL|BIT", re.IGNORECASE
)


def implicit_default(data_type: Any) -> Any:
    """Return the zero value used to add a NOT NULL column to an empty table."""
    if isinstance(data_type, str):
        return 0 if NUMERIC_TYPE_PATTERN.search(data_type) else ""
    return IMPLICIT_DEFAULTS.get(data_type, "")


class SQLiteSchemaBuilder(StandardSchemaBuilder):
    """SQLite-specific schema builder.

    SQLite keeps a table's constraints in its CREATE TABLE statement. Adding
    or removing a foreign key rewrites that statement and copies the table:
    the rows move to a temporary table created from the new statement, the
    original is dropped, the copy takes its name and its indexes are recreated.
    """

    def create_database_sql(self, database_name: str) -> list[str]:
        raise UnsupportedOperationError(
            "create database", self.dialect.display_name, "databases are files"
        )

    def drop_database_sql(self, database_name: str) -> list[str]:
        raise UnsupportedOperationError(
            "drop database", self.dialect.display_name, "databases are files"
        )

    def create_table_sql(
        self, table: TableDefinition, primary_key_name: str | None
    ) -> list[str]:
        auto_increment = [column for column in table.columns if column.auto_increment]
        if not auto_increment:
            return super().create_table_sql(table, primary_key_name)

        # AUTOINCREMENT is only valid on an inline INTEGER PRIMARY KEY.
        if len(table.primary_key_column_names) != 1:
            raise UnsupportedOperationError(
                "auto increment",
                self.dialect.display_name,
                "the auto-increment column must be the only primary key column",
            )
        if primary_key_name is None:
            raise ValueError("Primary key name must be resolved before building SQL")

        definitions = []
        for column in table.columns:
            if column.auto_increment:
                definitions.append(
                    f"{self.q(column.name)} INTEGER NOT NULL "
                    f"CONSTRAINT {self.q(primary_key_name)} PRIMARY KEY "
                    f"{self.dialect.auto_increment_statement}"
                )
            else:
                definitions.append(self.column_definition_sql(column))

        for foreign_key in table.foreign_keys:
            definitions.append(self.foreign_key_constraint_sql(foreign_key))

        return [f"CREATE TABLE {self.q(table.name)} ({', '.join(definitions)})"]

    def column_definition_sql(self, column: ColumnDefinition) -> str:
        parts = [
            self.q(column.name),
            self.dialect.map_type(column.data_type, column.length),
            "NULL" if column.nullable else "NOT NULL",
        ]
        if column.default is not None:
            parts.append(f"DEFAULT {self.dialect.render_literal(column.default)}")
        return " ".join(parts)

    def add_column_sql(self, table_name: str, column: ColumnDefinition) -> list[str]:
        if column.auto_increment:
            raise UnsupportedOperationError(
                "auto increment",
                self.dialect.display_name,
                "auto-increment columns can only be created with the table",
            )
        if not column.nullable and column.default is None:
            column = ColumnDefinition(
                column.name,
                column.data_type,
                nullable=False,
                length=column.length,
                default=implicit_default(column.data_type),
            )
        return super().add_column_sql(table_name, column)

    def add_column_with_default_sql(
        self,
        table_name: str,
        column: ColumnDefinition,
        default_value: Any,
        default_constraint_name: str,
    ) -> list[str]:
        # Defaults cannot be dropped, so the fill value stays the default
        # unless another one is declared.
        if column.default is None:
            column = ColumnDefinition(
                column.name,
                column.data_type,
                nullable=column.nullable,
                length=column.length,
                default=default_value,
            )
        return self.add_column_sql(table_name, column)

    def add_foreign_key_sql(
        self, table_name: str, foreign_key: ForeignKeyDefinition
    ) -> list[str]:
        self.dialect.require(Operation.ADD_FOREIGN_KEY)
        body, tail = self._split_table_sql(table_name)
        body = f"{body}, {self.foreign_key_constraint_sql(foreign_key)}"
        return self._rebuild_table_sql(table_name, body, tail)

    def drop_foreign_key_sql(
        self, table_name: str, foreign_key_name: str
    ) -> list[str]:
        self.dialect.require(Operation.REMOVE_FOREIGN_KEY)
        body, tail = self._split_table_sql(table_name)

        for match in FOREIGN_KEY_PATTERN.finditer(body):
            if unquote_identifier(match.group("name")).lower() != foreign_key_name.lower():
                continue
            start = body.rfind(",", 0, match.start())
            body = body[:start] + body[match.end():]
            return self._rebuild_table_sql(table_name, body, tail)

        raise UnsupportedOperationError(
            Operation.REMOVE_FOREIGN_KEY.value,
            self.dialect.display_name,
            f"foreign key '{foreign_key_name}' is not declared with a CONSTRAINT name",
        )

    def _split_table_sql(self, table_name: str) -> tuple[str, str]:
        sql = self.information_schema.get_table_sql(table_name)
        if sql is None:
            raise SchemaObjectNotFoundError("table", table_name)
        start = sql.index("(")
        end = sql.rindex(")")
        return sql[start + 1 : end], sql[end + 1 :]

    def _rebuild_table_sql(
        self, table_name: str, body: str, tail: str
    ) -> list[str]:
        temporary = self.q(f"{REBUILD_PREFIX}{table_name}")
        index_sql = self.information_schema.get_index_sql(table_name)
        return [
            f"CREATE TABLE {temporary} ({body}){tail}",
            f"INSERT INTO {temporary} SELECT * FROM {self.q(table_name)}",
            f"DROP TABLE {self.q(table_name)}",
            # Views on the table would fail the schema check of a modern rename.
            "PRAGMA legacy_alter_table = ON",
            f"ALTER TABLE {temporary} RENAME TO {self.q(table_name)}",
            "PRAGMA legacy_alter_table = OFF",
            *index_sql,
        ]
