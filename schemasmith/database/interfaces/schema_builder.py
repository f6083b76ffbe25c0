"""Abstract schema builder interface for different SQL backends."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from schemasmith.database.interfaces.dialect import Dialect
from schemasmith.database.interfaces.information_schema import InformationSchema
from schemasmith.database.schema import (
    ColumnDefinition,
    ForeignKeyDefinition,
    TableDefinition,
)


class SchemaBuilder(ABC):
    """Abstract data definition language builder.

    Every method returns the statements to execute, in order. Operations the
    engine cannot perform raise ``UnsupportedOperationError`` before any SQL
    is produced.
    """

    def __init__(
        self, dialect: Dialect, information_schema: InformationSchema
    ) -> None:
        self.dialect = dialect
        self.information_schema = information_schema

    def q(self, identifier: str) -> str:
        """Shorthand for ``dialect.escape_identifier``."""
        return self.dialect.escape_identifier(identifier)

    @abstractmethod
    def create_database_sql(self, database_name: str) -> list[str]:
        """Generate CREATE DATABASE SQL."""
        pass

    @abstractmethod
    def drop_database_sql(self, database_name: str) -> list[str]:
        """Generate DROP DATABASE SQL."""
        pass

    @abstractmethod
    def create_table_sql(
        self, table: TableDefinition, primary_key_name: str | None
    ) -> list[str]:
        """Generate CREATE TABLE SQL.

        Args:
            table: Table definition; every foreign key must carry a name
            primary_key_name: Name of the primary key constraint, None when
                no column is part of the primary key

        Returns:
            CREATE TABLE statements
        """
        pass

    @abstractmethod
    def drop_table_sql(self, table_name: str) -> list[str]:
        """Generate DROP TABLE SQL."""
        pass

    @abstractmethod
    def rename_table_sql(self, table_name: str, new_table_name: str) -> list[str]:
        """Generate SQL renaming a table."""
        pass

    @abstractmethod
    def column_definition_sql(self, column: ColumnDefinition) -> str:
        """Generate the column definition fragment used by CREATE and ALTER."""
        pass

    @abstractmethod
    def add_column_sql(self, table_name: str, column: ColumnDefinition) -> list[str]:
        """Generate ALTER TABLE ADD COLUMN SQL."""
        pass

    @abstractmethod
    def add_column_with_default_sql(
        self,
        table_name: str,
        column: ColumnDefinition,
        default_value: Any,
        default_constraint_name: str,
    ) -> list[str]:
        """Generate SQL adding a column and filling existing rows with a value.

        Args:
            table_name: Name of the table
            column: Column definition to add
            default_value: Value given to every existing row
            default_constraint_name: Name for engines that need a named
                default constraint

        Returns:
            ALTER TABLE statements
        """
        pass

    @abstractmethod
    def change_column_sql(
        self, table_name: str, column: ColumnDefinition
    ) -> list[str]:
        """Generate SQL changing a column's type and nullability."""
        pass

    @abstractmethod
    def drop_column_sql(self, table_name: str, column_name: str) -> list[str]:
        """Generate ALTER TABLE DROP COLUMN SQL."""
        pass

    @abstractmethod
    def rename_column_sql(
        self, table_name: str, column_name: str, new_column_name: str
    ) -> list[str]:
        """Generate SQL renaming a column."""
        pass

    @abstractmethod
    def add_primary_key_sql(
        self, table_name: str, column_names: Sequence[str], primary_key_name: str
    ) -> list[str]:
        """Generate SQL adding a primary key."""
        pass

    @abstractmethod
    def drop_primary_key_sql(
        self, table_name: str, primary_key_name: str
    ) -> list[str]:
        """Generate SQL removing a primary key."""
        pass

    @abstractmethod
    def add_foreign_key_sql(
        self, table_name: str, foreign_key: ForeignKeyDefinition
    ) -> list[str]:
        """Generate SQL adding a named foreign key."""
        pass

    @abstractmethod
    def drop_foreign_key_sql(
        self, table_name: str, foreign_key_name: str
    ) -> list[str]:
        """Generate SQL removing a foreign key."""
        pass

    @abstractmethod
    def create_index_sql(
        self,
        table_name: str,
        index_name: str,
        column_names: Sequence[str],
        unique: bool = False,
        include_column_names: Sequence[str] = (),
    ) -> list[str]:
        """Generate CREATE INDEX SQL.

        Args:
            table_name: Name of the table
            index_name: Name of the index
            column_names: Key columns, in order
            unique: Whether the index is unique
            include_column_names: Non-key covering columns

        Returns:
            CREATE INDEX statements
        """
        pass

    @abstractmethod
    def drop_index_sql(self, table_name: str, index_name: str) -> list[str]:
        """Generate DROP INDEX SQL."""
        pass
