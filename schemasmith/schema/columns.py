"""Columns of a table."""

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from schemasmith import validation
from schemasmith.database.schema import ColumnDefinition
from schemasmith.exceptions import SchemaObjectNotFoundError
from schemasmith.naming import match_name
from schemasmith.types import DataType

if TYPE_CHECKING:
    from schemasmith.database.database import Database


class ColumnInfo:
    """A column of a table; every attribute is read from the database on access."""

    def __init__(self, database: "Database", table_name: str, name: str) -> None:
        self.database = database
        self.table_name = table_name
        self.name = name

    @property
    def nullable(self) -> bool | None:
        return self.database.get_column_nullable(self.table_name, self.name)

    @property
    def data_type(self) -> str | None:
        """SQL type as reported by the engine, e.g. ``NVARCHAR(50)``."""
        return self.database.get_column_data_type(self.table_name, self.name)

    @property
    def auto_increment(self) -> bool:
        return self.database.get_column_auto_increment(self.table_name, self.name)

    def rename(self, new_name: str) -> None:
        """Rename the column; this object follows the new name."""
        ColumnCollection(self.database, self.table_name).rename(self.name, new_name)
        self.name = new_name

    def change(
        self, data_type: DataType, nullable: bool = False, length: int | None = None
    ) -> None:
        ColumnCollection(self.database, self.table_name).change(
            self.name, data_type, nullable, length
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColumnInfo):
            return NotImplemented
        return (
            self.database is other.database
            and self.table_name == other.table_name
            and self.name == other.name
        )

    def __hash__(self) -> int:
        return hash((id(self.database), self.table_name, self.name))

    def __repr__(self) -> str:
        return f"ColumnInfo(table_name={self.table_name!r}, name={self.name!r})"


class ColumnCollection:
    """Collection of all columns in a table, in ordinal order."""

    def __init__(self, database: "Database", table_name: str) -> None:
        self.database = database
        self.table_name = table_name

    @property
    def _limit(self) -> int:
        return self.database.max_identifier_length

    def __getitem__(self, column_name: str) -> ColumnInfo | None:
        """Get a column by name. Returns None if the column does not exist."""
        validation.identifier(column_name, "column_name", self._limit)
        name = match_name(self.database.get_column_names(self.table_name), column_name)
        return ColumnInfo(self.database, self.table_name, name) if name is not None else None

    def get(self, column_name: str) -> ColumnInfo | None:
        return self[column_name]

    def __contains__(self, column_name: object) -> bool:
        if not isinstance(column_name, str):
            return False
        names = self.database.get_column_names(self.table_name)
        return match_name(names, column_name) is not None

    def __iter__(self) -> Iterator[ColumnInfo]:
        for name in self.database.get_column_names(self.table_name):
            yield ColumnInfo(self.database, self.table_name, name)

    def __len__(self) -> int:
        return len(self.database.get_column_names(self.table_name))

    def add(
        self,
        column_name: str,
        data_type: DataType,
        nullable: bool = False,
        length: int | None = None,
        default_value: Any = None,
        default: Any = None,
    ) -> ColumnInfo:
        """Add a column to the table.

        Args:
            column_name: Column name
            data_type: Python type or raw SQL type string
            nullable: Whether the column accepts NULL
            length: Length of string columns, 50 when omitted
            default_value: Value given to the rows already in the table;
                required for a non-nullable column when the table has rows
                and no ``default`` is declared
            default: Default declared on the column for future inserts

        Returns:
            The new column

        Raises:
            MissingDefaultValueError: If existing rows would be left without
                a value
        """
        validation.identifier(column_name, "column_name", self._limit)
        validation.is_not_none(data_type, "data_type")
        column = ColumnDefinition(
            column_name, data_type, nullable=nullable, length=length, default=default
        )
        self.database.add_column(self.table_name, column, default_value)
        return ColumnInfo(self.database, self.table_name, column_name)

    def change(
        self,
        column_name: str,
        data_type: DataType,
        nullable: bool = False,
        length: int | None = None,
    ) -> None:
        """Change a column's type and nullability.

        Raises:
            SchemaObjectNotFoundError: If the column does not exist
            UnsupportedOperationError: If the engine cannot change columns
            MissingDefaultValueError: If the column becomes non-nullable
                while some rows hold NULL
        """
        name = self._require(column_name)
        validation.is_not_none(data_type, "data_type")
        column = ColumnDefinition(name, data_type, nullable=nullable, length=length)
        self.database.change_column(self.table_name, column)

    def rename(self, column_name: str, new_column_name: str) -> None:
        """Rename a column.

        Raises:
            SchemaObjectNotFoundError: If the column does not exist
        """
        validation.identifier(new_column_name, "new_column_name", self._limit)
        self.database.rename_column(
            self.table_name, self._require(column_name), new_column_name
        )

    def remove(self, column_name: str) -> None:
        """Remove a column.

        Raises:
            SchemaObjectNotFoundError: If the column does not exist
        """
        self.database.remove_column(self.table_name, self._require(column_name))

    def _require(self, column_name: str) -> str:
        validation.identifier(column_name, "column_name", self._limit)
        name = match_name(self.database.get_column_names(self.table_name), column_name)
        if name is None:
            raise SchemaObjectNotFoundError("column", column_name, self.table_name)
        return name
