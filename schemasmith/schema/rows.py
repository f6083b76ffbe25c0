"""Rows of a table."""

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from schemasmith import validation
from schemasmith.types import RowType

if TYPE_CHECKING:
    from schemasmith.database.database import Database


class RowCollection:
    """Rows of a table, matched by primary key for updates and deletes.

    Values always travel as bound parameters.
    """

    def __init__(self, database: "Database", table_name: str) -> None:
        self.database = database
        self.table_name = table_name

    def add(self, row: Mapping[str, Any]) -> Any:
        """Insert a row.

        Returns:
            The generated identity when the table has an auto-increment
            primary key, otherwise None
        """
        validation.is_not_none(row, "row")
        return self.database.insert_row(self.table_name, dict(row))

    def update(self, row: Mapping[str, Any]) -> int:
        """Update the row whose primary key values are in ``row``.

        Returns:
            Number of updated rows
        """
        validation.is_not_none(row, "row")
        return self.database.update_row(self.table_name, dict(row))

    def delete(self, row: Mapping[str, Any]) -> int:
        """Delete the row whose primary key values are in ``row``.

        Returns:
            Number of deleted rows
        """
        validation.is_not_none(row, "row")
        return self.database.delete_row(self.table_name, dict(row))

    def set_column_value(self, column_name: str, value: Any) -> int:
        """Set one column to ``value`` on every row."""
        validation.identifier(column_name, "column_name", self.database.max_identifier_length)
        return self.database.set_column_value(self.table_name, column_name, value)

    def where(self, **conditions: Any) -> list[RowType]:
        """Return the rows whose columns equal the given values."""
        return self.database.select(self.table_name, conditions)

    def count(self) -> int:
        return self.database.count_rows(self.table_name)

    def __iter__(self) -> Iterator[RowType]:
        return iter(self.database.select(self.table_name))

    def __len__(self) -> int:
        return self.count()
