"""Primary key of a table."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from schemasmith import validation
from schemasmith.exceptions import SchemaObjectNotFoundError

if TYPE_CHECKING:
    from schemasmith.database.database import Database


class PrimaryKey:
    """The primary key of a table, of which there is at most one.

    Engines that cannot alter primary keys (SQLite) raise
    ``UnsupportedOperationError`` from ``add`` and ``remove``; the key can
    only be declared when the table is created.
    """

    def __init__(self, database: "Database", table_name: str) -> None:
        self.database = database
        self.table_name = table_name

    @property
    def name(self) -> str | None:
        """Constraint name, None if the table has no primary key."""
        return self.database.get_primary_key_name(self.table_name)

    @property
    def exists(self) -> bool:
        return self.name is not None

    @property
    def column_names(self) -> list[str]:
        """Key columns in key order, empty if the table has no primary key."""
        name = self.name
        if name is None:
            return []
        return self.database.get_primary_key_column_names(self.table_name, name)

    def add(
        self, column_names: str | Sequence[str], primary_key_name: str | None = None
    ) -> None:
        """Add a primary key to the table.

        Args:
            column_names: Key column, or key columns in order
            primary_key_name: Name; set by the naming convention when omitted
        """
        limit = self.database.max_identifier_length
        columns = validation.identifiers(column_names, "column_names", limit)
        validation.optional_identifier(primary_key_name, "primary_key_name", limit)

        if primary_key_name is None:
            primary_key_name = self.database.naming_convention.primary_key_name(
                self.table_name, columns
            )
        self.database.add_primary_key(self.table_name, columns, primary_key_name)

    def remove(self) -> None:
        """Remove the primary key.

        Raises:
            SchemaObjectNotFoundError: If the table has no primary key
        """
        name = self.name
        if name is None:
            raise SchemaObjectNotFoundError("primary key", "<none>", self.table_name)
        self.database.remove_primary_key(self.table_name, name)

    def __repr__(self) -> str:
        return f"PrimaryKey(table_name={self.table_name!r})"
