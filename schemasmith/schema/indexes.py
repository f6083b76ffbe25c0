"""Indexes of a table."""

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from schemasmith import validation
from schemasmith.exceptions import SchemaObjectNotFoundError
from schemasmith.naming import match_name

if TYPE_CHECKING:
    from schemasmith.database.database import Database


class IndexInfo:
    """An index of a table."""

    def __init__(self, database: "Database", table_name: str, name: str) -> None:
        self.database = database
        self.table_name = table_name
        self.name = name

    @property
    def unique(self) -> bool | None:
        return self.database.get_index_unique(self.table_name, self.name)

    @property
    def column_names(self) -> list[str]:
        """Key columns in key order."""
        return self.database.get_index_column_names(self.table_name, self.name)

    @property
    def include_column_names(self) -> list[str]:
        """Non-key covering columns; always empty on engines without them."""
        return self.database.get_index_include_column_names(self.table_name, self.name)

    def __repr__(self) -> str:
        return f"IndexInfo(table_name={self.table_name!r}, name={self.name!r})"


class IndexCollection:
    """Collection of all indexes in a table, primary keys excluded.

    An index is considered present only when it covers at least one column.
    """

    def __init__(self, database: "Database", table_name: str) -> None:
        self.database = database
        self.table_name = table_name

    @property
    def _limit(self) -> int:
        return self.database.max_identifier_length

    def _find(self, index_name: str) -> str | None:
        name = match_name(self.database.get_index_names(self.table_name), index_name)
        if name is None or not self.database.get_index_column_names(self.table_name, name):
            return None
        return name

    def __getitem__(self, index_name: str) -> IndexInfo | None:
        """Get an index by name. Returns None if the index does not exist."""
        validation.identifier(index_name, "index_name", self._limit)
        name = self._find(index_name)
        return IndexInfo(self.database, self.table_name, name) if name else None

    def get(self, index_name: str) -> IndexInfo | None:
        return self[index_name]

    def __contains__(self, index_name: object) -> bool:
        if not isinstance(index_name, str):
            return False
        return self._find(index_name) is not None

    def __iter__(self) -> Iterator[IndexInfo]:
        for name in self.database.get_index_names(self.table_name):
            yield IndexInfo(self.database, self.table_name, name)

    def __len__(self) -> int:
        return len(self.database.get_index_names(self.table_name))

    def add(
        self,
        column_names: str | Sequence[str],
        unique: bool = False,
        index_name: str | None = None,
        include_column_names: Sequence[str] | None = None,
    ) -> IndexInfo:
        """Add an index to the table.

        Args:
            column_names: Key column, or key columns in order
            unique: Whether the index is unique
            index_name: Index name; set by the naming convention when omitted
            include_column_names: Non-key covering columns, on engines that
                support them

        Returns:
            The new index

        Raises:
            UnsupportedOperationError: If include columns are given and the
                engine has none
        """
        columns = validation.identifiers(column_names, "column_names", self._limit)
        validation.optional_identifier(index_name, "index_name", self._limit)
        include_columns = validation.optional_identifiers(
            include_column_names, "include_column_names", self._limit
        )

        if index_name is None:
            index_name = self.database.naming_convention.index_name(
                self.table_name, columns, unique
            )
        self.database.add_index(
            self.table_name, columns, unique, index_name, include_columns
        )
        return IndexInfo(self.database, self.table_name, index_name)

    def add_unique(
        self, column_names: str | Sequence[str], index_name: str | None = None
    ) -> IndexInfo:
        """Add a unique index to the table."""
        return self.add(column_names, unique=True, index_name=index_name)

    def remove(self, index_name: str) -> None:
        """Remove an index.

        Raises:
            SchemaObjectNotFoundError: If the index does not exist
        """
        validation.identifier(index_name, "index_name", self._limit)
        name = self._find(index_name)
        if name is None:
            raise SchemaObjectNotFoundError("index", index_name, self.table_name)
        self.database.remove_index(self.table_name, name)

    def remove_all(self) -> None:
        """Remove every index from the table."""
        for index in list(self):
            self.remove(index.name)
