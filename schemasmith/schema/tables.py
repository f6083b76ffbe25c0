"""Tables of a database."""

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from schemasmith import validation
from schemasmith.database.schema import (
    ColumnDefinition,
    ForeignKeyDefinition,
    TableDefinition,
)
from schemasmith.exceptions import SchemaObjectNotFoundError
from schemasmith.naming import match_name
from schemasmith.schema.columns import ColumnCollection
from schemasmith.schema.foreign_keys import ForeignKeyCollection, validate_foreign_key
from schemasmith.schema.indexes import IndexCollection
from schemasmith.schema.primary_key import PrimaryKey
from schemasmith.schema.rows import RowCollection

if TYPE_CHECKING:
    from schemasmith.database.database import Database


class TableInfo:
    """A table of the database.

    Attributes reflect the database on every access; nothing is cached.
    """

    def __init__(self, database: "Database", name: str) -> None:
        self.database = database
        self.name = name

    @property
    def schema(self) -> str | None:
        """Schema the table lives in, None on engines without schemas."""
        return self.database.get_schema()

    @property
    def columns(self) -> ColumnCollection:
        return ColumnCollection(self.database, self.name)

    @property
    def indexes(self) -> IndexCollection:
        return IndexCollection(self.database, self.name)

    @property
    def foreign_keys(self) -> ForeignKeyCollection:
        return ForeignKeyCollection(self.database, self.name)

    @property
    def primary_key(self) -> PrimaryKey:
        return PrimaryKey(self.database, self.name)

    @property
    def rows(self) -> RowCollection:
        return RowCollection(self.database, self.name)

    def rename(self, new_name: str) -> None:
        """Rename the table; this object follows the new name."""
        self.database.tables.rename(self.name, new_name)
        self.name = new_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TableInfo):
            return NotImplemented
        return self.database is other.database and self.name == other.name

    def __hash__(self) -> int:
        return hash((id(self.database), self.name))

    def __repr__(self) -> str:
        return f"TableInfo(name={self.name!r})"


class TableCollection:
    """Collection of all tables in the database.

    Lookup returns None for a missing table. Iteration queries the database
    each time it starts.
    """

    def __init__(self, database: "Database") -> None:
        self.database = database

    @property
    def _limit(self) -> int:
        return self.database.max_identifier_length

    def __getitem__(self, table_name: str) -> TableInfo | None:
        """Get a table by name. Returns None if the table does not exist."""
        validation.identifier(table_name, "table_name", self._limit)
        name = match_name(self.database.get_table_names(), table_name)
        return TableInfo(self.database, name) if name is not None else None

    def get(self, table_name: str) -> TableInfo | None:
        return self[table_name]

    def __contains__(self, table_name: object) -> bool:
        if not isinstance(table_name, str):
            return False
        return match_name(self.database.get_table_names(), table_name) is not None

    def __iter__(self) -> Iterator[TableInfo]:
        for name in self.database.get_table_names():
            yield TableInfo(self.database, name)

    def __len__(self) -> int:
        return len(self.database.get_table_names())

    def add(
        self,
        table_name: str,
        columns: Sequence[ColumnDefinition],
        foreign_keys: Sequence[ForeignKeyDefinition] = (),
    ) -> TableInfo:
        """Create a table.

        Columns flagged ``primary_key`` form the primary key, named by the
        naming convention. Foreign keys without a name are named the same way.

        Args:
            table_name: Table name
            columns: Column definitions, at least one
            foreign_keys: Foreign keys to create with the table

        Returns:
            The new table

        Raises:
            SchemaValidationError: If a name is empty or too long, or no
                column is given
        """
        validation.identifier(table_name, "table_name", self._limit)
        validation.is_not_none(columns, "columns")
        columns = list(columns)
        validation.is_true(bool(columns), "columns", "At least one column is required.")
        for column in columns:
            validation.identifier(column.name, "columns", self._limit)

        foreign_keys = list(foreign_keys or ())
        for foreign_key in foreign_keys:
            validate_foreign_key(foreign_key, self._limit)

        self.database.add_table(TableDefinition(table_name, columns, foreign_keys))
        return TableInfo(self.database, table_name)

    def remove(self, table_name: str) -> None:
        """Drop a table.

        Raises:
            SchemaObjectNotFoundError: If the table does not exist
        """
        self.database.remove_table(self._require(table_name))

    def rename(self, table_name: str, new_table_name: str) -> None:
        """Rename a table.

        Raises:
            SchemaObjectNotFoundError: If the table does not exist
        """
        validation.identifier(new_table_name, "new_table_name", self._limit)
        self.database.rename_table(self._require(table_name), new_table_name)

    def _require(self, table_name: str) -> str:
        validation.identifier(table_name, "table_name", self._limit)
        name = match_name(self.database.get_table_names(), table_name)
        if name is None:
            raise SchemaObjectNotFoundError("table", table_name)
        return name

