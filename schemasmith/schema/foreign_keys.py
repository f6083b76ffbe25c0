"""Foreign keys of a table."""

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from schemasmith import validation
from schemasmith.database.schema import ForeignKeyDefinition
from schemasmith.exceptions import SchemaObjectNotFoundError
from schemasmith.naming import match_name

if TYPE_CHECKING:
    from schemasmith.database.database import Database


def validate_foreign_key(foreign_key: ForeignKeyDefinition, limit: int) -> None:
    """Validate the names of a foreign key and the pairing of its columns."""
    column_names = validation.identifiers(foreign_key.column_names, "column_names", limit)
    validation.identifier(foreign_key.foreign_table_name, "foreign_table_name", limit)
    foreign_column_names = validation.identifiers(
        foreign_key.foreign_column_names, "foreign_column_names", limit
    )
    validation.same_length(column_names, foreign_column_names, "foreign_column_names")
    validation.optional_identifier(foreign_key.name, "foreign_key_name", limit)


class ForeignKeyInfo:
    """A foreign key of a table.

    ``column_names`` and ``foreign_column_names`` correspond by position.
    """

    def __init__(self, database: "Database", table_name: str, name: str) -> None:
        self.database = database
        self.table_name = table_name
        self.name = name

    @property
    def column_names(self) -> list[str]:
        return self.database.get_foreign_key_column_names(self.table_name, self.name)

    @property
    def foreign_table_name(self) -> str | None:
        return self.database.get_foreign_key_foreign_table_name(self.table_name, self.name)

    @property
    def foreign_table(self):
        """The referenced table, None if it no longer exists."""
        foreign_table_name = self.foreign_table_name
        if foreign_table_name is None:
            return None
        return self.database.tables[foreign_table_name]

    @property
    def foreign_column_names(self) -> list[str]:
        return self.database.get_foreign_key_foreign_column_names(
            self.table_name, self.name
        )

    def __repr__(self) -> str:
        return f"ForeignKeyInfo(table_name={self.table_name!r}, name={self.name!r})"


class ForeignKeyCollection:
    """Collection of all foreign keys in a table."""

    def __init__(self, database: "Database", table_name: str) -> None:
        self.database = database
        self.table_name = table_name

    @property
    def _limit(self) -> int:
        return self.database.max_identifier_length

    def _find(self, foreign_key_name: str) -> str | None:
        names = self.database.get_foreign_key_names(self.table_name)
        return match_name(names, foreign_key_name)

    def __getitem__(self, foreign_key_name: str) -> ForeignKeyInfo | None:
        """Get a foreign key by name. Returns None if it does not exist."""
        validation.identifier(foreign_key_name, "foreign_key_name", self._limit)
        name = self._find(foreign_key_name)
        return ForeignKeyInfo(self.database, self.table_name, name) if name else None

    def get(self, foreign_key_name: str) -> ForeignKeyInfo | None:
        return self[foreign_key_name]

    def __contains__(self, foreign_key_name: object) -> bool:
        if not isinstance(foreign_key_name, str):
            return False
        return self._find(foreign_key_name) is not None

    def __iter__(self) -> Iterator[ForeignKeyInfo]:
        for name in self.database.get_foreign_key_names(self.table_name):
            yield ForeignKeyInfo(self.database, self.table_name, name)

    def __len__(self) -> int:
        return len(self.database.get_foreign_key_names(self.table_name))

    def add(
        self,
        column_names: str | Sequence[str],
        foreign_table_name: str,
        foreign_column_names: str | Sequence[str] | None = None,
        foreign_key_name: str | None = None,
    ) -> ForeignKeyInfo:
        """Add a foreign key to the table.

        Args:
            column_names: Referencing column, or columns in order
            foreign_table_name: Referenced table
            foreign_column_names: Referenced columns matched by position;
                the same names as ``column_names`` when omitted
            foreign_key_name: Name; set by the naming convention when omitted

        Returns:
            The new foreign key
        """
        foreign_key = ForeignKeyDefinition(
            column_names, foreign_table_name, foreign_column_names, foreign_key_name
        )
        validate_foreign_key(foreign_key, self._limit)
        name = self.database.add_foreign_key(self.table_name, foreign_key)
        return ForeignKeyInfo(self.database, self.table_name, name)

    def remove(self, foreign_key_name: str) -> None:
        """Remove a foreign key.

        Raises:
            SchemaObjectNotFoundError: If the foreign key does not exist
        """
        validation.identifier(foreign_key_name, "foreign_key_name", self._limit)
        name = self._find(foreign_key_name)
        if name is None:
            raise SchemaObjectNotFoundError("foreign key", foreign_key_name, self.table_name)
        self.database.remove_foreign_key(self.table_name, name)

    def remove_all(self) -> None:
        """Remove every foreign key from the table."""
        for foreign_key in list(self):
            self.remove(foreign_key.name)
