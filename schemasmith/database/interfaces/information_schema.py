"""Abstract information schema interface."""

from abc import ABC, abstractmethod
from typing import Any

from schemasmith.database.interfaces.connection import DatabaseConnection
from schemasmith.database.interfaces.dialect import Dialect
from schemasmith.types import DatabaseParamType


class InformationSchema(ABC):
    """Read-only metadata queries for one engine.

    Every call queries the database again; nothing is cached, so results
    reflect changes made through other connections. Lists are empty rather
    than None when nothing matches; single optional values are None.
    """

    def __init__(self, dialect: Dialect, connection: DatabaseConnection) -> None:
        self.dialect = dialect
        self.connection = connection

    def _fetch_names(
        self, query: str, params: DatabaseParamType = None, key: str = "name"
    ) -> list[str]:
        return [row[key] for row in self.connection.fetch_all(query, params)]

    def _fetch_value(
        self, query: str, params: DatabaseParamType = None, key: str = "value"
    ) -> Any:
        row = self.connection.fetch_one(query, params)
        return row[key] if row is not None else None

    @abstractmethod
    def get_schema(self) -> str | None:
        """Return the schema tables are created in, None for engines without schemas."""
        pass

    @abstractmethod
    def database_exists(self, database_name: str) -> bool:
        """Check whether a database exists on the server of the current connection."""
        pass

    @abstractmethod
    def get_table_names(self) -> list[str]:
        """Return the names of all tables in the current database and schema."""
        pass

    @abstractmethod
    def get_column_names(self, table_name: str) -> list[str]:
        """Return the column names of a table in ordinal order."""
        pass

    @abstractmethod
    def get_column_nullable(self, table_name: str, column_name: str) -> bool | None:
        """Return whether a column accepts NULL, None if the column does not exist."""
        pass

    @abstractmethod
    def get_column_data_type(self, table_name: str, column_name: str) -> str | None:
        """Return the SQL type of a column as reported by the engine."""
        pass

    @abstractmethod
    def get_column_auto_increment(self, table_name: str, column_name: str) -> bool:
        """Return whether the engine generates values for a column."""
        pass

    @abstractmethod
    def get_primary_key_name(self, table_name: str) -> str | None:
        """Return the primary key constraint name, None if the table has none."""
        pass

    @abstractmethod
    def get_primary_key_column_names(
        self, table_name: str, primary_key_name: str
    ) -> list[str]:
        """Return primary key columns in key order."""
        pass

    @abstractmethod
    def get_foreign_key_names(self, table_name: str) -> list[str]:
        """Return the names of the foreign keys defined on a table."""
        pass

    @abstractmethod
    def get_foreign_key_foreign_table_name(
        self, table_name: str, foreign_key_name: str
    ) -> str | None:
        """Return the table a foreign key references."""
        pass

    @abstractmethod
    def get_foreign_key_column_names(
        self, table_name: str, foreign_key_name: str
    ) -> list[str]:
        """Return referencing columns in key order."""
        pass

    @abstractmethod
    def get_foreign_key_foreign_column_names(
        self, table_name: str, foreign_key_name: str
    ) -> list[str]:
        """Return referenced columns, matched by position to the referencing ones."""
        pass

    @abstractmethod
    def get_index_names(self, table_name: str) -> list[str]:
        """Return the names of the indexes on a table, primary keys excluded."""
        pass

    @abstractmethod
    def get_index_unique(self, table_name: str, index_name: str) -> bool | None:
        """Return whether an index is unique, None if it does not exist."""
        pass

    @abstractmethod
    def get_index_column_names(self, table_name: str, index_name: str) -> list[str]:
        """Return index key columns in key order."""
        pass

    def get_index_include_column_names(
        self, table_name: str, index_name: str
    ) -> list[str]:
        """Return non-key covering columns; engines without them return []."""
        return []
