"""Abstract query builder interface for different SQL backends."""

from abc import ABC, abstractmethod
from typing import Any

from schemasmith.database.interfaces.dialect import Dialect
from schemasmith.types import DatabaseParamType


class QueryBuilder(ABC):
    """Abstract data manipulation language builder.

    Identifiers are escaped by the dialect; values are always returned as
    named parameters and never appear in the SQL text.
    """

    def __init__(self, dialect: Dialect) -> None:
        self.dialect = dialect

    @abstractmethod
    def select(
        self,
        table: str,
        columns: list[str] | None = None,
        where: dict[str, Any] | None = None,
    ) -> tuple[str, DatabaseParamType]:
        """Build SELECT query.

        Args:
            table: Table name
            columns: List of columns to select (None for all)
            where: Equality conditions; a None value matches NULL

        Returns:
            Tuple of (query, parameters)
        """
        pass

    @abstractmethod
    def exists(
        self, table: str, where: dict[str, Any] | None = None
    ) -> tuple[str, DatabaseParamType]:
        """Build a query returning one row when any row matches.

        Args:
            table: Table name
            where: Equality conditions; a None value matches NULL

        Returns:
            Tuple of (query, parameters)
        """
        pass

    @abstractmethod
    def count(
        self, table: str, where: dict[str, Any] | None = None
    ) -> tuple[str, DatabaseParamType]:
        """Build a query returning the number of matching rows as ``value``."""
        pass

    @abstractmethod
    def insert(self, table: str, data: dict[str, Any]) -> tuple[str, DatabaseParamType]:
        """Build INSERT query.

        Args:
            table: Table name
            data: Column name to value mapping

        Returns:
            Tuple of (query, parameters)
        """
        pass

    @abstractmethod
    def update(
        self,
        table: str,
        data: dict[str, Any],
        where: dict[str, Any] | None = None,
    ) -> tuple[str, DatabaseParamType]:
        """Build UPDATE query.

        Args:
            table: Table name
            data: Column name to value mapping to set
            where: Equality conditions

        Returns:
            Tuple of (query, parameters)
        """
        pass

    @abstractmethod
    def delete(
        self, table: str, where: dict[str, Any] | None = None
    ) -> tuple[str, DatabaseParamType]:
        """Build DELETE query.

        Args:
            table: Table name
            where: Equality conditions

        Returns:
            Tuple of (query, parameters)
        """
        pass

    @abstractmethod
    def set_column_value(
        self, table: str, column: str, value: Any
    ) -> tuple[str, DatabaseParamType]:
        """Build an UPDATE setting one column on every row."""
        pass

    @abstractmethod
    def last_identity_sql(self, table: str, column: str) -> str:
        """Build a query returning the identity generated by the last insert.

        The query returns a single column named ``value``.
        """
        pass
