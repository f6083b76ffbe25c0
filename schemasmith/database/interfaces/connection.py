"""Database connection interface."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any

from schemasmith.types import DatabaseParamType, RowType


class DatabaseConnection(ABC):
    """Abstract database connection interface.

    This is the only path by which SQL reaches the database. Parameters are
    named (``:name``) and always passed separately from the SQL text.

    Outside an explicit transaction every statement is committed on its own.
    Inside one (see ``begin_transaction``) nothing is committed until the
    transaction is.
    """

    def __init__(self, url: str, **kwargs: Any) -> None:
        """Initialize database connection.

        Args:
            url: Database URL
            **kwargs: Additional connection parameters
        """
        self.url = url
        self.connection_params = kwargs
        self.autocommit = False

    @abstractmethod
    def connect(self) -> None:
        """Establish database connection."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close database connection."""
        pass

    def use(self, url: str, autocommit: bool = False) -> None:
        """Point the connection at another database.

        The current connection is closed; the next statement opens a new one
        on ``url``.

        Args:
            url: Database URL to use from now on
            autocommit: Whether the new connection runs in autocommit mode
        """
        self.disconnect()
        self.url = url
        self.autocommit = autocommit

    @abstractmethod
    def execute(self, query: str, params: DatabaseParamType = None) -> int:
        """Execute a statement.

        Args:
            query: SQL statement
            params: Named query parameters

        Returns:
            Number of affected rows as reported by the driver
        """
        pass

    @abstractmethod
    def fetch_one(
        self, query: str, params: DatabaseParamType = None
    ) -> RowType | None:
        """Fetch single row.

        Args:
            query: SQL query
            params: Named query parameters

        Returns:
            Single row as dictionary or None if not found
        """
        pass

    @abstractmethod
    def fetch_all(
        self, query: str, params: DatabaseParamType = None
    ) -> list[RowType]:
        """Fetch all rows.

        Args:
            query: SQL query
            params: Named query parameters

        Returns:
            List of rows as dictionaries
        """
        pass

    @abstractmethod
    def begin_transaction(self) -> "DatabaseTransaction":
        """Begin a new transaction.

        Returns:
            Transaction object
        """
        pass

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Check if connection is active."""
        pass

    @property
    def in_transaction(self) -> bool:
        """Check whether an explicit transaction is open."""
        return False

    def __enter__(self) -> "DatabaseConnection":
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.disconnect()


class DatabaseTransaction(ABC):
    """Abstract database transaction interface."""

    @abstractmethod
    def commit(self) -> None:
        """Commit the transaction."""
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Rollback the transaction."""
        pass

    @property
    @abstractmethod
    def is_active(self) -> bool:
        """Check if the transaction is still open."""
        pass

    def __enter__(self) -> "DatabaseTransaction":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if not self.is_active:
            return
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
