"""SQLAlchemy implementation of the database connection interface."""

from typing import Any

from sqlalchemy import TextClause, text
from sqlalchemy.engine import Connection, Engine, RootTransaction
from sqlalchemy.exc import SQLAlchemyError

from schemasmith.database.engine import create_database_engine
from schemasmith.database.interfaces import DatabaseConnection, DatabaseTransaction
from schemasmith.log import get_logger
from schemasmith.types import DatabaseParamType, RowType

logger = get_logger(__name__)


class SQLAlchemyConnection(DatabaseConnection):
    """Database connection backed by a single SQLAlchemy ``Connection``.

    The connection opens lazily on the first statement. It is not thread-safe;
    use one instance per thread.
    """

    def __init__(self, url: str, echo: bool = False, **kwargs: Any) -> None:
        """Initialize SQLAlchemy connection.

        Args:
            url: SQLAlchemy database URL
            echo: Echo SQL through SQLAlchemy's logger
            **kwargs: Additional connection parameters
        """
        super().__init__(url, **kwargs)
        self.echo = echo
        self._engine: Engine | None = None
        self._connection: Connection | None = None
        self._transaction: "SQLAlchemyTransaction | None" = None

    def connect(self) -> None:
        """Open the connection if it is not open yet."""
        if self._connection is not None:
            return

        try:
            self._engine = create_database_engine(
                self.url, echo=self.echo, autocommit=self.autocommit
            )
            self._connection = self._engine.connect()
            logger.info(f"Connected to {self._engine.url.render_as_string()}")
        except SQLAlchemyError as e:
            logger.error(f"Failed to connect to database: {e}")
            self._dispose_engine()
            raise

    def disconnect(self) -> None:
        """Close the connection, rolling back any open transaction."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            self._transaction = None
            logger.info("Disconnected from database")
        self._dispose_engine()

    def execute(self, query: str, params: DatabaseParamType = None) -> int:
        """Execute a statement.

        Args:
            query: SQL statement
            params: Named query parameters

        Returns:
            Number of affected rows
        """
        result = self._run(query, params)
        rowcount = result.rowcount
        result.close()
        self._commit_unless_in_transaction()
        return rowcount

    def fetch_one(
        self, query: str, params: DatabaseParamType = None
    ) -> RowType | None:
        """Fetch single row.

        Args:
            query: SQL query
            params: Named query parameters

        Returns:
            Single row as dictionary or None
        """
        row = self._run(query, params).mappings().first()
        self._commit_unless_in_transaction()
        return dict(row) if row is not None else None

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
        rows = self._run(query, params).mappings().all()
        self._commit_unless_in_transaction()
        return [dict(row) for row in rows]

    def begin_transaction(self) -> "SQLAlchemyTransaction":
        """Begin a transaction spanning the following statements.

        Returns:
            Transaction to commit or roll back, also usable as a context manager
        """
        connection = self._ensure_connected()
        if self._transaction is not None and self._transaction.is_active:
            raise RuntimeError("A transaction is already in progress")
        self._transaction = SQLAlchemyTransaction(self, connection.begin())
        return self._transaction

    @property
    def is_connected(self) -> bool:
        """Check if database is connected."""
        return self._connection is not None

    @property
    def in_transaction(self) -> bool:
        return self._transaction is not None and self._transaction.is_active

    def _run(self, query: str, params: DatabaseParamType) -> Any:
        connection = self._ensure_connected()
        logger.debug(f"Executing: {query}")
        try:
            return connection.execute(self._statement(query, params), params or {})
        except SQLAlchemyError as e:
            logger.error(f"Query execution failed: {e}")
            if not self.in_transaction and connection.in_transaction():
                connection.rollback()
            raise

    @staticmethod
    def _statement(query: str, params: DatabaseParamType) -> TextClause:
        # Without parameters the text is sent verbatim; colons inside DDL
        # literals must not be read as bind markers.
        if not params:
            query = query.replace(":", "\\:")
        return text(query)

    def _ensure_connected(self) -> Connection:
        if self._connection is None:
            self.connect()
        assert self._connection is not None
        return self._connection

    def _commit_unless_in_transaction(self) -> None:
        if self._connection is None or self.in_transaction:
            return
        if self._connection.in_transaction():
            self._connection.commit()

    def _dispose_engine(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


class SQLAlchemyTransaction(DatabaseTransaction):
    """Explicit transaction on a ``SQLAlchemyConnection``."""

    def __init__(
        self, connection: SQLAlchemyConnection, transaction: RootTransaction
    ) -> None:
        self.connection = connection
        self._transaction = transaction

    def commit(self) -> None:
        """Commit the transaction."""
        self._transaction.commit()

    def rollback(self) -> None:
        """Rollback the transaction."""
        self._transaction.rollback()

    @property
    def is_active(self) -> bool:
        return self._transaction.is_active
