"""Global pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from schemasmith import ColumnDefinition, Database, DatabaseSettings
from schemasmith.database.interfaces import DatabaseConnection
from schemasmith.log import setup_test_logging
from schemasmith.schema import TableInfo


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    setup_test_logging()


@pytest.fixture
def database_path(tmp_path: Path) -> Path:
    """Path of a SQLite database file that does not exist yet."""
    return tmp_path / "shop.db"


@pytest.fixture
def database(database_path: Path) -> Generator[Database, None, None]:
    """SQLite database backed by a temporary file."""
    settings = DatabaseSettings(url=f"sqlite:///{database_path}")
    with Database(settings) as db:
        yield db


@pytest.fixture
def customer_table(database: Database) -> TableInfo:
    """``Customer`` table keyed by ``CustomerId``."""
    return database.tables.add(
        "Customer",
        [
            ColumnDefinition("CustomerId", int, primary_key=True),
            ColumnDefinition("Name", str, length=100),
        ],
    )


@pytest.fixture
def order_table(database: Database) -> TableInfo:
    """``Order`` table keyed by ``OrderId``, with a ``CustomerId`` column."""
    return database.tables.add(
        "Order",
        [
            ColumnDefinition("OrderId", int, primary_key=True),
            ColumnDefinition("CustomerId", int, nullable=True),
        ],
    )


@pytest.fixture
def mock_connection() -> MagicMock:
    """Connection double recording every statement."""
    connection = MagicMock(spec=DatabaseConnection)
    connection.in_transaction = False
    connection.fetch_all.return_value = []
    connection.fetch_one.return_value = None
    return connection
