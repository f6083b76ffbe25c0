"""Tests for the SQLAlchemy connection."""

from collections.abc import Generator
from pathlib import Path

import pytest
from sqlalchemy.exc import OperationalError

from schemasmith.database.implementations import SQLAlchemyConnection


@pytest.fixture
def connection() -> Generator[SQLAlchemyConnection, None, None]:
    """In-memory SQLite connection with an ``Item`` table."""
    conn = SQLAlchemyConnection("sqlite://")
    conn.execute('CREATE TABLE "Item" ("Id" INTEGER PRIMARY KEY, "Name" TEXT)')
    yield conn
    conn.disconnect()


def test_connects_lazily() -> None:
    """Test the connection opens on the first statement."""
    conn = SQLAlchemyConnection("sqlite://")
    assert not conn.is_connected

    assert conn.fetch_one("SELECT 1 AS value") == {"value": 1}
    assert conn.is_connected

    conn.disconnect()
    assert not conn.is_connected


def test_execute_with_params(connection: SQLAlchemyConnection) -> None:
    """Test named parameters and the affected row count."""
    assert connection.execute('INSERT INTO "Item" ("Name") VALUES (:name)', {"name": "a"}) == 1
    connection.execute('INSERT INTO "Item" ("Name") VALUES (:name)', {"name": "b"})

    rows = connection.fetch_all('SELECT "Name" FROM "Item" ORDER BY "Name"')

    assert rows == [{"Name": "a"}, {"Name": "b"}]
    assert connection.execute('UPDATE "Item" SET "Name" = :name', {"name": "c"}) == 2


def test_fetch_one_without_rows(connection: SQLAlchemyConnection) -> None:
    """Test an empty result gives None."""
    assert connection.fetch_one('SELECT "Name" FROM "Item"') is None


def test_colons_in_literals_are_kept(connection: SQLAlchemyConnection) -> None:
    """Test a literal with a colon is not taken for a parameter."""
    connection.execute('INSERT INTO "Item" ("Name") VALUES (\'12:30:00\')')
    assert connection.fetch_one('SELECT "Name" FROM "Item"') == {"Name": "12:30:00"}


def test_transaction_commit(connection: SQLAlchemyConnection) -> None:
    """Test statements inside a committed transaction persist."""
    with connection.begin_transaction():
        assert connection.in_transaction
        connection.execute('INSERT INTO "Item" ("Name") VALUES (:name)', {"name": "a"})

    assert not connection.in_transaction
    assert len(connection.fetch_all('SELECT * FROM "Item"')) == 1


def test_transaction_rollback_on_error(connection: SQLAlchemyConnection) -> None:
    """Test an exception inside the block rolls the transaction back."""
    with pytest.raises(RuntimeError):
        with connection.begin_transaction():
            connection.execute('INSERT INTO "Item" ("Name") VALUES (:name)', {"name": "a"})
            raise RuntimeError("abort")

    assert connection.fetch_all('SELECT * FROM "Item"') == []


def test_nested_transaction_rejected(connection: SQLAlchemyConnection) -> None:
    """Test only one explicit transaction may be open."""
    transaction = connection.begin_transaction()
    with pytest.raises(RuntimeError):
        connection.begin_transaction()
    transaction.rollback()


def test_failed_statement_is_reraised(connection: SQLAlchemyConnection) -> None:
    """Test driver errors reach the caller and the connection stays usable."""
    with pytest.raises(OperationalError):
        connection.execute('SELECT * FROM "Missing"')

    assert connection.fetch_one("SELECT 1 AS value") == {"value": 1}


def test_use_switches_database(tmp_path: Path) -> None:
    """Test use() reconnects to another database."""
    first = tmp_path / "first.db"
    second = tmp_path / "second.db"
    conn = SQLAlchemyConnection(f"sqlite:///{first}")
    conn.execute('CREATE TABLE "A" ("Id" INTEGER)')

    conn.use(f"sqlite:///{second}")
    assert not conn.is_connected
    conn.execute('CREATE TABLE "B" ("Id" INTEGER)')
    names = conn.fetch_all("SELECT name FROM sqlite_master WHERE type = 'table'")
    conn.disconnect()

    assert names == [{"name": "B"}]
    assert first.exists()


def test_transaction_rolls_back_ddl(connection: SQLAlchemyConnection) -> None:
    """Test schema changes inside a failed transaction are undone."""
    with pytest.raises(OperationalError):
        with connection.begin_transaction():
            connection.execute('CREATE TABLE "Copy" ("Id" INTEGER)')
            connection.execute('DROP TABLE "Item"')
            connection.execute('SELECT * FROM "Missing"')

    names = connection.fetch_all("SELECT name FROM sqlite_master WHERE type = 'table'")
    assert names == [{"name": "Item"}]
