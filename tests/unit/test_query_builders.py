"""Tests for DML generation."""

import pytest

from schemasmith.database.implementations import (
    MySQLDialect,
    PostgreSQLDialect,
    SQLiteDialect,
    SQLServerDialect,
)
from schemasmith.exceptions import SchemaValidationError


@pytest.fixture
def builder():
    """SQLite query builder, standard for most statements."""
    return SQLiteDialect().create_query_builder()


def test_select(builder) -> None:
    """Test selected columns and conditions."""
    assert builder.select("Order") == ('SELECT * FROM "Order"', {})
    assert builder.select("Order", ["OrderId"], {"CustomerId": 7}) == (
        'SELECT "OrderId" FROM "Order" WHERE "CustomerId" = :w0',
        {"w0": 7},
    )


def test_exists_and_count(builder) -> None:
    """Test row checks match NULL with IS NULL."""
    assert builder.exists("Order", {"CustomerId": None}) == (
        'SELECT 1 AS present FROM "Order" WHERE "CustomerId" IS NULL LIMIT 1',
        {},
    )
    assert builder.count("Order", {"CustomerId": 7}) == (
        'SELECT COUNT(*) AS value FROM "Order" WHERE "CustomerId" = :w0',
        {"w0": 7},
    )


def test_insert(builder) -> None:
    """Test values travel as parameters."""
    assert builder.insert("Order", {"CustomerId": 7, "Note": "x'); DROP TABLE t"}) == (
        'INSERT INTO "Order" ("CustomerId", "Note") VALUES (:v0, :v1)',
        {"v0": 7, "v1": "x'); DROP TABLE t"},
    )


def test_insert_defaults() -> None:
    """Test inserting a row of defaults."""
    assert SQLiteDialect().create_query_builder().insert("Order", {}) == (
        'INSERT INTO "Order" DEFAULT VALUES',
        {},
    )
    assert MySQLDialect().create_query_builder().insert("Order", {}) == (
        "INSERT INTO `Order` () VALUES ()",
        {},
    )


def test_update_and_delete(builder) -> None:
    """Test updates and deletes by key."""
    assert builder.update("Order", {"Note": "late"}, {"OrderId": 1}) == (
        'UPDATE "Order" SET "Note" = :v0 WHERE "OrderId" = :w0',
        {"v0": "late", "w0": 1},
    )
    assert builder.delete("Order", {"OrderId": 1}) == (
        'DELETE FROM "Order" WHERE "OrderId" = :w0',
        {"w0": 1},
    )
    assert builder.set_column_value("Order", "Note", None) == (
        'UPDATE "Order" SET "Note" = :v0',
        {"v0": None},
    )


def test_update_requires_data(builder) -> None:
    """Test an update without values is rejected."""
    with pytest.raises(SchemaValidationError):
        builder.update("Order", {}, {"OrderId": 1})


def test_sqlserver_exists_uses_top() -> None:
    """Test SQL Server has no LIMIT."""
    assert SQLServerDialect().create_query_builder().exists("Order") == (
        "SELECT TOP 1 1 AS present FROM [Order]",
        {},
    )


@pytest.mark.parametrize(
    ("dialect_type", "expected"),
    [
        (SQLiteDialect, "SELECT last_insert_rowid() AS value"),
        (
            PostgreSQLDialect,
            "SELECT currval(pg_get_serial_sequence('\"Order\"', 'OrderId')) AS value",
        ),
        (MySQLDialect, "SELECT LAST_INSERT_ID() AS value"),
        (SQLServerDialect, "SELECT CAST(@@IDENTITY AS BIGINT) AS value"),
    ],
)
def test_last_identity_sql(dialect_type: type, expected: str) -> None:
    """Test each engine reads back the generated identity."""
    builder = dialect_type().create_query_builder()
    assert builder.last_identity_sql("Order", "OrderId") == expected
