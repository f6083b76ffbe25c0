"""Tests for engine dialects: capabilities, type mapping and literals."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

import pytest

from schemasmith.database.implementations import (
    MySQLDialect,
    PostgreSQLDialect,
    SQLiteDialect,
    SQLServerDialect,
)
from schemasmith.exceptions import SchemaValidationError, UnsupportedOperationError
from schemasmith.types import Operation


def test_identifier_limits() -> None:
    """Test the identifier limit of each engine."""
    assert SQLiteDialect.max_identifier_length == 128
    assert PostgreSQLDialect.max_identifier_length == 63
    assert MySQLDialect.max_identifier_length == 64
    assert SQLServerDialect.max_identifier_length == 128


def test_escape_identifier() -> None:
    """Test quoting doubles embedded closing quotes."""
    assert SQLiteDialect().escape_identifier('a"b') == '"a""b"'
    assert MySQLDialect().escape_identifier("a`b") == "`a``b`"
    assert SQLServerDialect().escape_identifier("a]b") == "[a]]b]"
    assert PostgreSQLDialect().escape_identifiers(["A", "B"]) == '"A", "B"'


def test_sqlite_capabilities() -> None:
    """Test SQLite cannot change columns or primary keys."""
    dialect = SQLiteDialect()

    assert not dialect.supports(Operation.CHANGE_COLUMN)
    assert not dialect.supports(Operation.ADD_PRIMARY_KEY)
    assert not dialect.supports(Operation.REMOVE_PRIMARY_KEY)
    assert not dialect.supports(Operation.INCLUDE_COLUMNS)
    assert dialect.supports(Operation.ADD_FOREIGN_KEY)
    assert dialect.supports(Operation.TRANSACTIONAL_DDL)
    assert dialect.insert_null_for_auto_increment
    assert dialect.file_based


def test_mysql_capabilities() -> None:
    """Test MySQL has no include columns and no transactional DDL."""
    dialect = MySQLDialect()

    assert not dialect.supports(Operation.INCLUDE_COLUMNS)
    assert not dialect.supports(Operation.TRANSACTIONAL_DDL)
    assert dialect.supports(Operation.CHANGE_COLUMN)


@pytest.mark.parametrize("dialect_type", [PostgreSQLDialect, SQLServerDialect])
def test_full_capabilities(dialect_type: type) -> None:
    """Test engines that support every operation."""
    dialect = dialect_type()
    assert all(dialect.supports(operation) for operation in Operation)


def test_require_raises_for_unsupported_operation() -> None:
    """Test require names the operation and the engine."""
    with pytest.raises(UnsupportedOperationError) as exc_info:
        SQLiteDialect().require(Operation.CHANGE_COLUMN)

    assert exc_info.value.operation == "change column"
    assert exc_info.value.engine == "SQLite"


def test_require_passes_for_supported_operation() -> None:
    """Test require is silent when the engine supports the operation."""
    PostgreSQLDialect().require(Operation.CHANGE_COLUMN)


def test_map_string_types() -> None:
    """Test string columns use the engine's unicode type and a default length."""
    assert SQLServerDialect().map_type(str) == "NVARCHAR(50)"
    assert PostgreSQLDialect().map_type(str, 200) == "VARCHAR(200)"
    assert MySQLDialect().map_type(str, 10) == "VARCHAR(10)"
    assert SQLiteDialect().map_type(str) == "NVARCHAR(50)"


@pytest.mark.parametrize(
    ("dialect_type", "data_type", "expected"),
    [
        (SQLiteDialect, int, "INTEGER"),
        (SQLiteDialect, float, "REAL"),
        (SQLiteDialect, bytes, "BLOB"),
        (PostgreSQLDialect, bool, "BOOLEAN"),
        (PostgreSQLDialect, datetime, "TIMESTAMP"),
        (PostgreSQLDialect, UUID, "UUID"),
        (MySQLDialect, int, "INT"),
        (MySQLDialect, float, "DOUBLE"),
        (SQLServerDialect, bool, "BIT"),
        (SQLServerDialect, datetime, "DATETIME"),
        (SQLServerDialect, UUID, "UNIQUEIDENTIFIER"),
        (SQLServerDialect, Decimal, "DECIMAL(19, 5)"),
        (SQLServerDialect, date, "DATE"),
    ],
)
def test_map_type(dialect_type: type, data_type: type, expected: str) -> None:
    """Test Python types map to engine types."""
    assert dialect_type().map_type(data_type) == expected


def test_map_type_passes_raw_sql_through() -> None:
    """Test a type string is used unchanged."""
    assert MySQLDialect().map_type("DECIMAL(10, 2)") == "DECIMAL(10, 2)"


def test_map_type_rejects_unknown_types() -> None:
    """Test types without a mapping and empty type strings."""
    with pytest.raises(SchemaValidationError):
        SQLiteDialect().map_type(list)
    with pytest.raises(SchemaValidationError):
        SQLiteDialect().map_type("  ")


def test_postgresql_serial() -> None:
    """Test auto-increment integers become SERIAL on PostgreSQL."""
    assert PostgreSQLDialect().map_type(int, auto_increment=True) == "SERIAL"
    assert PostgreSQLDialect().map_type(int) == "INTEGER"


def test_render_literal_common_values() -> None:
    """Test literals for DEFAULT clauses."""
    dialect = SQLiteDialect()

    assert dialect.render_literal(None) == "NULL"
    assert dialect.render_literal(42) == "42"
    assert dialect.render_literal(Decimal("1.50")) == "1.50"
    assert dialect.render_literal(0.5) == "0.5"
    assert dialect.render_literal("O'Brien") == "'O''Brien'"
    assert dialect.render_literal(date(2024, 1, 31)) == "'2024-01-31'"
    assert dialect.render_literal(datetime(2024, 1, 31, 12, 30)) == "'2024-01-31 12:30:00'"
    assert dialect.render_literal(UUID(int=1)) == "'00000000-0000-0000-0000-000000000001'"
    assert dialect.render_literal(b"\x01\xff") == "X'01ff'"


def test_render_literal_engine_specifics() -> None:
    """Test booleans, bytes and strings where engines differ."""
    assert SQLiteDialect().render_literal(True) == "1"
    assert PostgreSQLDialect().render_literal(False) == "FALSE"
    assert PostgreSQLDialect().render_literal(b"\x01") == "'\\x01'::bytea"
    assert SQLServerDialect().render_literal("abc") == "N'abc'"
    assert SQLServerDialect().render_literal(b"\x01") == "0x01"
    assert MySQLDialect().render_literal("a\\b'c") == "'a\\\\b''c'"


@pytest.mark.parametrize("value", [float("nan"), float("inf"), object()])
def test_render_literal_rejects_unsafe_values(value: object) -> None:
    """Test values without a safe literal are rejected."""
    with pytest.raises(SchemaValidationError):
        SQLiteDialect().render_literal(value)
