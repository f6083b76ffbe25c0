"""Tests for dialect selection."""

import pytest

from schemasmith.database.factory import create_dialect, get_supported_backends
from schemasmith.database.implementations import (
    MySQLDialect,
    PostgreSQLDialect,
    SQLiteDialect,
    SQLServerDialect,
)
from schemasmith.exceptions import UnsupportedEngineError
from schemasmith.types import Engine


@pytest.mark.parametrize(
    ("url", "dialect_type", "engine"),
    [
        ("sqlite:///shop.db", SQLiteDialect, Engine.SQLITE),
        ("postgresql+psycopg2://user:pw@localhost/shop", PostgreSQLDialect, Engine.POSTGRESQL),
        ("mysql+pymysql://user:pw@localhost/shop", MySQLDialect, Engine.MYSQL),
        ("mariadb+pymysql://user:pw@localhost/shop", MySQLDialect, Engine.MYSQL),
        ("mssql+pyodbc://user:pw@server/shop", SQLServerDialect, Engine.SQLSERVER),
    ],
)
def test_create_dialect(url: str, dialect_type: type, engine: Engine) -> None:
    """Test the dialect follows the URL backend."""
    dialect = create_dialect(url)

    assert isinstance(dialect, dialect_type)
    assert dialect.engine == engine


def test_create_dialect_unknown_backend() -> None:
    """Test an unknown backend is rejected."""
    with pytest.raises(UnsupportedEngineError, match="oracle"):
        create_dialect("oracle://user:pw@localhost/shop")


def test_get_supported_backends() -> None:
    """Test the list of registered backends."""
    assert get_supported_backends() == ["mariadb", "mssql", "mysql", "postgresql", "sqlite"]
