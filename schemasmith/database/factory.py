"""Dialect selection from database URLs."""

from sqlalchemy.engine import URL

from schemasmith.database.engine import backend_name
from schemasmith.database.implementations import (
    MySQLDialect,
    PostgreSQLDialect,
    SQLiteDialect,
    SQLServerDialect,
)
from schemasmith.database.interfaces import Dialect
from schemasmith.exceptions import UnsupportedEngineError

DIALECTS: dict[str, type[Dialect]] = {
    "sqlite": SQLiteDialect,
    "postgresql": PostgreSQLDialect,
    "mysql": MySQLDialect,
    "mariadb": MySQLDialect,
    "mssql": SQLServerDialect,
}


def create_dialect(url: str | URL) -> Dialect:
    """Create the dialect for a database URL.

    The backend is taken from the URL scheme, ignoring the driver:
    ``postgresql+psycopg2://`` selects PostgreSQL.

    Raises:
        UnsupportedEngineError: If no dialect is registered for the backend
    """
    name = backend_name(url)
    if name not in DIALECTS:
        raise UnsupportedEngineError(name)
    return DIALECTS[name]()


def get_supported_backends() -> list[str]:
    """Get list of URL backends with a registered dialect."""
    return sorted(DIALECTS)
