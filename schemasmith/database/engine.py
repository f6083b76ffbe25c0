"""SQLAlchemy engine creation and database URL helpers."""

from pathlib import Path

from sqlalchemy import event
from sqlalchemy.engine import URL, Engine, make_url
from sqlmodel import create_engine

from schemasmith.log import get_logger

logger = get_logger(__name__)

SQLITE_MEMORY = ":memory:"


def backend_name(url: str | URL) -> str:
    """Return the backend part of a URL, e.g. ``postgresql`` for ``postgresql+psycopg2://``."""
    return make_url(url).get_backend_name()


def database_name(url: str | URL) -> str | None:
    """Return the database named in a URL."""
    return make_url(url).database


def replace_database(url: str | URL, name: str | None) -> str:
    """Return ``url`` pointing at another database on the same server."""
    replaced = make_url(url).set(database=name)
    return replaced.render_as_string(hide_password=False)


def sqlite_path(url: str | URL) -> Path | None:
    """Return the file behind a SQLite URL, or None for an in-memory database."""
    name = make_url(url).database
    if not name or name == SQLITE_MEMORY:
        return None
    return Path(name)


def create_database_engine(
    url: str,
    echo: bool = False,
    autocommit: bool = False,
) -> Engine:
    """Create an engine for a database URL.

    Args:
        url: SQLAlchemy database URL
        echo: Enable SQL echo for debugging
        autocommit: Run every statement outside a transaction, required for
            CREATE DATABASE and DROP DATABASE on most servers

    Returns:
        Configured engine
    """
    kwargs: dict = {"echo": echo}

    if backend_name(url) == "sqlite":
        path = sqlite_path(url)
        if path is not None:
            path.parent.mkdir(parents=True, exist_ok=True)
        kwargs["connect_args"] = {"check_same_thread": False, "timeout": 60.0}
    else:
        kwargs["pool_pre_ping"] = True
        kwargs["pool_recycle"] = 3600

    if autocommit:
        kwargs["isolation_level"] = "AUTOCOMMIT"

    logger.debug(
        f"Creating database engine for: {make_url(url).render_as_string(hide_password=True)}"
    )
    engine = create_engine(url, **kwargs)
    if backend_name(url) == "sqlite" and not autocommit:
        enable_sqlite_transactional_ddl(engine)
    return engine


def enable_sqlite_transactional_ddl(engine: Engine) -> None:
    """Make pysqlite emit BEGIN itself so DDL joins the transaction.

    The driver only opens transactions before DML; CREATE, DROP and ALTER
    would otherwise commit on their own.
    """

    @event.listens_for(engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(connection) -> None:
        connection.exec_driver_sql("BEGIN")
