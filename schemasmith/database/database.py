"""The database aggregate: one connection, one engine, one table collection."""

from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path
from types import TracebackType
from typing import Any

from schemasmith.config import DatabaseSettings
from schemasmith.database.engine import database_name, replace_database, sqlite_path
from schemasmith.database.factory import create_dialect
from schemasmith.database.implementations.sqlalchemy_connection import (
    SQLAlchemyConnection,
)
from schemasmith.database.interfaces import DatabaseConnection, DatabaseTransaction
from schemasmith.database.schema import (
    ColumnDefinition,
    ForeignKeyDefinition,
    TableDefinition,
)
from schemasmith.exceptions import (
    MissingDefaultValueError,
    SchemaValidationError,
    UnsupportedOperationError,
)
from schemasmith.log import get_logger
from schemasmith.naming import NamingConvention
from schemasmith.schema.tables import TableCollection
from schemasmith.types import Engine, Operation, RowType

logger = get_logger(__name__)


class Database:
    """Reflect on and change the schema of one database.

    The engine is picked from the URL in ``settings``. Schema access goes
    through ``tables``; the remaining methods are the operations the schema
    collections dispatch to, each building statements with the engine's
    builders and running them on the connection.

    A ``Database`` uses a single connection and is not thread-safe; use one
    instance per thread.

    Example:
        >>> with Database(DatabaseSettings(url="sqlite:///shop.db")) as database:
        ...     database.tables.add("Customer", [ColumnDefinition("CustomerId", int)])
    """

    def __init__(
        self,
        settings: DatabaseSettings,
        connection: DatabaseConnection | None = None,
    ) -> None:
        """Initialize the database.

        Args:
            settings: Connection settings
            connection: Connection to use instead of a new
                ``SQLAlchemyConnection`` on ``settings.url``
        """
        self.settings = settings
        self.dialect = create_dialect(settings.url)

        self.url = settings.url
        if settings.database_name and settings.database_name != database_name(settings.url):
            self.url = replace_database(settings.url, settings.database_name)
        self.database_name = database_name(self.url)

        self.master_url = settings.master_url
        if self.master_url is None and not self.dialect.file_based:
            self.master_url = replace_database(self.url, self.dialect.master_database)

        self.connection = connection or SQLAlchemyConnection(self.url, echo=settings.echo)
        self.information_schema = self.dialect.create_information_schema(self.connection)
        self.schema_builder = self.dialect.create_schema_builder(self.information_schema)
        self.query_builder = self.dialect.create_query_builder()

        self.naming_convention = NamingConvention(self.dialect.max_identifier_length)
        self.tables = TableCollection(self)

    @property
    def engine(self) -> Engine:
        return self.dialect.engine

    @property
    def max_identifier_length(self) -> int:
        return self.dialect.max_identifier_length

    @property
    def auto_increment_statement(self) -> str:
        return self.dialect.auto_increment_statement

    @property
    def unicode_data_type(self) -> str:
        return self.dialect.unicode_data_type

    @property
    def datetime_data_type(self) -> str:
        return self.dialect.datetime_data_type

    @property
    def insert_null_for_auto_increment(self) -> bool:
        return self.dialect.insert_null_for_auto_increment

    def supports(self, operation: Operation) -> bool:
        """Check whether the engine can perform a structural operation."""
        return self.dialect.supports(operation)

    # Lifecycle

    @property
    def exists(self) -> bool:
        """Whether the database exists.

        Server engines ask the administrative database; file-based engines
        check for the file.
        """
        if self.dialect.file_based:
            return self.information_schema.database_exists(self.database_name or "")

        self._use_master()
        try:
            return self.information_schema.database_exists(self._require_database_name())
        finally:
            self._use_target()

    def create(self) -> None:
        """Create the database."""
        if self.dialect.file_based:
            path = self._require_database_file("create database")
            self.connection.disconnect()
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=False)
            logger.info(f"Created database file {path}")
            return

        name = self._require_database_name()
        self._use_master()
        try:
            self._execute(self.schema_builder.create_database_sql(name))
        finally:
            self._use_target()
        logger.info(f"Created database {name}")

    def remove(self) -> None:
        """Remove the database and everything in it."""
        if self.dialect.file_based:
            path = self._require_database_file("remove database")
            self.connection.disconnect()
            path.unlink()
            logger.info(f"Removed database file {path}")
            return

        name = self._require_database_name()
        self._use_master()
        try:
            self._execute(self.schema_builder.drop_database_sql(name))
        finally:
            self._use_target()
        logger.info(f"Removed database {name}")

    def close(self) -> None:
        """Release the connection."""
        self.connection.disconnect()

    def begin_transaction(self) -> DatabaseTransaction:
        """Begin a transaction spanning the following operations.

        On engines without transactional DDL (see ``Operation.TRANSACTIONAL_DDL``)
        schema changes commit immediately even inside a transaction.
        """
        return self.connection.begin_transaction()

    def select(
        self, table_name: str, where: dict[str, Any] | None = None
    ) -> list[RowType]:
        """Return the rows of a table, optionally filtered by column equality."""
        query, params = self.query_builder.select(table_name, where=where)
        return self.connection.fetch_all(query, params)

    def __enter__(self) -> "Database":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Database(engine={self.engine.value!r}, name={self.database_name!r})"

    def _use_master(self) -> None:
        assert self.master_url is not None
        self.connection.use(self.master_url, autocommit=True)

    def _use_target(self) -> None:
        self.connection.use(self.url)

    def _require_database_name(self) -> str:
        if not self.database_name:
            raise SchemaValidationError("database_name", "The URL names no database.")
        return self.database_name

    def _require_database_file(self, operation: str) -> Path:
        path = sqlite_path(self.url)
        if path is None:
            raise UnsupportedOperationError(
                operation, self.dialect.display_name, "in-memory databases have no file"
            )
        return path

    def _execute(self, statements: Sequence[str]) -> None:
        for statement in statements:
            self.connection.execute(statement)

    def _execute_atomic(self, statements: Sequence[str]) -> None:
        """Run statements in one transaction where the engine allows it."""
        if (
            len(statements) < 2
            or self.connection.in_transaction
            or not self.supports(Operation.TRANSACTIONAL_DDL)
        ):
            self._execute(statements)
            return

        with self.connection.begin_transaction():
            self._execute(statements)

    # Tables

    def get_schema(self) -> str | None:
        return self.information_schema.get_schema()

    def get_table_names(self) -> list[str]:
        return self.information_schema.get_table_names()

    def add_table(self, table: TableDefinition) -> None:
        primary_key_name = None
        if table.primary_key_column_names:
            primary_key_name = self.naming_convention.primary_key_name(
                table.name, table.primary_key_column_names
            )
        foreign_keys = [
            self._name_foreign_key(table.name, foreign_key)
            for foreign_key in table.foreign_keys
        ]
        statements = self.schema_builder.create_table_sql(
            replace(table, foreign_keys=foreign_keys), primary_key_name
        )
        self._execute_atomic(statements)
        logger.info(f"Added table {table.name}")

    def remove_table(self, table_name: str) -> None:
        self._execute_atomic(self.schema_builder.drop_table_sql(table_name))
        logger.info(f"Removed table {table_name}")

    def rename_table(self, table_name: str, new_table_name: str) -> None:
        self._execute_atomic(self.schema_builder.rename_table_sql(table_name, new_table_name))
        logger.info(f"Renamed table {table_name} to {new_table_name}")

    # Columns

    def get_column_names(self, table_name: str) -> list[str]:
        return self.information_schema.get_column_names(table_name)

    def get_column_nullable(self, table_name: str, column_name: str) -> bool | None:
        return self.information_schema.get_column_nullable(table_name, column_name)

    def get_column_data_type(self, table_name: str, column_name: str) -> str | None:
        return self.information_schema.get_column_data_type(table_name, column_name)

    def get_column_auto_increment(self, table_name: str, column_name: str) -> bool:
        return self.information_schema.get_column_auto_increment(table_name, column_name)

    def add_column(
        self,
        table_name: str,
        column: ColumnDefinition,
        default_value: Any = None,
    ) -> None:
        """Add a column, giving existing rows ``default_value``.

        Raises:
            MissingDefaultValueError: If the column is NOT NULL without any
                default and the table has rows
        """
        if default_value is not None:
            statements = self.schema_builder.add_column_with_default_sql(
                table_name,
                column,
                default_value,
                self.naming_convention.default_constraint_name(table_name, column.name),
            )
        else:
            if not column.nullable and column.default is None and self.has_rows(table_name):
                raise MissingDefaultValueError(
                    table_name,
                    column.name,
                    "is not nullable and the table has rows; a default value is required.",
                )
            statements = self.schema_builder.add_column_sql(table_name, column)

        self._execute_atomic(statements)
        logger.debug(f"Added column {table_name}.{column.name}")

    def change_column(self, table_name: str, column: ColumnDefinition) -> None:
        """Change a column's type and nullability.

        Raises:
            UnsupportedOperationError: If the engine cannot change columns
            MissingDefaultValueError: If the column becomes NOT NULL while
                some rows hold NULL
        """
        self.dialect.require(Operation.CHANGE_COLUMN)
        if not column.nullable and self.has_rows(table_name, {column.name: None}):
            raise MissingDefaultValueError(
                table_name,
                column.name,
                "contains NULL values and cannot be made non-nullable; "
                "set a value for those rows first.",
            )
        self._execute_atomic(self.schema_builder.change_column_sql(table_name, column))
        logger.debug(f"Changed column {table_name}.{column.name}")

    def remove_column(self, table_name: str, column_name: str) -> None:
        self._execute_atomic(self.schema_builder.drop_column_sql(table_name, column_name))
        logger.debug(f"Removed column {table_name}.{column_name}")

    def rename_column(
        self, table_name: str, column_name: str, new_column_name: str
    ) -> None:
        self._execute_atomic(
            self.schema_builder.rename_column_sql(table_name, column_name, new_column_name)
        )
        logger.debug(f"Renamed column {table_name}.{column_name} to {new_column_name}")

    # Primary keys

    def get_primary_key_name(self, table_name: str) -> str | None:
        return self.information_schema.get_primary_key_name(table_name)

    def get_primary_key_column_names(
        self, table_name: str, primary_key_name: str
    ) -> list[str]:
        return self.information_schema.get_primary_key_column_names(
            table_name, primary_key_name
        )

    def add_primary_key(
        self, table_name: str, column_names: Sequence[str], primary_key_name: str
    ) -> None:
        self._execute_atomic(
            self.schema_builder.add_primary_key_sql(table_name, column_names, primary_key_name)
        )
        logger.debug(f"Added primary key {primary_key_name} to {table_name}")

    def remove_primary_key(self, table_name: str, primary_key_name: str) -> None:
        self._execute_atomic(
            self.schema_builder.drop_primary_key_sql(table_name, primary_key_name)
        )
        logger.debug(f"Removed primary key {primary_key_name} from {table_name}")

    # Foreign keys

    def get_foreign_key_names(self, table_name: str) -> list[str]:
        return self.information_schema.get_foreign_key_names(table_name)

    def get_foreign_key_foreign_table_name(
        self, table_name: str, foreign_key_name: str
    ) -> str | None:
        return self.information_schema.get_foreign_key_foreign_table_name(
            table_name, foreign_key_name
        )

    def get_foreign_key_column_names(
        self, table_name: str, foreign_key_name: str
    ) -> list[str]:
        return self.information_schema.get_foreign_key_column_names(
            table_name, foreign_key_name
        )

    def get_foreign_key_foreign_column_names(
        self, table_name: str, foreign_key_name: str
    ) -> list[str]:
        return self.information_schema.get_foreign_key_foreign_column_names(
            table_name, foreign_key_name
        )

    def add_foreign_key(self, table_name: str, foreign_key: ForeignKeyDefinition) -> str:
        """Add a foreign key and return its name."""
        foreign_key = self._name_foreign_key(table_name, foreign_key)
        self._execute_atomic(self.schema_builder.add_foreign_key_sql(table_name, foreign_key))
        logger.debug(f"Added foreign key {foreign_key.name} to {table_name}")
        assert foreign_key.name is not None
        return foreign_key.name

    def remove_foreign_key(self, table_name: str, foreign_key_name: str) -> None:
        self._execute_atomic(
            self.schema_builder.drop_foreign_key_sql(table_name, foreign_key_name)
        )
        logger.debug(f"Removed foreign key {foreign_key_name} from {table_name}")

    def _name_foreign_key(
        self, table_name: str, foreign_key: ForeignKeyDefinition
    ) -> ForeignKeyDefinition:
        if foreign_key.name is not None:
            return foreign_key
        name = self.naming_convention.foreign_key_name(
            table_name, foreign_key.column_names, foreign_key.foreign_table_name
        )
        return replace(foreign_key, name=name)

    # Indexes

    def get_index_names(self, table_name: str) -> list[str]:
        return self.information_schema.get_index_names(table_name)

    def get_index_unique(self, table_name: str, index_name: str) -> bool | None:
        return self.information_schema.get_index_unique(table_name, index_name)

    def get_index_column_names(self, table_name: str, index_name: str) -> list[str]:
        return self.information_schema.get_index_column_names(table_name, index_name)

    def get_index_include_column_names(
        self, table_name: str, index_name: str
    ) -> list[str]:
        return self.information_schema.get_index_include_column_names(
            table_name, index_name
        )

    def add_index(
        self,
        table_name: str,
        column_names: Sequence[str],
        unique: bool,
        index_name: str,
        include_column_names: Sequence[str] = (),
    ) -> None:
        self._execute_atomic(
            self.schema_builder.create_index_sql(
                table_name, index_name, column_names, unique, include_column_names
            )
        )
        logger.debug(f"Added index {index_name} to {table_name}")

    def remove_index(self, table_name: str, index_name: str) -> None:
        self._execute_atomic(self.schema_builder.drop_index_sql(table_name, index_name))
        logger.debug(f"Removed index {index_name} from {table_name}")

    # Rows

    def has_rows(self, table_name: str, where: dict[str, Any] | None = None) -> bool:
        """Check whether any row matches ``where``; a None value matches NULL."""
        query, params = self.query_builder.exists(table_name, where)
        return self.connection.fetch_one(query, params) is not None

    def count_rows(self, table_name: str, where: dict[str, Any] | None = None) -> int:
        query, params = self.query_builder.count(table_name, where)
        row = self.connection.fetch_one(query, params)
        return int(row["value"]) if row is not None else 0

    def insert_row(self, table_name: str, row: RowType) -> Any:
        """Insert a row.

        An auto-increment column missing from ``row`` or set to None is left
        to the engine.

        Returns:
            The identity of the new row when the table has an auto-increment
            column, otherwise None
        """
        values = dict(row)
        identity_column = self._get_auto_increment_column(table_name)
        identity = None

        if identity_column is not None:
            key = next(
                (name for name in values if name.lower() == identity_column.lower()),
                identity_column,
            )
            identity = values.get(key)
            if identity is None:
                values.pop(key, None)
                if self.insert_null_for_auto_increment:
                    values[key] = None

        query, params = self.query_builder.insert(table_name, values)
        self.connection.execute(query, params)

        if identity_column is None or identity is not None:
            return identity
        row_identity = self.connection.fetch_one(
            self.query_builder.last_identity_sql(table_name, identity_column)
        )
        return row_identity["value"] if row_identity is not None else None

    def update_row(self, table_name: str, row: RowType) -> int:
        """Update the row with the primary key values in ``row``.

        Returns:
            Number of updated rows
        """
        key, values = self._split_primary_key(table_name, row)
        if not values:
            return 0
        query, params = self.query_builder.update(table_name, values, key)
        return self.connection.execute(query, params)

    def delete_row(self, table_name: str, row: RowType) -> int:
        """Delete the row with the primary key values in ``row``.

        Returns:
            Number of deleted rows
        """
        key, _ = self._split_primary_key(table_name, row)
        query, params = self.query_builder.delete(table_name, key)
        return self.connection.execute(query, params)

    def set_column_value(self, table_name: str, column_name: str, value: Any) -> int:
        """Set one column to the same value on every row."""
        query, params = self.query_builder.set_column_value(table_name, column_name, value)
        return self.connection.execute(query, params)

    def _get_primary_key_columns(self, table_name: str) -> list[str]:
        primary_key_name = self.get_primary_key_name(table_name)
        if primary_key_name is None:
            return []
        return self.get_primary_key_column_names(table_name, primary_key_name)

    def _get_auto_increment_column(self, table_name: str) -> str | None:
        for column_name in self._get_primary_key_columns(table_name):
            if self.get_column_auto_increment(table_name, column_name):
                return column_name
        return None

    def _split_primary_key(
        self, table_name: str, row: RowType
    ) -> tuple[dict[str, Any], dict[str, Any]]:
        primary_key_columns = self._get_primary_key_columns(table_name)
        if not primary_key_columns:
            raise SchemaValidationError(
                "table_name", f"Table '{table_name}' has no primary key to match rows by."
            )

        lowered = {name.lower(): name for name in row}
        key: dict[str, Any] = {}
        for column_name in primary_key_columns:
            if column_name.lower() not in lowered:
                raise SchemaValidationError(
                    "row", f"Primary key column '{column_name}' is missing."
                )
            key[column_name] = row[lowered[column_name.lower()]]

        key_names = {name.lower() for name in primary_key_columns}
        values = {name: value for name, value in row.items() if name.lower() not in key_names}
        return key, values
