"""PostgreSQL dialect."""

from typing import TYPE_CHECKING
from uuid import UUID

from schemasmith.database.interfaces.dialect import Dialect
from schemasmith.types import DataType, Engine

if TYPE_CHECKING:
    from schemasmith.database.interfaces import DatabaseConnection, InformationSchema


class PostgreSQLDialect(Dialect):
    """PostgreSQL: every operation is supported, DDL included in transactions."""

    engine = Engine.POSTGRESQL
    display_name = "PostgreSQL"
    max_identifier_length = 63
    unicode_data_type = "VARCHAR"
    datetime_data_type = "TIMESTAMP"
    master_database = "postgres"
    type_names = {
        **Dialect.type_names,
        bool: "BOOLEAN",
        float: "DOUBLE PRECISION",
        bytes: "BYTEA",
        UUID: "UUID",
    }

    def map_type(
        self,
        data_type: DataType,
        length: int | None = None,
        auto_increment: bool = False,
    ) -> str:
        # SERIAL creates the backing sequence and the nextval() default.
        if auto_increment and data_type is int:
            return "SERIAL"
        return super().map_type(data_type, length, auto_increment)

    def render_boolean(self, value: bool) -> str:
        return "TRUE" if value else "FALSE"

    def render_bytes(self, value: bytes) -> str:
        return f"'\\x{value.hex()}'::bytea"

    def create_information_schema(
        self, connection: "DatabaseConnection"
    ) -> "InformationSchema":
        from .information_schema import PostgreSQLInformationSchema

        return PostgreSQLInformationSchema(self, connection)

    def create_schema_builder(self, information_schema: "InformationSchema"):
        from .schema_builder import PostgreSQLSchemaBuilder

        return PostgreSQLSchemaBuilder(self, information_schema)

    def create_query_builder(self):
        from .query_builder import PostgreSQLQueryBuilder

        return PostgreSQLQueryBuilder(self)
