"""SQL Server dialect."""

from typing import TYPE_CHECKING
from uuid import UUID

from schemasmith.database.interfaces.dialect import Dialect
from schemasmith.types import Engine

if TYPE_CHECKING:
    from schemasmith.database.interfaces import DatabaseConnection, InformationSchema


class SQLServerDialect(Dialect):
    """Microsoft SQL Server."""

    engine = Engine.SQLSERVER
    display_name = "SQL Server"
    max_identifier_length = 128
    auto_increment_statement = "IDENTITY"
    master_database = "master"
    identifier_quote = ("[", "]")
    type_names = {
        **Dialect.type_names,
        int: "INT",
        UUID: "UNIQUEIDENTIFIER",
    }

    def quote_string(self, value: str) -> str:
        return "N" + super().quote_string(value)

    def render_bytes(self, value: bytes) -> str:
        return f"0x{value.hex()}"

    def create_information_schema(
        self, connection: "DatabaseConnection"
    ) -> "InformationSchema":
        from .information_schema import SQLServerInformationSchema

        return SQLServerInformationSchema(self, connection)

    def create_schema_builder(self, information_schema: "InformationSchema"):
        from .schema_builder import SQLServerSchemaBuilder

        return SQLServerSchemaBuilder(self, information_schema)

    def create_query_builder(self):
        from .query_builder import SQLServerQueryBuilder

        return SQLServerQueryBuilder(self)
