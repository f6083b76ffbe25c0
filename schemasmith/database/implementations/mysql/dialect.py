"""MySQL dialect."""

from typing import TYPE_CHECKING

from schemasmith.database.interfaces.dialect import Dialect
from schemasmith.types import Engine, Operation

if TYPE_CHECKING:
    from schemasmith.database.interfaces import DatabaseConnection, InformationSchema


class MySQLDialect(Dialect):
    """MySQL and MariaDB.

    DDL statements commit implicitly, so a transaction only covers row
    changes. Indexes have no INCLUDE columns.
    """

    engine = Engine.MYSQL
    display_name = "MySQL"
    max_identifier_length = 64
    auto_increment_statement = "AUTO_INCREMENT"
    unicode_data_type = "VARCHAR"
    identifier_quote = ("`", "`")
    unsupported_operations = frozenset(
        {Operation.INCLUDE_COLUMNS, Operation.TRANSACTIONAL_DDL}
    )
    type_names = {
        **Dialect.type_names,
        bool: "BOOLEAN",
        int: "INT",
        float: "DOUBLE",
        bytes: "LONGBLOB",
    }

    def quote_string(self, value: str) -> str:
        return "'" + value.replace("\\", "\\\\").replace("'", "''") + "'"

    def create_information_schema(
        self, connection: "DatabaseConnection"
    ) -> "InformationSchema":
        from .information_schema import MySQLInformationSchema

        return MySQLInformationSchema(self, connection)

    def create_schema_builder(self, information_schema: "InformationSchema"):
        from .schema_builder import MySQLSchemaBuilder

        return MySQLSchemaBuilder(self, information_schema)

    def create_query_builder(self):
        from .query_builder import MySQLQueryBuilder

        return MySQLQueryBuilder(self)
