"""SQLite dialect."""

from typing import TYPE_CHECKING

from schemasmith.database.interfaces.dialect import Dialect
from schemasmith.types import Engine, Operation

if TYPE_CHECKING:
    from schemasmith.database.interfaces import DatabaseConnection, InformationSchema


class SQLiteDialect(Dialect):
    """SQLite: a file-based engine with limited ALTER TABLE support.

    Primary keys and column types are fixed once a table exists. Foreign keys
    are added and removed by rebuilding the table.
    """

    engine = Engine.SQLITE
    display_name = "SQLite"
    max_identifier_length = 128
    auto_increment_statement = "AUTOINCREMENT"
    insert_null_for_auto_increment = True
    file_based = True
    unsupported_operations = frozenset(
        {
            Operation.CHANGE_COLUMN,
            Operation.ADD_PRIMARY_KEY,
            Operation.REMOVE_PRIMARY_KEY,
            Operation.INCLUDE_COLUMNS,
            Operation.DROP_DEFAULT,
        }
    )
    type_names = {
        **Dialect.type_names,
        bool: "BOOLEAN",
        float: "REAL",
        bytes: "BLOB",
    }

    def create_information_schema(
        self, connection: "DatabaseConnection"
    ) -> "InformationSchema":
        from .information_schema import SQLiteInformationSchema

        return SQLiteInformationSchema(self, connection)

    def create_schema_builder(self, information_schema: "InformationSchema"):
        from .schema_builder import SQLiteSchemaBuilder

        return SQLiteSchemaBuilder(self, information_schema)

    def create_query_builder(self):
        from .query_builder import SQLiteQueryBuilder

        return SQLiteQueryBuilder(self)
