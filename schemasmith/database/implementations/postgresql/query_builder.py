"""PostgreSQL query builder implementation."""

from schemasmith.database.implementations.ansi import StandardQueryBuilder


class PostgreSQLQueryBuilder(StandardQueryBuilder):
    """PostgreSQL-specific query builder."""

    def last_identity_sql(self, table: str, column: str) -> str:
        # pg_get_serial_sequence parses its first argument as an identifier.
        table_literal = self.dialect.quote_string(self.dialect.escape_identifier(table))
        column_literal = self.dialect.quote_string(column)
        return (
            f"SELECT currval(pg_get_serial_sequence({table_literal}, {column_literal})) "
            "AS value"
        )
