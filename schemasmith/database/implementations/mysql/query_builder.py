"""MySQL query builder implementation."""

from schemasmith.database.implementations.ansi import StandardQueryBuilder


class MySQLQueryBuilder(StandardQueryBuilder):
    """MySQL-specific query builder."""

    def insert_defaults_sql(self, table_sql: str) -> str:
        return f"INSERT INTO {table_sql} () VALUES ()"

    def last_identity_sql(self, table: str, column: str) -> str:
        return "SELECT LAST_INSERT_ID() AS value"
