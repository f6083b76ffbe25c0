"""SQLite query builder implementation."""

from schemasmith.database.implementations.ansi import StandardQueryBuilder


class SQLiteQueryBuilder(StandardQueryBuilder):
    """SQLite-specific query builder."""

    def last_identity_sql(self, table: str, column: str) -> str:
        return "SELECT last_insert_rowid() AS value"
