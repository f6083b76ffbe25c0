"""SQLite information schema reader.

SQLite has no INFORMATION_SCHEMA views. Columns, indexes and foreign keys
come from the ``pragma_*`` table-valued functions; constraint names, which
the pragmas do not report, are parsed from the CREATE TABLE statement kept
in ``sqlite_master``.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from schemasmith.database.interfaces.information_schema import InformationSchema

IDENTIFIER = r'(?:"(?:[^"]|"")+"|\[[^\]]+\]|`(?:[^`]|``)+`|[^\s(),]+)'

PRIMARY_KEY_PATTERN = re.compile(
    rf"CONSTRAINT\s+({IDENTIFIER})\s+PRIMARY\s+KEY", re.IGNORECASE
)
FOREIGN_KEY_PATTERN = re.compile(
    rf"CONSTRAINT\s+(?P<name>{IDENTIFIER})\s+FOREIGN\s+KEY\s*\((?P<columns>[^)]*)\)"
    rf"\s*REFERENCES\s+(?P<foreign_table>{IDENTIFIER})\s*"
    r"(?:\((?P<foreign_columns>[^)]*)\))?"
    r"(?:\s+(?:ON\s+(?:DELETE|UPDATE)\s+(?:SET\s+NULL|SET\s+DEFAULT|CASCADE|RESTRICT|NO\s+ACTION)"
    r"|MATCH\s+\w+|(?:NOT\s+)?DEFERRABLE(?:\s+INITIALLY\s+(?:DEFERRED|IMMEDIATE))?))*",
    re.IGNORECASE,
)
AUTOINCREMENT_PATTERN = re.compile(r"\bAUTOINCREMENT\b", re.IGNORECASE)


def unquote_identifier(identifier: str) -> str:
    """Strip SQLite identifier quoting: ``"a""b"`` becomes ``a"b``."""
    identifier = identifier.strip()
    if len(identifier) >= 2:
        start, end = identifier[0], identifier[-1]
        if start == '"' and end == '"':
            return identifier[1:-1].replace('""', '"')
        if start == "`" and end == "`":
            return identifier[1:-1].replace("``", "`")
        if start == "[" and end == "]":
            return identifier[1:-1]
    return identifier


def split_identifiers(column_list: str | None) -> list[str]:
    """Split a parenthesized column list into unquoted names."""
    if not column_list:
        return []
    return [unquote_identifier(name) for name in re.findall(IDENTIFIER, column_list)]


@dataclass
class SQLiteForeignKey:
    """Foreign key of one table, as reported by ``pragma_foreign_key_list``."""

    name: str
    column_names: list[str]
    foreign_table_name: str
    foreign_column_names: list[str]


class SQLiteInformationSchema(InformationSchema):
    """Metadata reader for SQLite databases."""

    def get_schema(self) -> str | None:
        return None

    def database_exists(self, database_name: str) -> bool:
        """Check whether the database file exists; in-memory databases always do."""
        if not database_name or database_name == ":memory:":
            return True
        return Path(database_name).is_file()

    def get_table_names(self) -> list[str]:
        query = """
            SELECT name
            FROM sqlite_master
            WHERE type = 'table' AND name NOT LIKE 'sqlite\\_%' ESCAPE '\\'
            ORDER BY name
        """
        return self._fetch_names(query)

    def get_table_sql(self, table_name: str) -> str | None:
        """Return the CREATE TABLE statement SQLite keeps for a table."""
        query = """
            SELECT sql AS value
            FROM sqlite_master
            WHERE type = 'table' AND name = :table_name COLLATE NOCASE
        """
        return self._fetch_value(query, {"table_name": table_name})

    def get_index_sql(self, table_name: str) -> list[str]:
        """Return the CREATE INDEX statements of the explicit indexes on a table."""
        query = """
            SELECT sql AS value
            FROM sqlite_master
            WHERE type = 'index'
              AND tbl_name = :table_name COLLATE NOCASE
              AND sql IS NOT NULL
            ORDER BY name
        """
        return self._fetch_names(query, {"table_name": table_name}, key="value")

    def get_column_names(self, table_name: str) -> list[str]:
        query = "SELECT name FROM pragma_table_info(:table_name) ORDER BY cid"
        return self._fetch_names(query, {"table_name": table_name})

    def _get_column(self, table_name: str, column_name: str) -> dict[str, Any] | None:
        query = """
            SELECT name, type, "notnull" AS not_null, pk
            FROM pragma_table_info(:table_name)
            WHERE name = :column_name COLLATE NOCASE
        """
        return self.connection.fetch_one(
            query, {"table_name": table_name, "column_name": column_name}
        )

    def get_column_nullable(self, table_name: str, column_name: str) -> bool | None:
        column = self._get_column(table_name, column_name)
        if column is None:
            return None
        return not column["not_null"]

    def get_column_data_type(self, table_name: str, column_name: str) -> str | None:
        column = self._get_column(table_name, column_name)
        return column["type"] if column is not None else None

    def get_column_auto_increment(self, table_name: str, column_name: str) -> bool:
        # Only a lone INTEGER PRIMARY KEY declared AUTOINCREMENT qualifies.
        column = self._get_column(table_name, column_name)
        if column is None or not column["pk"] or column["type"].upper() != "INTEGER":
            return False
        if len(self._get_primary_key_column_names(table_name)) != 1:
            return False
        sql = self.get_table_sql(table_name) or ""
        return AUTOINCREMENT_PATTERN.search(sql) is not None

    def _get_primary_key_column_names(self, table_name: str) -> list[str]:
        query = """
            SELECT name
            FROM pragma_table_info(:table_name)
            WHERE pk > 0
            ORDER BY pk
        """
        return self._fetch_names(query, {"table_name": table_name})

    def get_primary_key_name(self, table_name: str) -> str | None:
        if not self._get_primary_key_column_names(table_name):
            return None
        match = PRIMARY_KEY_PATTERN.search(self.get_table_sql(table_name) or "")
        if match is None:
            return f"PK_{table_name}"
        return unquote_identifier(match.group(1))

    def get_primary_key_column_names(
        self, table_name: str, primary_key_name: str
    ) -> list[str]:
        # A table has at most one primary key; the name only confirms it.
        if self.get_primary_key_name(table_name) != primary_key_name:
            return []
        return self._get_primary_key_column_names(table_name)

    def get_foreign_keys(self, table_name: str) -> list[SQLiteForeignKey]:
        """Return the foreign keys of a table, named from its CREATE TABLE statement.

        Foreign keys declared without a CONSTRAINT name are given
        ``FK_<table>_<columns>_<foreign table>``.
        """
        query = """
            SELECT id, seq, "table" AS foreign_table, "from" AS column_name,
                   "to" AS foreign_column
            FROM pragma_foreign_key_list(:table_name)
            ORDER BY id, seq
        """
        groups: dict[int, list[dict[str, Any]]] = {}
        for row in self.connection.fetch_all(query, {"table_name": table_name}):
            groups.setdefault(row["id"], []).append(row)

        declared = [
            (
                unquote_identifier(match.group("name")),
                [name.lower() for name in split_identifiers(match.group("columns"))],
                unquote_identifier(match.group("foreign_table")).lower(),
            )
            for match in FOREIGN_KEY_PATTERN.finditer(self.get_table_sql(table_name) or "")
        ]

        foreign_keys = []
        for rows in groups.values():
            column_names = [row["column_name"] for row in rows]
            foreign_table_name = rows[0]["foreign_table"]
            foreign_column_names = [row["foreign_column"] for row in rows]
            if any(name is None for name in foreign_column_names):
                foreign_column_names = self._get_primary_key_column_names(
                    foreign_table_name
                )

            key = ([name.lower() for name in column_names], foreign_table_name.lower())
            name = next(
                (entry[0] for entry in declared if (entry[1], entry[2]) == key), None
            )
            if name is None:
                name = "_".join(["FK", table_name, *column_names, foreign_table_name])
            else:
                declared = [entry for entry in declared if entry[0] != name]

            foreign_keys.append(
                SQLiteForeignKey(name, column_names, foreign_table_name, foreign_column_names)
            )

        return sorted(foreign_keys, key=lambda foreign_key: foreign_key.name)

    def _get_foreign_key(
        self, table_name: str, foreign_key_name: str
    ) -> SQLiteForeignKey | None:
        for foreign_key in self.get_foreign_keys(table_name):
            if foreign_key.name.lower() == foreign_key_name.lower():
                return foreign_key
        return None

    def get_foreign_key_names(self, table_name: str) -> list[str]:
        return [foreign_key.name for foreign_key in self.get_foreign_keys(table_name)]

    def get_foreign_key_foreign_table_name(
        self, table_name: str, foreign_key_name: str
    ) -> str | None:
        foreign_key = self._get_foreign_key(table_name, foreign_key_name)
        return foreign_key.foreign_table_name if foreign_key is not None else None

    def get_foreign_key_column_names(
        self, table_name: str, foreign_key_name: str
    ) -> list[str]:
        foreign_key = self._get_foreign_key(table_name, foreign_key_name)
        return foreign_key.column_names if foreign_key is not None else []

    def get_foreign_key_foreign_column_names(
        self, table_name: str, foreign_key_name: str
    ) -> list[str]:
        foreign_key = self._get_foreign_key(table_name, foreign_key_name)
        return foreign_key.foreign_column_names if foreign_key is not None else []

    def _get_indexes(self, table_name: str) -> list[dict[str, Any]]:
        # origin 'c' excludes the automatic indexes behind PRIMARY KEY and UNIQUE
        query = """
            SELECT name, "unique" AS is_unique
            FROM pragma_index_list(:table_name)
            WHERE origin = 'c'
            ORDER BY name
        """
        return self.connection.fetch_all(query, {"table_name": table_name})

    def _get_index(self, table_name: str, index_name: str) -> dict[str, Any] | None:
        for index in self._get_indexes(table_name):
            if index["name"].lower() == index_name.lower():
                return index
        return None

    def get_index_names(self, table_name: str) -> list[str]:
        return [index["name"] for index in self._get_indexes(table_name)]

    def get_index_unique(self, table_name: str, index_name: str) -> bool | None:
        index = self._get_index(table_name, index_name)
        return bool(index["is_unique"]) if index is not None else None

    def get_index_column_names(self, table_name: str, index_name: str) -> list[str]:
        index = self._get_index(table_name, index_name)
        if index is None:
            return []
        query = "SELECT name FROM pragma_index_info(:index_name) ORDER BY seqno"
        return self._fetch_names(query, {"index_name": index["name"]})
