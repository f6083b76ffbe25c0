"""Schema collections: tables, columns, indexes, keys and rows."""

from .columns import ColumnCollection, ColumnInfo
from .foreign_keys import ForeignKeyCollection, ForeignKeyInfo
from .indexes import IndexCollection, IndexInfo
from .primary_key import PrimaryKey
from .rows import RowCollection
from .tables import TableCollection, TableInfo

__all__ = [
    "ColumnCollection",
    "ColumnInfo",
    "ForeignKeyCollection",
    "ForeignKeyInfo",
    "IndexCollection",
    "IndexInfo",
    "PrimaryKey",
    "RowCollection",
    "TableCollection",
    "TableInfo",
]
