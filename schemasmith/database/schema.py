"""Definitions describing tables, columns and foreign keys to create."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from schemasmith.types import DataType


@dataclass
class ColumnDefinition:
    """Column to create or change.

    Attributes:
        name: Column name
        data_type: Python type (``int``, ``str``, ``datetime``, ...) or a raw
            SQL type string
        nullable: Whether the column accepts NULL
        length: Length of string columns, 50 when omitted
        primary_key: Whether the column is part of the primary key
        auto_increment: Whether the engine generates values on insert;
            implies ``primary_key`` and NOT NULL
        default: Default value declared on the column, rendered as a literal
    """

    name: str
    data_type: DataType
    nullable: bool = False
    length: int | None = None
    primary_key: bool = False
    auto_increment: bool = False
    default: Any = None

    def __post_init__(self) -> None:
        if self.auto_increment:
            self.primary_key = True
            self.nullable = False


@dataclass
class ForeignKeyDefinition:
    """Foreign key to create.

    Attributes:
        column_names: Referencing columns, in order
        foreign_table_name: Referenced table
        foreign_column_names: Referenced columns, matched to ``column_names``
            by position; the same names as ``column_names`` when omitted
        name: Constraint name; the naming convention supplies one when omitted
    """

    column_names: Sequence[str]
    foreign_table_name: str
    foreign_column_names: Sequence[str] | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.column_names, str):
            self.column_names = [self.column_names]
        if isinstance(self.foreign_column_names, str):
            self.foreign_column_names = [self.foreign_column_names]
        if self.foreign_column_names is None:
            self.foreign_column_names = list(self.column_names)


@dataclass
class TableDefinition:
    """Table to create."""

    name: str
    columns: Sequence[ColumnDefinition]
    foreign_keys: Sequence[ForeignKeyDefinition] = field(default_factory=list)

    @property
    def primary_key_column_names(self) -> list[str]:
        return [column.name for column in self.columns if column.primary_key]
