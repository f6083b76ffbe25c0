"""Common type definitions for schemasmith."""

from enum import Enum
from typing import Any, TypeAlias

DatabaseParamType: TypeAlias = dict[str, Any] | None
RowType: TypeAlias = dict[str, Any]
DataType: TypeAlias = type | str


class Engine(str, Enum):
    """Supported database engines."""

    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    SQLSERVER = "sqlserver"


class Operation(str, Enum):
    """Structural operations an engine may or may not support."""

    CHANGE_COLUMN = "change column"
    RENAME_COLUMN = "rename column"
    REMOVE_COLUMN = "remove column"
    ADD_PRIMARY_KEY = "add primary key"
    REMOVE_PRIMARY_KEY = "remove primary key"
    ADD_FOREIGN_KEY = "add foreign key"
    REMOVE_FOREIGN_KEY = "remove foreign key"
    INCLUDE_COLUMNS = "index include columns"
    DROP_DEFAULT = "drop column default"
    TRANSACTIONAL_DDL = "transactional data definition language"


class NameKind(str, Enum):
    """Kinds of objects the naming convention can name."""

    INDEX = "index"
    FOREIGN_KEY = "foreign key"
    PRIMARY_KEY = "primary key"
    DEFAULT_CONSTRAINT = "default constraint"
