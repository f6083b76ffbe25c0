"""schemasmith: reflect on and change relational database schemas across engines."""

from schemasmith.config import DatabaseSettings, load_settings
from schemasmith.database import (
    ColumnDefinition,
    Database,
    ForeignKeyDefinition,
    TableDefinition,
)
from schemasmith.exceptions import (
    MissingDefaultValueError,
    SchemaError,
    SchemaObjectNotFoundError,
    SchemaValidationError,
    UnsupportedEngineError,
    UnsupportedOperationError,
)
from schemasmith.naming import NamingConvention
from schemasmith.types import Engine, NameKind, Operation

__version__ = "0.1.0"

__all__ = [
    "ColumnDefinition",
    "Database",
    "DatabaseSettings",
    "Engine",
    "ForeignKeyDefinition",
    "MissingDefaultValueError",
    "NameKind",
    "NamingConvention",
    "Operation",
    "SchemaError",
    "SchemaObjectNotFoundError",
    "SchemaValidationError",
    "TableDefinition",
    "UnsupportedEngineError",
    "UnsupportedOperationError",
    "load_settings",
]
