"""Abstract dialect interface: everything that differs between database engines."""

import math
from abc import ABC, abstractmethod
from datetime import date, datetime, time
from decimal import Decimal
from typing import TYPE_CHECKING, Any, ClassVar
from uuid import UUID

from schemasmith.exceptions import SchemaValidationError, UnsupportedOperationError
from schemasmith.types import DataType, Engine, Operation

if TYPE_CHECKING:
    from schemasmith.database.interfaces.connection import DatabaseConnection
    from schemasmith.database.interfaces.information_schema import InformationSchema
    from schemasmith.database.interfaces.query_builder import QueryBuilder
    from schemasmith.database.interfaces.schema_builder import SchemaBuilder

DEFAULT_STRING_LENGTH = 50


class Dialect(ABC):
    """Engine capabilities, limits, identifier quoting and type mapping.

    The rest of the library asks the dialect what the engine can do through
    ``supports`` and ``require``; it never checks which engine it talks to.
    """

    engine: ClassVar[Engine]
    display_name: ClassVar[str]
    max_identifier_length: ClassVar[int]
    auto_increment_statement: ClassVar[str] = ""
    unicode_data_type: ClassVar[str] = "NVARCHAR"
    datetime_data_type: ClassVar[str] = "DATETIME"
    insert_null_for_auto_increment: ClassVar[bool] = False
    master_database: ClassVar[str | None] = None
    file_based: ClassVar[bool] = False
    unsupported_operations: ClassVar[frozenset[Operation]] = frozenset()
    identifier_quote: ClassVar[tuple[str, str]] = ('"', '"')
    type_names: ClassVar[dict[type, str]] = {
        bool: "BIT",
        int: "INTEGER",
        float: "FLOAT",
        Decimal: "DECIMAL(19, 5)",
        date: "DATE",
        time: "TIME",
        bytes: "VARBINARY(MAX)",
        UUID: "CHAR(36)",
    }

    def supports(self, operation: Operation) -> bool:
        """Check whether the engine can perform an operation."""
        return operation not in self.unsupported_operations

    def require(self, operation: Operation, detail: str | None = None) -> None:
        """Raise ``UnsupportedOperationError`` unless the operation is supported."""
        if not self.supports(operation):
            raise UnsupportedOperationError(operation.value, self.display_name, detail)

    def escape_identifier(self, identifier: str) -> str:
        """Quote an identifier, doubling any embedded closing quote."""
        start, end = self.identifier_quote
        return f"{start}{identifier.replace(end, end * 2)}{end}"

    def escape_identifiers(self, identifiers: list[str] | tuple[str, ...]) -> str:
        """Quote identifiers and join them into a column list."""
        return ", ".join(self.escape_identifier(name) for name in identifiers)

    def map_type(
        self,
        data_type: DataType,
        length: int | None = None,
        auto_increment: bool = False,
    ) -> str:
        """Map a semantic type to this engine's SQL type.

        Args:
            data_type: Python type such as ``int`` or ``str``, or a raw SQL
                type string that is used unchanged
            length: Length for string types, defaults to 50
            auto_increment: Whether the column is an auto-incrementing key

        Returns:
            SQL type string

        Raises:
            SchemaValidationError: If the type has no mapping
        """
        if isinstance(data_type, str):
            if not data_type.strip():
                raise SchemaValidationError("data_type", "Value cannot be empty.")
            return data_type
        if data_type is str:
            return f"{self.unicode_data_type}({length or DEFAULT_STRING_LENGTH})"
        if data_type is datetime:
            return self.datetime_data_type
        if data_type in self.type_names:
            return self.type_names[data_type]
        raise SchemaValidationError(
            "data_type", f"Type {getattr(data_type, '__name__', data_type)} has no SQL mapping."
        )

    def render_literal(self, value: Any) -> str:
        """Render a value as a SQL literal for DEFAULT clauses.

        DML never uses this; row values always travel as bound parameters.

        Raises:
            SchemaValidationError: If the value cannot be rendered safely
        """
        if value is None:
            return "NULL"
        if isinstance(value, bool):
            return self.render_boolean(value)
        if isinstance(value, (int, Decimal)):
            return str(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise SchemaValidationError(
                    "default_value", f"{value} cannot be used as a default value."
                )
            return repr(value)
        if isinstance(value, str):
            return self.quote_string(value)
        if isinstance(value, datetime):
            return self.quote_string(value.isoformat(sep=" "))
        if isinstance(value, (date, time)):
            return self.quote_string(value.isoformat())
        if isinstance(value, UUID):
            return self.quote_string(str(value))
        if isinstance(value, (bytes, bytearray)):
            return self.render_bytes(bytes(value))
        raise SchemaValidationError(
            "default_value",
            f"Values of type {type(value).__name__} cannot be used as a default value.",
        )

    def quote_string(self, value: str) -> str:
        return "'" + value.replace("'", "''") + "'"

    def render_boolean(self, value: bool) -> str:
        return "1" if value else "0"

    def render_bytes(self, value: bytes) -> str:
        return f"X'{value.hex()}'"

    @abstractmethod
    def create_information_schema(
        self, connection: "DatabaseConnection"
    ) -> "InformationSchema":
        """Create the metadata reader for this engine."""
        pass

    @abstractmethod
    def create_schema_builder(
        self, information_schema: "InformationSchema"
    ) -> "SchemaBuilder":
        """Create the DDL statement builder for this engine."""
        pass

    @abstractmethod
    def create_query_builder(self) -> "QueryBuilder":
        """Create the DML statement builder for this engine."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
