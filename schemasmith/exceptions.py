"""Exceptions raised by schemasmith.

Errors reported by the database driver are not wrapped: SQLAlchemy's
``DBAPIError`` family reaches the caller unchanged.
"""


class SchemaError(Exception):
    """Base exception for schemasmith errors."""

    pass


class SchemaValidationError(SchemaError, ValueError):
    """Raised when an argument is rejected before any SQL is built."""

    def __init__(self, argument_name: str, message: str) -> None:
        self.argument_name = argument_name
        super().__init__(f"Invalid argument '{argument_name}': {message}")


class MissingDefaultValueError(SchemaValidationError):
    """Raised when existing rows would be left without a value for a NOT NULL column."""

    def __init__(self, table_name: str, column_name: str, reason: str) -> None:
        self.table_name = table_name
        self.column_name = column_name
        super().__init__(
            "default_value",
            f"Column '{column_name}' in table '{table_name}' {reason}",
        )


class SchemaObjectNotFoundError(SchemaError, LookupError):
    """Raised when mutating a table, column, index or key that does not exist."""

    def __init__(self, kind: str, name: str, table_name: str | None = None) -> None:
        self.kind = kind
        self.name = name
        self.table_name = table_name
        msg = f"{kind.capitalize()} '{name}' does not exist"
        if table_name:
            msg += f" in table '{table_name}'"
        super().__init__(msg)


class UnsupportedOperationError(SchemaError, NotImplementedError):
    """Raised when an engine cannot perform a structural change."""

    def __init__(self, operation: str, engine: str, detail: str | None = None) -> None:
        self.operation = operation
        self.engine = engine
        msg = f"Operation '{operation}' is not supported by {engine}"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class UnsupportedEngineError(SchemaError, ValueError):
    """Raised when no dialect is registered for a database URL."""

    def __init__(self, backend_name: str) -> None:
        self.backend_name = backend_name
        super().__init__(f"Unsupported database engine: {backend_name}")
