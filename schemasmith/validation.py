"""Argument validators shared by the schema collections.

Every check raises ``SchemaValidationError`` naming the argument, so a bad
call never reaches the database.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from schemasmith.exceptions import SchemaValidationError


def is_not_none(value: Any, argument_name: str) -> None:
    """Reject ``None``."""
    if value is None:
        raise SchemaValidationError(argument_name, "Value cannot be None.")


def is_true(condition: bool, argument_name: str, message: str) -> None:
    """Reject a failed precondition with a custom message."""
    if not condition:
        raise SchemaValidationError(argument_name, message)


def max_length(value: str | None, argument_name: str, limit: int) -> None:
    """Reject strings longer than ``limit`` characters. ``None`` passes."""
    if value is not None and len(value) > limit:
        raise SchemaValidationError(
            argument_name,
            f"'{value}' cannot be longer than {limit} characters.",
        )


def identifier(value: str | None, argument_name: str, limit: int) -> None:
    """Validate a table, column, index or constraint name.

    Args:
        value: The identifier to validate
        argument_name: Name reported in the error message
        limit: Maximum identifier length of the active engine

    Raises:
        SchemaValidationError: If the identifier is None, not a string, empty
            or too long
    """
    is_not_none(value, argument_name)
    if not isinstance(value, str):
        raise SchemaValidationError(
            argument_name, f"Expected a string, got {type(value).__name__}."
        )
    if not value.strip():
        raise SchemaValidationError(argument_name, "Value cannot be empty.")
    max_length(value, argument_name, limit)


def optional_identifier(value: str | None, argument_name: str, limit: int) -> None:
    """Validate an identifier that may be omitted."""
    if value is not None:
        identifier(value, argument_name, limit)


def identifiers(
    values: Sequence[str] | None, argument_name: str, limit: int
) -> list[str]:
    """Validate a non-empty sequence of identifiers.

    A bare string is accepted as a single identifier.

    Returns:
        The identifiers as a new list, order preserved
    """
    is_not_none(values, argument_name)
    items = [values] if isinstance(values, str) else list(values)  # type: ignore[arg-type]
    if not items:
        raise SchemaValidationError(argument_name, "Value cannot be empty.")
    for item in items:
        identifier(item, argument_name, limit)
    return items


def optional_identifiers(
    values: Iterable[str] | None, argument_name: str, limit: int
) -> list[str]:
    """Validate a sequence of identifiers that may be omitted or empty."""
    if values is None:
        return []
    items = [values] if isinstance(values, str) else list(values)
    for item in items:
        identifier(item, argument_name, limit)
    return items


def same_length(
    first: Sequence[Any], second: Sequence[Any], argument_name: str
) -> None:
    """Reject two sequences that must correspond positionally but differ in length."""
    if len(first) != len(second):
        raise SchemaValidationError(
            argument_name,
            f"Expected {len(first)} column names, got {len(second)}.",
        )
