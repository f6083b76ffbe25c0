"""SQL fragment helpers shared by the query builders."""

from collections.abc import Callable
from typing import Any

Escape = Callable[[str], str]


def build_where_clause(
    conditions: dict[str, Any] | None, escape: Escape, prefix: str = "w"
) -> tuple[str, dict[str, Any]]:
    """Build WHERE clause from conditions dictionary.

    Parameters are numbered rather than named after the columns, so any
    column name is safe to use.

    Args:
        conditions: Column name to value mapping; None matches NULL
        escape: Identifier escaping function of the dialect
        prefix: Prefix for the generated parameter names

    Returns:
        Tuple of (where_clause, parameters_dict)

    Example:
        >>> build_where_clause({"Name": "John", "Age": None}, lambda n: f'"{n}"')
        ('WHERE "Name" = :w0 AND "Age" IS NULL', {'w0': 'John'})
    """
    if not conditions:
        return "", {}

    clauses: list[str] = []
    params: dict[str, Any] = {}

    for position, (column, value) in enumerate(conditions.items()):
        if value is None:
            clauses.append(f"{escape(column)} IS NULL")
            continue
        param_name = f"{prefix}{position}"
        clauses.append(f"{escape(column)} = :{param_name}")
        params[param_name] = value

    return f"WHERE {' AND '.join(clauses)}", params


def build_assignments(
    data: dict[str, Any], escape: Escape, prefix: str = "v"
) -> tuple[str, dict[str, Any]]:
    """Build the SET list of an UPDATE.

    Example:
        >>> build_assignments({"Name": "John"}, lambda n: f'"{n}"')
        ('"Name" = :v0', {'v0': 'John'})
    """
    assignments: list[str] = []
    params: dict[str, Any] = {}

    for position, (column, value) in enumerate(data.items()):
        param_name = f"{prefix}{position}"
        assignments.append(f"{escape(column)} = :{param_name}")
        params[param_name] = value

    return ", ".join(assignments), params


def build_values(
    data: dict[str, Any], escape: Escape, prefix: str = "v"
) -> tuple[str, str, dict[str, Any]]:
    """Build the column and VALUES lists of an INSERT.

    Returns:
        Tuple of (columns_sql, placeholders_sql, parameters_dict)
    """
    columns: list[str] = []
    placeholders: list[str] = []
    params: dict[str, Any] = {}

    for position, (column, value) in enumerate(data.items()):
        param_name = f"{prefix}{position}"
        columns.append(escape(column))
        placeholders.append(f":{param_name}")
        params[param_name] = value

    return ", ".join(columns), ", ".join(placeholders), params
