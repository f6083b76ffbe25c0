"""Naming convention for indexes and constraints created without an explicit name."""

import hashlib
from collections.abc import Sequence

from schemasmith.types import NameKind

HASH_LENGTH = 8


class NamingConvention:
    """Derive deterministic index and constraint names.

    Names follow the ``PREFIX_table_columns`` pattern:

    * ``IX_Order_CustomerId`` for a non-unique index
    * ``UX_Order_OrderNumber`` for a unique index
    * ``FK_Order_CustomerId_Customer`` for a foreign key
    * ``PK_Order`` for a primary key
    * ``DF_Order_Status`` for a default constraint

    A name longer than ``max_identifier_length`` keeps as much of its prefix
    as fits and ends with ``_`` plus a hash of the full name, so the result
    stays within the limit and is stable across calls.

    Subclass and assign to ``Database.naming_convention`` to change the policy.
    """

    def __init__(self, max_identifier_length: int) -> None:
        if max_identifier_length <= HASH_LENGTH + 1:
            raise ValueError(
                f"max_identifier_length must be greater than {HASH_LENGTH + 1}"
            )
        self.max_identifier_length = max_identifier_length

    def name_for(
        self,
        kind: NameKind,
        table_name: str,
        column_names: Sequence[str],
        unique: bool = False,
        foreign_table_name: str | None = None,
    ) -> str:
        """Derive a name for the given kind of object.

        Args:
            kind: What is being named
            table_name: Table the object belongs to
            column_names: Columns covered by the object, in order
            unique: Whether an index is unique (ignored for other kinds)
            foreign_table_name: Referenced table (foreign keys only)

        Returns:
            Identifier no longer than ``max_identifier_length``
        """
        if kind == NameKind.INDEX:
            return self.index_name(table_name, column_names, unique)
        if kind == NameKind.FOREIGN_KEY:
            if foreign_table_name is None:
                raise ValueError("foreign_table_name is required for foreign keys")
            return self.foreign_key_name(table_name, column_names, foreign_table_name)
        if kind == NameKind.PRIMARY_KEY:
            return self.primary_key_name(table_name, column_names)
        if kind == NameKind.DEFAULT_CONSTRAINT:
            return self.default_constraint_name(table_name, column_names[0])
        raise ValueError(f"Unknown name kind: {kind}")

    def index_name(
        self, table_name: str, column_names: Sequence[str], unique: bool = False
    ) -> str:
        prefix = "UX" if unique else "IX"
        return self.fit("_".join([prefix, table_name, *column_names]))

    def foreign_key_name(
        self,
        table_name: str,
        column_names: Sequence[str],
        foreign_table_name: str,
    ) -> str:
        return self.fit("_".join(["FK", table_name, *column_names, foreign_table_name]))

    def primary_key_name(
        self, table_name: str, column_names: Sequence[str] | None = None
    ) -> str:
        return self.fit(f"PK_{table_name}")

    def default_constraint_name(self, table_name: str, column_name: str) -> str:
        return self.fit(f"DF_{table_name}_{column_name}")

    def fit(self, name: str) -> str:
        """Shorten a name to the identifier limit, keeping it unique and stable."""
        if len(name) <= self.max_identifier_length:
            return name

        digest = hashlib.sha1(name.encode("utf-8")).hexdigest()[:HASH_LENGTH]
        keep = self.max_identifier_length - HASH_LENGTH - 1
        return f"{name[:keep]}_{digest}"


def match_name(names: Sequence[str], name: str) -> str | None:
    """Find ``name`` among the names reported by the database.

    An exact match wins; otherwise the first case-insensitive match is
    returned, as engines differ in how they fold identifier case.
    """
    if name in names:
        return name
    folded = name.casefold()
    return next((candidate for candidate in names if candidate.casefold() == folded), None)
