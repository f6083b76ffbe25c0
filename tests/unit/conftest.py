"""Fixtures for statement builder tests."""

import pytest

from schemasmith.database.schema import (
    ColumnDefinition,
    ForeignKeyDefinition,
    TableDefinition,
)


@pytest.fixture
def order_definition() -> TableDefinition:
    """``Order`` with an identity key, a foreign key and a nullable column."""
    return TableDefinition(
        "Order",
        [
            ColumnDefinition("OrderId", int, auto_increment=True),
            ColumnDefinition("CustomerId", int),
            ColumnDefinition("Note", str, nullable=True, length=200),
        ],
        [
            ForeignKeyDefinition(
                "CustomerId", "Customer", name="FK_Order_CustomerId_Customer"
            )
        ],
    )
