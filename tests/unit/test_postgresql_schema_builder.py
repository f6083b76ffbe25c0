"""Tests for PostgreSQL DDL generation."""

from unittest.mock import MagicMock

import pytest

from schemasmith.database.implementations import PostgreSQLDialect
from schemasmith.database.interfaces import InformationSchema
from schemasmith.database.schema import (
    ColumnDefinition,
    ForeignKeyDefinition,
    TableDefinition,
)


@pytest.fixture
def builder():
    """PostgreSQL schema builder without a live information schema."""
    return PostgreSQLDialect().create_schema_builder(MagicMock(spec=InformationSchema))


def test_create_table(builder, order_definition: TableDefinition) -> None:
    """Test identity columns become SERIAL with named constraints."""
    assert builder.create_table_sql(order_definition, "PK_Order") == [
        'CREATE TABLE "Order" ("OrderId" SERIAL NOT NULL, '
        '"CustomerId" INTEGER NOT NULL, "Note" VARCHAR(200) NULL, '
        'CONSTRAINT "PK_Order" PRIMARY KEY ("OrderId"), '
        'CONSTRAINT "FK_Order_CustomerId_Customer" FOREIGN KEY ("CustomerId") '
        'REFERENCES "Customer" ("CustomerId"))'
    ]


def test_create_table_without_primary_key(builder) -> None:
    """Test a table without key columns has no constraint."""
    table = TableDefinition("Log", [ColumnDefinition("Message", str, default="none")])

    assert builder.create_table_sql(table, None) == [
        "CREATE TABLE \"Log\" (\"Message\" VARCHAR(50) NOT NULL DEFAULT 'none')"
    ]


def test_create_table_requires_resolved_names(builder, order_definition) -> None:
    """Test constraint names must be resolved before building."""
    with pytest.raises(ValueError):
        builder.create_table_sql(order_definition, None)

    unnamed = TableDefinition(
        "Order",
        [ColumnDefinition("CustomerId", int)],
        [ForeignKeyDefinition("CustomerId", "Customer")],
    )
    with pytest.raises(ValueError):
        builder.create_table_sql(unnamed, None)


def test_database_statements(builder) -> None:
    """Test CREATE and DROP DATABASE."""
    assert builder.create_database_sql("shop") == ['CREATE DATABASE "shop"']
    assert builder.drop_database_sql("shop") == ['DROP DATABASE "shop"']


def test_rename_statements(builder) -> None:
    """Test table and column renames."""
    assert builder.rename_table_sql("Order", "Orders") == [
        'ALTER TABLE "Order" RENAME TO "Orders"'
    ]
    assert builder.rename_column_sql("Order", "Note", "Comment") == [
        'ALTER TABLE "Order" RENAME COLUMN "Note" TO "Comment"'
    ]


def test_add_column_with_fill_value(builder) -> None:
    """Test the fill value is a temporary default."""
    column = ColumnDefinition("Status", str, length=20)

    assert builder.add_column_with_default_sql("Order", column, "new", "DF_Order_Status") == [
        "ALTER TABLE \"Order\" ADD COLUMN \"Status\" VARCHAR(20) NOT NULL DEFAULT 'new'",
        'ALTER TABLE "Order" ALTER COLUMN "Status" DROP DEFAULT',
    ]


def test_add_column_with_fill_value_and_declared_default(builder) -> None:
    """Test the declared default replaces the fill value."""
    column = ColumnDefinition("Status", str, length=20, default="open")

    assert builder.add_column_with_default_sql("Order", column, "new", "DF_Order_Status") == [
        "ALTER TABLE \"Order\" ADD COLUMN \"Status\" VARCHAR(20) NOT NULL DEFAULT 'new'",
        'ALTER TABLE "Order" ALTER COLUMN "Status" DROP DEFAULT',
        "ALTER TABLE \"Order\" ALTER COLUMN \"Status\" SET DEFAULT 'open'",
    ]


def test_add_column_with_fill_value_equal_to_default(builder) -> None:
    """Test a fill value equal to the declared default is kept."""
    column = ColumnDefinition("Quantity", int, default=1)

    assert builder.add_column_with_default_sql("Order", column, 1, "DF_Order_Quantity") == [
        'ALTER TABLE "Order" ADD COLUMN "Quantity" INTEGER NOT NULL DEFAULT 1'
    ]


def test_change_column(builder) -> None:
    """Test type and nullability change in one statement."""
    column = ColumnDefinition("Quantity", int)

    assert builder.change_column_sql("Order", column) == [
        'ALTER TABLE "Order" ALTER COLUMN "Quantity" TYPE INTEGER USING "Quantity"::INTEGER, '
        'ALTER COLUMN "Quantity" SET NOT NULL'
    ]


def test_change_column_to_nullable(builder) -> None:
    """Test a column made nullable drops NOT NULL."""
    column = ColumnDefinition("Note", str, nullable=True, length=500)

    assert builder.change_column_sql("Order", column) == [
        'ALTER TABLE "Order" ALTER COLUMN "Note" TYPE VARCHAR(500) '
        'USING "Note"::VARCHAR(500), ALTER COLUMN "Note" DROP NOT NULL'
    ]


def test_key_statements(builder) -> None:
    """Test primary and foreign key constraints."""
    foreign_key = ForeignKeyDefinition(
        ["CustomerId"], "Customer", ["Id"], "FK_Order_CustomerId_Customer"
    )

    assert builder.add_primary_key_sql("Order", ["OrderId"], "PK_Order") == [
        'ALTER TABLE "Order" ADD CONSTRAINT "PK_Order" PRIMARY KEY ("OrderId")'
    ]
    assert builder.drop_primary_key_sql("Order", "PK_Order") == [
        'ALTER TABLE "Order" DROP CONSTRAINT "PK_Order"'
    ]
    assert builder.add_foreign_key_sql("Order", foreign_key) == [
        'ALTER TABLE "Order" ADD CONSTRAINT "FK_Order_CustomerId_Customer" '
        'FOREIGN KEY ("CustomerId") REFERENCES "Customer" ("Id")'
    ]
    assert builder.drop_foreign_key_sql("Order", "FK_Order_CustomerId_Customer") == [
        'ALTER TABLE "Order" DROP CONSTRAINT "FK_Order_CustomerId_Customer"'
    ]


def test_index_statements(builder) -> None:
    """Test indexes with covering columns."""
    assert builder.create_index_sql(
        "Order", "UX_Order_CustomerId", ["CustomerId"], unique=True, include_column_names=["Note"]
    ) == ['CREATE UNIQUE INDEX "UX_Order_CustomerId" ON "Order" ("CustomerId") INCLUDE ("Note")']
    assert builder.drop_index_sql("Order", "UX_Order_CustomerId") == [
        'DROP INDEX "UX_Order_CustomerId"'
    ]
