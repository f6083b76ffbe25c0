"""Tests for SQLite DDL generation."""

from unittest.mock import MagicMock

import pytest

from schemasmith.database.implementations import SQLiteDialect
from schemasmith.database.interfaces import InformationSchema
from schemasmith.database.schema import (
    ColumnDefinition,
    ForeignKeyDefinition,
    TableDefinition,
)
from schemasmith.exceptions import SchemaObjectNotFoundError, UnsupportedOperationError

ORDER_SQL = (
    'CREATE TABLE "Order" ("OrderId" INTEGER NOT NULL, "CustomerId" INTEGER NULL, '
    'CONSTRAINT "PK_Order" PRIMARY KEY ("OrderId"))'
)
FOREIGN_KEY_SQL = (
    'CONSTRAINT "FK_Order_CustomerId_Customer" FOREIGN KEY ("CustomerId") '
    'REFERENCES "Customer" ("CustomerId")'
)
INDEX_SQL = 'CREATE INDEX "IX_Order_CustomerId" ON "Order" ("CustomerId")'


@pytest.fixture
def information_schema() -> MagicMock:
    """Information schema reporting the stored ``Order`` table."""
    info = MagicMock(spec=InformationSchema)
    info.get_table_sql = MagicMock(return_value=ORDER_SQL)
    info.get_index_sql = MagicMock(return_value=[INDEX_SQL])
    return info


@pytest.fixture
def builder(information_schema: MagicMock):
    """SQLite schema builder over the stubbed information schema."""
    return SQLiteDialect().create_schema_builder(information_schema)


def test_create_table_with_autoincrement(builder, order_definition: TableDefinition) -> None:
    """Test the identity column carries the primary key inline."""
    assert builder.create_table_sql(order_definition, "PK_Order") == [
        'CREATE TABLE "Order" ("OrderId" INTEGER NOT NULL CONSTRAINT "PK_Order" '
        'PRIMARY KEY AUTOINCREMENT, "CustomerId" INTEGER NOT NULL, '
        '"Note" NVARCHAR(200) NULL, ' + FOREIGN_KEY_SQL + ")"
    ]


def test_create_table_without_autoincrement(builder) -> None:
    """Test plain tables use a table-level primary key constraint."""
    table = TableDefinition(
        "Customer",
        [ColumnDefinition("CustomerId", int, primary_key=True), ColumnDefinition("Name", str)],
    )

    assert builder.create_table_sql(table, "PK_Customer") == [
        'CREATE TABLE "Customer" ("CustomerId" INTEGER NOT NULL, '
        '"Name" NVARCHAR(50) NOT NULL, CONSTRAINT "PK_Customer" PRIMARY KEY ("CustomerId"))'
    ]


def test_autoincrement_in_composite_key_unsupported(builder) -> None:
    """Test AUTOINCREMENT requires a single-column key."""
    table = TableDefinition(
        "OrderLine",
        [
            ColumnDefinition("OrderId", int, primary_key=True),
            ColumnDefinition("LineId", int, auto_increment=True),
        ],
    )

    with pytest.raises(UnsupportedOperationError):
        builder.create_table_sql(table, "PK_OrderLine")


def test_databases_are_files(builder) -> None:
    """Test CREATE and DROP DATABASE are not available."""
    with pytest.raises(UnsupportedOperationError):
        builder.create_database_sql("shop")
    with pytest.raises(UnsupportedOperationError):
        builder.drop_database_sql("shop")


def test_add_not_null_column_gets_implicit_default(builder) -> None:
    """Test NOT NULL columns without a default get a zero value."""
    assert builder.add_column_sql("Order", ColumnDefinition("Quantity", int)) == [
        'ALTER TABLE "Order" ADD COLUMN "Quantity" INTEGER NOT NULL DEFAULT 0'
    ]
    assert builder.add_column_sql("Order", ColumnDefinition("Status", str, length=20)) == [
        "ALTER TABLE \"Order\" ADD COLUMN \"Status\" NVARCHAR(20) NOT NULL DEFAULT ''"
    ]
    assert builder.add_column_sql("Order", ColumnDefinition("Price", "NUMERIC(10, 2)")) == [
        'ALTER TABLE "Order" ADD COLUMN "Price" NUMERIC(10, 2) NOT NULL DEFAULT 0'
    ]


def test_add_nullable_column(builder) -> None:
    """Test nullable columns are added as declared."""
    column = ColumnDefinition("Shipped", bool, nullable=True)

    assert builder.add_column_sql("Order", column) == [
        'ALTER TABLE "Order" ADD COLUMN "Shipped" BOOLEAN NULL'
    ]


def test_add_autoincrement_column_unsupported(builder) -> None:
    """Test identity columns can only be created with the table."""
    with pytest.raises(UnsupportedOperationError):
        builder.add_column_sql("Order", ColumnDefinition("Seq", int, auto_increment=True))


def test_add_column_with_fill_value_keeps_default(builder) -> None:
    """Test the fill value stays as the column default."""
    column = ColumnDefinition("Status", str, length=20)

    assert builder.add_column_with_default_sql("Order", column, "new", "DF_Order_Status") == [
        "ALTER TABLE \"Order\" ADD COLUMN \"Status\" NVARCHAR(20) NOT NULL DEFAULT 'new'"
    ]


def test_unsupported_alterations(builder) -> None:
    """Test column changes and primary key changes are rejected."""
    with pytest.raises(UnsupportedOperationError):
        builder.change_column_sql("Order", ColumnDefinition("CustomerId", int))
    with pytest.raises(UnsupportedOperationError):
        builder.add_primary_key_sql("Order", ["OrderId"], "PK_Order")
    with pytest.raises(UnsupportedOperationError):
        builder.drop_primary_key_sql("Order", "PK_Order")
    with pytest.raises(UnsupportedOperationError):
        builder.create_index_sql("Order", "IX", ["CustomerId"], include_column_names=["OrderId"])


def test_add_foreign_key_rebuilds_table(builder) -> None:
    """Test the table is copied with the new constraint and its indexes restored."""
    foreign_key = ForeignKeyDefinition(
        "CustomerId", "Customer", name="FK_Order_CustomerId_Customer"
    )

    assert builder.add_foreign_key_sql("Order", foreign_key) == [
        'CREATE TABLE "__rebuild_Order" ("OrderId" INTEGER NOT NULL, '
        '"CustomerId" INTEGER NULL, CONSTRAINT "PK_Order" PRIMARY KEY ("OrderId"), '
        + FOREIGN_KEY_SQL + ")",
        'INSERT INTO "__rebuild_Order" SELECT * FROM "Order"',
        'DROP TABLE "Order"',
        'PRAGMA legacy_alter_table = ON',
        'ALTER TABLE "__rebuild_Order" RENAME TO "Order"',
        'PRAGMA legacy_alter_table = OFF',
        INDEX_SQL,
    ]


def test_drop_foreign_key_rebuilds_table(builder, information_schema: MagicMock) -> None:
    """Test the constraint is cut out of the stored statement."""
    information_schema.get_table_sql.return_value = ORDER_SQL[:-1] + ", " + FOREIGN_KEY_SQL + ")"
    information_schema.get_index_sql.return_value = []

    assert builder.drop_foreign_key_sql("Order", "fk_order_customerid_customer") == [
        'CREATE TABLE "__rebuild_Order" ("OrderId" INTEGER NOT NULL, '
        '"CustomerId" INTEGER NULL, CONSTRAINT "PK_Order" PRIMARY KEY ("OrderId"))',
        'INSERT INTO "__rebuild_Order" SELECT * FROM "Order"',
        'DROP TABLE "Order"',
        'PRAGMA legacy_alter_table = ON',
        'ALTER TABLE "__rebuild_Order" RENAME TO "Order"',
        'PRAGMA legacy_alter_table = OFF',
    ]


def test_drop_undeclared_foreign_key_unsupported(builder) -> None:
    """Test a foreign key without a CONSTRAINT name cannot be cut out."""
    with pytest.raises(UnsupportedOperationError):
        builder.drop_foreign_key_sql("Order", "FK_Order_CustomerId_Customer")


def test_rebuild_missing_table(builder, information_schema: MagicMock) -> None:
    """Test rebuilding a table that does not exist."""
    information_schema.get_table_sql.return_value = None

    with pytest.raises(SchemaObjectNotFoundError):
        builder.add_foreign_key_sql(
            "Missing", ForeignKeyDefinition("CustomerId", "Customer", name="FK")
        )
