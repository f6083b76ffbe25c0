"""Tests for SQL Server DDL generation."""

from unittest.mock import MagicMock

import pytest

from schemasmith.database.implementations import SQLServerDialect
from schemasmith.database.implementations.sqlserver import SQLServerInformationSchema
from schemasmith.database.schema import ColumnDefinition, TableDefinition


@pytest.fixture
def information_schema() -> MagicMock:
    """SQL Server information schema reporting no default constraints."""
    information_schema = MagicMock(spec=SQLServerInformationSchema)
    information_schema.get_column_default_constraint_name.return_value = None
    return information_schema


@pytest.fixture
def builder(information_schema: MagicMock):
    """SQL Server schema builder without a live information schema."""
    return SQLServerDialect().create_schema_builder(information_schema)


def test_create_table(builder, order_definition: TableDefinition) -> None:
    """Test IDENTITY columns and bracket quoting."""
    assert builder.create_table_sql(order_definition, "PK_Order") == [
        "CREATE TABLE [Order] ([OrderId] INT NOT NULL IDENTITY, "
        "[CustomerId] INT NOT NULL, [Note] NVARCHAR(200) NULL, "
        "CONSTRAINT [PK_Order] PRIMARY KEY ([OrderId]), "
        "CONSTRAINT [FK_Order_CustomerId_Customer] FOREIGN KEY ([CustomerId]) "
        "REFERENCES [Customer] ([CustomerId]))"
    ]


def test_drop_database_disconnects_users(builder) -> None:
    """Test other sessions are closed before the drop."""
    assert builder.drop_database_sql("shop") == [
        "ALTER DATABASE [shop] SET SINGLE_USER WITH ROLLBACK IMMEDIATE",
        "DROP DATABASE [shop]",
    ]


def test_renames_use_sp_rename(builder) -> None:
    """Test table and column renames."""
    assert builder.rename_table_sql("Order", "Orders") == [
        "EXEC sp_rename N'[Order]', N'Orders'"
    ]
    assert builder.rename_column_sql("Order", "Note", "Comment") == [
        "EXEC sp_rename N'[Order].[Note]', N'Comment', N'COLUMN'"
    ]


def test_add_column(builder) -> None:
    """Test ADD without the COLUMN keyword."""
    column = ColumnDefinition("Quantity", int, nullable=True)

    assert builder.add_column_sql("Order", column) == [
        "ALTER TABLE [Order] ADD [Quantity] INT NULL"
    ]


def test_add_column_with_fill_value(builder) -> None:
    """Test the fill value is a named default constraint dropped afterwards."""
    column = ColumnDefinition("Status", str, length=20)

    assert builder.add_column_with_default_sql("Order", column, "new", "DF_Order_Status") == [
        "ALTER TABLE [Order] ADD [Status] NVARCHAR(20) NOT NULL "
        "CONSTRAINT [DF_Order_Status] DEFAULT N'new'",
        "ALTER TABLE [Order] DROP CONSTRAINT [DF_Order_Status]",
    ]


def test_add_nullable_column_with_fill_value(builder) -> None:
    """Test WITH VALUES fills existing rows of a nullable column."""
    column = ColumnDefinition("Status", str, nullable=True, length=20, default="open")

    assert builder.add_column_with_default_sql("Order", column, "new", "DF_Order_Status") == [
        "ALTER TABLE [Order] ADD [Status] NVARCHAR(20) NULL "
        "CONSTRAINT [DF_Order_Status] DEFAULT N'new' WITH VALUES",
        "ALTER TABLE [Order] DROP CONSTRAINT [DF_Order_Status]",
        "ALTER TABLE [Order] ADD CONSTRAINT [DF_Order_Status] DEFAULT N'open' FOR [Status]",
    ]


def test_change_column(builder) -> None:
    """Test ALTER COLUMN carries type and nullability only."""
    column = ColumnDefinition("Quantity", "BIGINT", default=0)

    assert builder.change_column_sql("Order", column) == [
        "ALTER TABLE [Order] ALTER COLUMN [Quantity] BIGINT NOT NULL"
    ]


def test_index_statements(builder) -> None:
    """Test covering columns and DROP INDEX ... ON."""
    assert builder.create_index_sql(
        "Order", "IX_Order_CustomerId", ["CustomerId"], include_column_names=["Note"]
    ) == ["CREATE INDEX [IX_Order_CustomerId] ON [Order] ([CustomerId]) INCLUDE ([Note])"]
    assert builder.drop_index_sql("Order", "IX_Order_CustomerId") == [
        "DROP INDEX [IX_Order_CustomerId] ON [Order]"
    ]


def test_drop_column(builder, information_schema: MagicMock) -> None:
    """Test a column without a default is dropped directly."""
    assert builder.drop_column_sql("Order", "Note") == [
        "ALTER TABLE [Order] DROP COLUMN [Note]"
    ]
    information_schema.get_column_default_constraint_name.assert_called_once_with(
        "Order", "Note"
    )


def test_drop_column_with_default(builder, information_schema: MagicMock) -> None:
    """Test the default constraint bound to the column goes first."""
    information_schema.get_column_default_constraint_name.return_value = (
        "DF__Order__Status__3A81B327"
    )

    assert builder.drop_column_sql("Order", "Status") == [
        "ALTER TABLE [Order] DROP CONSTRAINT [DF__Order__Status__3A81B327]",
        "ALTER TABLE [Order] DROP COLUMN [Status]",
    ]
