"""Tests for domain entities."""

import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from eggflow.domain.entities import (
    Account,
    AccountType,
    FarmDocument,
    InvoiceItem,
    LedgerRow,
    LedgerStatement,
    Settings,
    Theme,
    Transaction,
    TransactionType,
)


class TestAccount:
    """Tests for Account entity."""

    def test_defaults(self):
        account = Account(id="a1", name="Ali", type=AccountType.CUSTOMER)

        assert account.phone == ""
        assert account.category is None
        assert account.archived is False

    def test_account_immutability(self):
        """Test that Account entities are immutable."""
        account = Account(id="a1", name="Ali", type=AccountType.CUSTOMER)
        with pytest.raises(dataclasses.FrozenInstanceError):
            account.name = "New Name"

    def test_enum_values_match_stored_strings(self):
        assert AccountType("Employee") is AccountType.EMPLOYEE
        assert TransactionType("Withdrawal") is TransactionType.WITHDRAWAL
        assert Theme("stained-glass") is Theme.STAINED_GLASS


class TestTransaction:
    def test_item_quantity(self):
        txn = Transaction(
            id="t1",
            date=date(2024, 3, 15),
            type=TransactionType.SALE,
            account_id="a1",
            amount=Decimal("1530"),
            items=(
                InvoiceItem("Tray A", Decimal("30"), Decimal("26"), Decimal("780")),
                InvoiceItem("Tray B", Decimal("30"), Decimal("25"), Decimal("750")),
            ),
        )

        assert txn.item_quantity == Decimal("60")

    def test_item_quantity_without_items(self):
        txn = Transaction(id="t1", date=date(2024, 3, 15), type=TransactionType.RECEIPT, account_id="a1", amount=Decimal("5"))

        assert txn.item_quantity == Decimal("0")


class TestLedgerStatement:
    def test_closing_balance_is_last_row(self):
        txn = Transaction(id="t1", date=date(2024, 3, 15), type=TransactionType.SALE, account_id="a1", amount=Decimal("5"))
        statement = LedgerStatement(
            account_id="a1",
            start_date=date(2024, 3, 1),
            end_date=date(2024, 3, 31),
            opening_balance=Decimal("10"),
            rows=(LedgerRow(txn, Decimal("5"), Decimal("0"), Decimal("15")),),
        )

        assert statement.closing_balance == Decimal("15")

    def test_closing_balance_without_rows(self):
        statement = LedgerStatement(
            account_id="a1", start_date=date(2024, 3, 1), end_date=date(2024, 3, 31), opening_balance=Decimal("10")
        )

        assert statement.closing_balance == Decimal("10")


def test_default_document():
    document = FarmDocument()

    assert document.accounts == ()
    assert document.feed_transactions == ()
    assert document.settings == Settings(currency="PKR", farm_name="My Egg Farm", theme=Theme.STAINED_GLASS)
