"""Account ledger domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from eggflow.domain.entities import LedgerRow, LedgerStatement, Transaction
from eggflow.domain.polarity import LEDGER_POLARITY
from eggflow.domain.store import RecordStore

ZERO = Decimal("0")


def signed_ledger_amount(transaction: Transaction) -> Decimal:
    """Amount with the ledger sign applied (debit positive, credit negative)."""
    return transaction.amount * LEDGER_POLARITY[transaction.type]


class LedgerService:
    """Service for building per-account statements with running balances."""

    def __init__(self, store: RecordStore):
        """Initialize ledger service.

        Args:
            store: Record store instance
        """
        self.store = store

    def account_transactions(self, account_id: str) -> list[Transaction]:
        """Transactions for one account, oldest first.

        The sort is stable, so same-day entries keep the order they were
        recorded in.
        """
        transactions = [
            txn for txn in self.store.document.transactions if txn.account_id == account_id
        ]
        return sorted(transactions, key=lambda txn: txn.date)

    def build_statement(
        self, account_id: Optional[str], start_date: date, end_date: date
    ) -> LedgerStatement:
        """Build the statement for an account between two dates.

        The opening balance folds every transaction dated before
        ``start_date``; rows cover ``start_date`` to ``end_date`` inclusive
        and carry the running balance on from the opening balance.

        Args:
            account_id: Account ID, or None/empty for no selection
            start_date: First day of the statement
            end_date: Last day of the statement (inclusive)

        Returns:
            LedgerStatement; empty with a zero opening balance when no
            account is selected
        """
        if not account_id:
            return LedgerStatement(
                account_id=None,
                start_date=start_date,
                end_date=end_date,
                opening_balance=ZERO,
            )

        transactions = self.account_transactions(account_id)
        opening_balance = sum(
            (signed_ledger_amount(txn) for txn in transactions if txn.date < start_date),
            ZERO,
        )

        balance = opening_balance
        rows = []
        for txn in transactions:
            if not start_date <= txn.date <= end_date:
                continue
            signed = signed_ledger_amount(txn)
            balance += signed
            rows.append(
                LedgerRow(
                    transaction=txn,
                    debit=txn.amount if signed > 0 else ZERO,
                    credit=txn.amount if signed < 0 else ZERO,
                    balance=balance,
                )
            )

        return LedgerStatement(
            account_id=account_id,
            start_date=start_date,
            end_date=end_date,
            opening_balance=opening_balance,
            rows=tuple(rows),
        )

    def account_balance(self, account_id: str, as_of: Optional[date] = None) -> Decimal:
        """Balance of an account over its whole history, up to ``as_of`` inclusive."""
        return sum(
            (
                signed_ledger_amount(txn)
                for txn in self.store.document.transactions
                if txn.account_id == account_id and (as_of is None or txn.date <= as_of)
            ),
            ZERO,
        )
