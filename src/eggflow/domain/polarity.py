"""Polarity tables for the account ledger and the cash book.

The two tables group transaction types differently and must stay separate:
a Sale raises cash but is a debit on the customer's account, a Payment
lowers cash but is also a debit on the payee's account.
"""

from enum import Enum

from eggflow.domain.entities import TransactionType


class CashDirection(str, Enum):
    """Which cash bucket a transaction type falls into."""

    INFLOW = "in"
    OUTFLOW = "out"
    WITHDRAWAL = "withdrawal"


# +1 debits (raises) the account balance, -1 credits (lowers) it.
LEDGER_POLARITY: dict[TransactionType, int] = {
    TransactionType.SALE: 1,
    TransactionType.WITHDRAWAL: 1,
    TransactionType.PAYMENT: 1,
    TransactionType.PURCHASE: -1,
    TransactionType.RECEIPT: -1,
    TransactionType.DEPOSIT: -1,
    TransactionType.EXPENSE: -1,
}

# Withdrawals reduce cash like any outflow but are reported on their own line.
CASH_POLARITY: dict[TransactionType, CashDirection] = {
    TransactionType.SALE: CashDirection.INFLOW,
    TransactionType.RECEIPT: CashDirection.INFLOW,
    TransactionType.DEPOSIT: CashDirection.INFLOW,
    TransactionType.EXPENSE: CashDirection.OUTFLOW,
    TransactionType.PAYMENT: CashDirection.OUTFLOW,
    TransactionType.PURCHASE: CashDirection.OUTFLOW,
    TransactionType.WITHDRAWAL: CashDirection.WITHDRAWAL,
}


def is_debit(transaction_type: TransactionType) -> bool:
    """Return True if the type debits an account ledger."""
    return LEDGER_POLARITY[transaction_type] > 0


def cash_sign(transaction_type: TransactionType) -> int:
    """Return +1 for cash coming in and -1 for cash going out."""
    if CASH_POLARITY[transaction_type] is CashDirection.INFLOW:
        return 1
    return -1
