"""Transaction domain service."""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from eggflow.domain.account import AccountService
from eggflow.domain.entities import InvoiceItem, Transaction, TransactionType
from eggflow.domain.errors import (
    NotFoundError,
    ValidationError,
    invoice_amount_mismatch,
    transaction_not_found,
)
from eggflow.domain.store import RecordStore

ItemSpec = tuple[str, Decimal, Decimal]


def build_invoice_item(description: str, quantity: Decimal, unit_price: Decimal) -> InvoiceItem:
    """Create a line item with its total computed from quantity and price.

    Raises:
        ValidationError: If quantity is not positive or price is negative
    """
    if quantity <= 0:
        raise ValidationError("Item quantity must be greater than zero")
    if unit_price < 0:
        raise ValidationError("Item unit price cannot be negative")
    return InvoiceItem(
        description=description.strip() or "Eggs",
        quantity=quantity,
        unit_price=unit_price,
        total=quantity * unit_price,
    )


def invoice_total(items: Iterable[InvoiceItem]) -> Decimal:
    """Sum of line item totals."""
    return sum((item.total for item in items), Decimal("0"))


class TransactionService:
    """Service for recording ledger transactions."""

    def __init__(self, store: RecordStore):
        """Initialize transaction service.

        Args:
            store: Record store instance
        """
        self.store = store
        self.account_service = AccountService(store)

    def create_transaction(
        self,
        account_id: Optional[str],
        date: date,
        transaction_type: TransactionType,
        amount: Decimal,
        notes: Optional[str] = None,
    ) -> Transaction:
        """Record a plain transaction without line items.

        Args:
            account_id: Counterparty account ID
            date: Transaction date
            transaction_type: Transaction type
            amount: Amount, must be greater than zero
            notes: Optional notes

        Returns:
            The stored transaction

        Raises:
            ValidationError: If no account is given or amount is not positive
            NotFoundError: If the account doesn't exist
        """
        self.account_service.require_account(account_id)
        if amount <= 0:
            raise ValidationError("Enter valid amount")

        return self.store.add_transaction(
            Transaction(
                id="",
                date=date,
                type=transaction_type,
                account_id=account_id,
                amount=amount,
                notes=notes or None,
            )
        )

    def create_invoice(
        self,
        account_id: Optional[str],
        date: date,
        items: Sequence[ItemSpec],
        amount: Optional[Decimal] = None,
        transaction_type: TransactionType = TransactionType.SALE,
        notes: Optional[str] = None,
    ) -> Transaction:
        """Record an invoice whose amount is the sum of its line items.

        Args:
            account_id: Customer (or vendor) account ID
            date: Invoice date
            items: (description, quantity, unit_price) tuples
            amount: Optional expected amount; must equal the item total
            transaction_type: Sale or Purchase
            notes: Optional notes

        Returns:
            The stored transaction

        Raises:
            ValidationError: If there are no items, an item is invalid, the
                total is zero, or ``amount`` disagrees with the items
            NotFoundError: If the account doesn't exist
        """
        self.account_service.require_account(account_id)
        if transaction_type not in (TransactionType.SALE, TransactionType.PURCHASE):
            raise ValidationError("Invoices must be Sale or Purchase transactions")
        if not items:
            raise ValidationError("Add at least one item")

        invoice_items = tuple(
            build_invoice_item(description, quantity, unit_price)
            for description, quantity, unit_price in items
        )
        total = invoice_total(invoice_items)
        if amount is not None and amount != total:
            raise ValidationError(invoice_amount_mismatch(amount, total))
        if total <= 0:
            raise ValidationError("Invoice total must be greater than zero")

        return self.store.add_transaction(
            Transaction(
                id="",
                date=date,
                type=transaction_type,
                account_id=account_id,
                amount=total,
                items=invoice_items,
                notes=notes or None,
            )
        )

    def record_cash_movement(
        self,
        account_id: Optional[str],
        amount: Decimal,
        deposit: bool,
        notes: Optional[str] = None,
        on: Optional[date] = None,
    ) -> Transaction:
        """Record an owner deposit into or withdrawal from cash in hand.

        Args:
            account_id: Account the cash comes from or goes to
            amount: Amount, must be greater than zero
            deposit: True for a deposit, False for a withdrawal
            notes: Optional notes (defaults to "Manual Deposit"/"Manual Withdrawal")
            on: Date of the movement (defaults to today)
        """
        transaction_type = TransactionType.DEPOSIT if deposit else TransactionType.WITHDRAWAL
        default_notes = "Manual Deposit" if deposit else "Manual Withdrawal"
        return self.create_transaction(
            account_id=account_id,
            date=on or date.today(),
            transaction_type=transaction_type,
            amount=amount,
            notes=notes or default_notes,
        )

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID.

        Returns:
            Transaction entity or None if not found
        """
        return self.store.get_transaction(transaction_id)

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If transaction doesn't exist
        """
        if self.store.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        self.store.delete_transaction(transaction_id)

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        account_id: Optional[str] = None,
        transaction_types: Optional[Iterable[TransactionType]] = None,
    ) -> list[Transaction]:
        """List transactions with filters, oldest first.

        Args:
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            account_id: Optional account ID filter
            transaction_types: Optional set of types to include

        Returns:
            List of transaction entities
        """
        types = set(transaction_types) if transaction_types is not None else None
        transactions = [
            txn
            for txn in self.store.document.transactions
            if (start_date is None or txn.date >= start_date)
            and (end_date is None or txn.date <= end_date)
            and (account_id is None or txn.account_id == account_id)
            and (types is None or txn.type in types)
        ]
        return sorted(transactions, key=lambda txn: txn.date)

    def list_invoices(self) -> list[Transaction]:
        """List transactions that carry line items, newest first."""
        invoices = [txn for txn in self.store.document.transactions if txn.items]
        return list(reversed(invoices))
