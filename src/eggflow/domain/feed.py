"""Feed inventory domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from eggflow.domain.account import AccountService
from eggflow.domain.entities import (
    FeedTransaction,
    FeedTransactionType,
    Transaction,
    TransactionType,
)
from eggflow.domain.errors import ValidationError
from eggflow.domain.store import RecordStore


class FeedService:
    """Service for recording feed purchases, consumption and wastage."""

    def __init__(self, store: RecordStore):
        """Initialize feed service.

        Args:
            store: Record store instance
        """
        self.store = store
        self.account_service = AccountService(store)

    def record_feed(
        self,
        date: date,
        feed_type: FeedTransactionType,
        quantity: Decimal,
        cost: Optional[Decimal] = None,
        vendor_id: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> tuple[FeedTransaction, Optional[Transaction]]:
        """Record a feed movement.

        A purchase with a cost above zero and a vendor also books a Purchase
        transaction against the vendor for the cost.

        Args:
            date: Entry date
            feed_type: Purchase, Consume or Waste
            quantity: Quantity in kg, must be greater than zero
            cost: Total cost (purchases only)
            vendor_id: Vendor account ID (purchases only)
            notes: Optional notes

        Returns:
            Tuple of (feed entry, ledger transaction or None)

        Raises:
            ValidationError: If quantity or cost is invalid, or cost/vendor
                are given for a non-purchase entry
            NotFoundError: If the vendor doesn't exist
        """
        if quantity <= 0:
            raise ValidationError("Feed quantity must be greater than zero")
        is_purchase = feed_type is FeedTransactionType.PURCHASE
        if not is_purchase and (cost is not None or vendor_id):
            raise ValidationError("Cost and vendor only apply to feed purchases")
        if cost is not None and cost < 0:
            raise ValidationError("Feed cost cannot be negative")
        if vendor_id:
            self.account_service.require_account(vendor_id)

        feed = self.store.add_feed_transaction(
            FeedTransaction(
                id="",
                date=date,
                type=feed_type,
                quantity=quantity,
                cost=cost,
                vendor_id=vendor_id or None,
                notes=notes or None,
            )
        )

        ledger_entry = None
        if is_purchase and vendor_id and cost is not None and cost > 0:
            ledger_entry = self.store.add_transaction(
                Transaction(
                    id="",
                    date=date,
                    type=TransactionType.PURCHASE,
                    account_id=vendor_id,
                    amount=cost,
                    notes=f"Feed Purchase: {quantity}kg",
                )
            )
        return feed, ledger_entry

    def list_feed(self) -> list[FeedTransaction]:
        """List feed entries, most recently entered first."""
        return list(reversed(self.store.document.feed_transactions))

    def delete_feed(self, feed_id: str) -> None:
        """Delete a feed entry.

        The ledger transaction booked by a purchase is left in place.

        Raises:
            NotFoundError: If the entry doesn't exist
        """
        self.store.delete_feed_transaction(feed_id)
