"""Egg and feed stock domain service."""

from datetime import date
from decimal import Decimal
from typing import Callable

from eggflow.domain.entities import (
    EggStock,
    FeedStock,
    FeedTransactionType,
    TransactionType,
)
from eggflow.domain.store import RecordStore

ZERO = Decimal("0")


class InventoryService:
    """Service for opening and closing stock of eggs and feed.

    Both commodities fold every movement dated before the range into an
    opening figure, then add the movements inside the range. Stock is never
    clamped at zero; a negative closing figure means more went out than was
    recorded coming in.
    """

    def __init__(self, store: RecordStore):
        """Initialize inventory service.

        Args:
            store: Record store instance
        """
        self.store = store

    def _eggs_sold(self, include: Callable[[date], bool]) -> Decimal:
        """Units sold, counted from Sale line item quantities."""
        return sum(
            (
                txn.item_quantity
                for txn in self.store.document.transactions
                if txn.type is TransactionType.SALE and include(txn.date)
            ),
            ZERO,
        )

    def egg_stock(self, start_date: date, end_date: date) -> EggStock:
        """Egg stock for a date range (both ends inclusive)."""
        collections = self.store.document.egg_collections

        def before(day: date) -> bool:
            return day < start_date

        def within(day: date) -> bool:
            return start_date <= day <= end_date

        opening = (
            sum(c.collected - c.wasted for c in collections if before(c.date))
            - self._eggs_sold(before)
        )
        collected = Decimal(sum(c.collected for c in collections if within(c.date)))
        wasted = Decimal(sum(c.wasted for c in collections if within(c.date)))
        sold = self._eggs_sold(within)

        return EggStock(
            opening=opening,
            collected=collected,
            wasted=wasted,
            sold=sold,
            closing=opening + collected - wasted - sold,
        )

    def feed_stock(self, start_date: date, end_date: date) -> FeedStock:
        """Feed stock in kg for a date range (both ends inclusive)."""
        feed_transactions = self.store.document.feed_transactions

        opening = ZERO
        totals = {feed_type: ZERO for feed_type in FeedTransactionType}
        for feed in feed_transactions:
            if feed.date < start_date:
                if feed.type is FeedTransactionType.PURCHASE:
                    opening += feed.quantity
                else:
                    opening -= feed.quantity
            elif feed.date <= end_date:
                totals[feed.type] += feed.quantity

        purchased = totals[FeedTransactionType.PURCHASE]
        consumed = totals[FeedTransactionType.CONSUME]
        wasted = totals[FeedTransactionType.WASTE]
        return FeedStock(
            opening=opening,
            purchased=purchased,
            consumed=consumed,
            wasted=wasted,
            closing=opening + purchased - consumed - wasted,
        )

    def egg_stock_for_day(self, day: date) -> EggStock:
        """Opening and closing egg stock for a single day."""
        return self.egg_stock(day, day)

    def feed_stock_for_day(self, day: date) -> FeedStock:
        """Opening and closing feed stock for a single day."""
        return self.feed_stock(day, day)

    def current_feed_inventory(self) -> Decimal:
        """Feed on hand across all recorded entries."""
        return sum(
            (
                feed.quantity if feed.type is FeedTransactionType.PURCHASE else -feed.quantity
                for feed in self.store.document.feed_transactions
            ),
            ZERO,
        )
