"""Farm insight domain service.

Builds the 30-day snapshot sent to the insight generator and classifies
customers as active or inactive. The generator itself is an external
collaborator; any failure there is reported as a fixed message.
"""

import asyncio
import logging
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Protocol

from eggflow.domain.entities import (
    AccountType,
    CustomerActivity,
    InsightSnapshot,
    TransactionType,
)
from eggflow.domain.store import RecordStore

logger = logging.getLogger(__name__)

LOOKBACK_DAYS = 30
INSIGHT_FAILURE_MESSAGE = "Failed to generate insight. Please check your connection."


class InsightGenerator(Protocol):
    """Anything that turns a prompt into a text summary."""

    def generate(self, prompt: str) -> str:
        ...


class InsightService:
    """Service for customer activity and AI farm insights."""

    def __init__(self, store: RecordStore):
        """Initialize insight service.

        Args:
            store: Record store instance
        """
        self.store = store

    def classify_customers(
        self, as_of: date, lookback_days: int = LOOKBACK_DAYS
    ) -> list[CustomerActivity]:
        """Mark each non-archived customer as active or inactive.

        A customer is active when their latest Sale is on or after
        ``as_of - lookback_days``. Customers with no Sale are inactive.
        """
        window_start = as_of - timedelta(days=lookback_days)
        last_sale: dict[str, date] = {}
        for txn in self.store.document.transactions:
            if txn.type is not TransactionType.SALE:
                continue
            current = last_sale.get(txn.account_id)
            if current is None or txn.date > current:
                last_sale[txn.account_id] = txn.date

        activity = []
        for account in self.store.document.accounts:
            if account.type is not AccountType.CUSTOMER or account.archived:
                continue
            last_sale_date = last_sale.get(account.id)
            activity.append(
                CustomerActivity(
                    account=account,
                    last_sale_date=last_sale_date,
                    is_active=last_sale_date is not None and last_sale_date >= window_start,
                )
            )
        return activity

    def build_snapshot(
        self, as_of: date, lookback_days: int = LOOKBACK_DAYS
    ) -> InsightSnapshot:
        """Production, sales and customer figures for the lookback window."""
        window_start = as_of - timedelta(days=lookback_days)
        recent = [c for c in self.store.document.egg_collections if c.date >= window_start]
        total_collected = sum(c.collected for c in recent)
        total_wasted = sum(c.wasted for c in recent)
        total_revenue = sum(
            (
                txn.amount
                for txn in self.store.document.transactions
                if txn.type is TransactionType.SALE and txn.date >= window_start
            ),
            Decimal("0"),
        )
        customers = self.classify_customers(as_of, lookback_days)

        return InsightSnapshot(
            as_of=as_of,
            window_start=window_start,
            total_collected=total_collected,
            total_wasted=total_wasted,
            average_daily_collection=Decimal(total_collected) / (len(recent) or 1),
            waste_rate=Decimal(total_wasted) / (total_collected or 1) * 100,
            total_revenue=total_revenue,
            customer_count=len(customers),
            active_customer_count=sum(1 for c in customers if c.is_active),
            inactive_customers=tuple(c.account.name for c in customers if not c.is_active),
        )

    def build_prompt(self, snapshot: InsightSnapshot, currency: Optional[str] = None) -> str:
        """Assemble the consultant prompt for a snapshot."""
        currency = currency if currency is not None else self.store.settings.currency
        average = snapshot.average_daily_collection.quantize(Decimal("1"), ROUND_HALF_UP)
        waste_rate = snapshot.waste_rate.quantize(Decimal("0.01"), ROUND_HALF_UP)
        inactive = ", ".join(snapshot.inactive_customers) or "None"
        days = (snapshot.as_of - snapshot.window_start).days
        return (
            "Act as an expert farm consultant. Analyze this egg farm data "
            f"for the last {days} days:\n"
            "\n"
            f"- Total Eggs Collected: {snapshot.total_collected}\n"
            f"- Average Daily Collection: {average}\n"
            f"- Wastage Rate: {waste_rate}% (Industry standard is 1-2%)\n"
            f"- Total Revenue: {currency}{snapshot.total_revenue}\n"
            f"- Total Active Customers: {snapshot.active_customer_count}\n"
            f"- Inactive Customers (No Purchase in {days} days): {inactive}\n"
            "\n"
            "Provide a concise response with 3 headings:\n"
            "1. Production Insight: comment on efficiency and wastage.\n"
            "2. Sales Trend: comment on revenue health.\n"
            "3. Customer Alert: list the inactive customers and suggest a quick "
            "action to win them back.\n"
            "\n"
            "Keep it brief, professional and actionable. Do not use markdown "
            "for the headers, just bold them."
        )

    def generate_insight(self, generator: InsightGenerator, as_of: date) -> str:
        """Ask the generator for a summary of the last 30 days.

        Returns:
            The generated text, or INSIGHT_FAILURE_MESSAGE if the generator
            raised
        """
        prompt = self.build_prompt(self.build_snapshot(as_of))
        try:
            return generator.generate(prompt)
        except Exception:
            logger.exception("Insight generation failed")
            return INSIGHT_FAILURE_MESSAGE

    async def generate_insight_async(self, generator: InsightGenerator, as_of: date) -> str:
        """Run generate_insight in a worker thread."""
        return await asyncio.to_thread(self.generate_insight, generator, as_of)
