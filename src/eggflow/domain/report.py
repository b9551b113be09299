"""Report domain service."""

from datetime import date, timedelta
from decimal import Decimal

from eggflow.domain.cashflow import CashFlowService
from eggflow.domain.entities import DailyPerformance, ReportSnapshot, TransactionType
from eggflow.domain.inventory import InventoryService
from eggflow.domain.store import RecordStore

ZERO = Decimal("0")


class ReportService:
    """Service for assembling report snapshots for renderers."""

    def __init__(self, store: RecordStore):
        """Initialize report service.

        Args:
            store: Record store instance
        """
        self.store = store
        self.inventory_service = InventoryService(store)
        self.cash_flow_service = CashFlowService(store)

    def build_report(self, start_date: date, end_date: date) -> ReportSnapshot:
        """Eggs, feed, cash and sales revenue for a date range.

        Args:
            start_date: First day of the report
            end_date: Last day of the report (inclusive)

        Returns:
            ReportSnapshot ready to render
        """
        sales_revenue = sum(
            (
                txn.amount
                for txn in self.store.document.transactions
                if txn.type is TransactionType.SALE and start_date <= txn.date <= end_date
            ),
            ZERO,
        )
        return ReportSnapshot(
            start_date=start_date,
            end_date=end_date,
            eggs=self.inventory_service.egg_stock(start_date, end_date),
            feed=self.inventory_service.feed_stock(start_date, end_date),
            cash=self.cash_flow_service.cash_position(start_date, end_date),
            sales_revenue=sales_revenue,
        )

    def build_daily_summary(self, day: date) -> ReportSnapshot:
        """Snapshot for one day, as shown on the dashboard."""
        return self.build_report(day, day)

    def performance_series(self, end_date: date, days: int = 7) -> list[DailyPerformance]:
        """Eggs collected and sales revenue per day, oldest first."""
        series = []
        for offset in range(days - 1, -1, -1):
            day = end_date - timedelta(days=offset)
            collected = sum(
                c.collected for c in self.store.document.egg_collections if c.date == day
            )
            revenue = sum(
                (
                    txn.amount
                    for txn in self.store.document.transactions
                    if txn.type is TransactionType.SALE and txn.date == day
                ),
                ZERO,
            )
            series.append(DailyPerformance(date=day, collected=collected, revenue=revenue))
        return series
