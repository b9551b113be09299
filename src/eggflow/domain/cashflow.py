"""Cash-flow domain service."""

from datetime import date, timedelta
from decimal import Decimal
from typing import Sequence

from eggflow.domain.entities import CashPosition, Transaction, TransactionType, TrendPoint
from eggflow.domain.polarity import CASH_POLARITY, CashDirection, cash_sign
from eggflow.domain.store import RecordStore

ZERO = Decimal("0")

TREND_DAYS = 30
TREND_PERIOD = 5


def simple_moving_average(values: Sequence[Decimal], period: int) -> list[Decimal]:
    """Trailing mean of up to ``period`` values ending at each index.

    The window is cut short at the start of the series, so the first value
    is returned as is and the first ``period - 1`` points average fewer
    samples.

    Raises:
        ValueError: If period is less than 1
    """
    if period < 1:
        raise ValueError("Moving average period must be at least 1")
    averages = []
    for i in range(len(values)):
        window = values[max(0, i - period + 1):i + 1]
        averages.append(sum(window, ZERO) / len(window))
    return averages


class CashFlowService:
    """Service for cash in hand, by day or range, and its daily trend."""

    def __init__(self, store: RecordStore):
        """Initialize cash-flow service.

        Args:
            store: Record store instance
        """
        self.store = store

    def _bucket_totals(self, transactions: Sequence[Transaction]) -> dict[CashDirection, Decimal]:
        totals = {direction: ZERO for direction in CashDirection}
        for txn in transactions:
            totals[CASH_POLARITY[txn.type]] += txn.amount
        return totals

    def cash_position(self, start_date: date, end_date: date) -> CashPosition:
        """Opening cash, movements and closing cash for a date range."""
        transactions = self.store.document.transactions
        opening = sum(
            (txn.amount * cash_sign(txn.type) for txn in transactions if txn.date < start_date),
            ZERO,
        )
        totals = self._bucket_totals(
            [txn for txn in transactions if start_date <= txn.date <= end_date]
        )
        cash_in = totals[CashDirection.INFLOW]
        cash_out = totals[CashDirection.OUTFLOW]
        withdrawals = totals[CashDirection.WITHDRAWAL]
        return CashPosition(
            opening=opening,
            cash_in=cash_in,
            cash_out=cash_out,
            withdrawals=withdrawals,
            closing=opening + cash_in - cash_out - withdrawals,
        )

    def cash_position_for_day(self, day: date) -> CashPosition:
        """Opening and closing cash for a single day."""
        return self.cash_position(day, day)

    def cash_in_hand(self) -> Decimal:
        """Cash balance across every recorded transaction."""
        return sum(
            (txn.amount * cash_sign(txn.type) for txn in self.store.document.transactions),
            ZERO,
        )

    def cash_history(self) -> list[Transaction]:
        """Owner deposits and withdrawals, most recently entered first."""
        movements = [
            txn
            for txn in self.store.document.transactions
            if txn.type in (TransactionType.DEPOSIT, TransactionType.WITHDRAWAL)
        ]
        return list(reversed(movements))

    def daily_trend(
        self,
        end_date: date,
        days: int = TREND_DAYS,
        period: int = TREND_PERIOD,
    ) -> list[TrendPoint]:
        """Daily income and expense with moving averages.

        Covers ``days`` days ending at ``end_date``. Expense includes owner
        withdrawals.

        Args:
            end_date: Last day of the series
            days: Number of days in the series
            period: Moving average window in days

        Returns:
            One TrendPoint per day, oldest first
        """
        if days < 1:
            raise ValueError("Trend must cover at least one day")
        first_day = end_date - timedelta(days=days - 1)
        income = {first_day + timedelta(days=i): ZERO for i in range(days)}
        expense = dict(income)

        for txn in self.store.document.transactions:
            if txn.date not in income:
                continue
            if cash_sign(txn.type) > 0:
                income[txn.date] += txn.amount
            else:
                expense[txn.date] += txn.amount

        day_list = sorted(income)
        incomes = [income[day] for day in day_list]
        expenses = [expense[day] for day in day_list]
        income_averages = simple_moving_average(incomes, period)
        expense_averages = simple_moving_average(expenses, period)

        return [
            TrendPoint(
                date=day,
                income=incomes[i],
                expense=expenses[i],
                income_average=income_averages[i],
                expense_average=expense_averages[i],
            )
            for i, day in enumerate(day_list)
        ]
