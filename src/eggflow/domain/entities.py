"""Domain model entities for eggflow.

These are pure data classes representing farm records and the results of
the ledger, inventory and cash-flow computations. They are independent of
the persisted JSON document layout, which lives in ``eggflow.database.mappers``.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    """Kind of counterparty an account represents."""

    CUSTOMER = "Customer"
    VENDOR = "Vendor"
    EMPLOYEE = "Employee"
    UTILITY = "Utility"
    OWNER = "Owner"


class AccountCategory(str, Enum):
    """Reporting bucket for an account."""

    INCOME = "Income"
    EXPENSE = "Expense"
    GENERAL = "General"


class TransactionType(str, Enum):
    """Ledger entry types."""

    SALE = "Sale"
    PAYMENT = "Payment"  # We pay them
    RECEIPT = "Receipt"  # They pay us
    EXPENSE = "Expense"
    PURCHASE = "Purchase"
    DEPOSIT = "Deposit"  # Owner puts money in
    WITHDRAWAL = "Withdrawal"  # Owner takes money out


class FeedTransactionType(str, Enum):
    """Feed inventory movement types."""

    PURCHASE = "Purchase"
    CONSUME = "Consume"
    WASTE = "Waste"


class Theme(str, Enum):
    """Display theme stored with the farm settings."""

    STAINED_GLASS = "stained-glass"
    MINIMAL = "minimal"


@dataclass(frozen=True)
class Account:
    """Customer, vendor, employee, utility or owner account."""

    id: str
    name: str
    type: AccountType
    phone: str = ""
    address: str = ""
    category: Optional[AccountCategory] = None
    salary: Optional[Decimal] = None
    joining_date: Optional[date] = None
    archived: bool = False


@dataclass(frozen=True)
class InvoiceItem:
    """Invoice line item."""

    description: str
    quantity: Decimal
    unit_price: Decimal
    total: Decimal


@dataclass(frozen=True)
class Transaction:
    """Ledger entry.

    ``amount`` is never negative; whether it adds to or subtracts from a
    balance is decided by ``type``.
    """

    id: str
    date: date
    type: TransactionType
    account_id: str
    amount: Decimal
    items: tuple[InvoiceItem, ...] = ()
    notes: Optional[str] = None

    @property
    def item_quantity(self) -> Decimal:
        """Total units across all line items."""
        return sum((item.quantity for item in self.items), Decimal("0"))


@dataclass(frozen=True)
class EggCollection:
    """Daily egg production entry."""

    id: str
    date: date
    collected: int
    wasted: int
    notes: Optional[str] = None


@dataclass(frozen=True)
class FeedTransaction:
    """Feed inventory movement, quantity in kg."""

    id: str
    date: date
    type: FeedTransactionType
    quantity: Decimal
    cost: Optional[Decimal] = None
    vendor_id: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class Settings:
    """Farm-wide settings."""

    currency: str = "PKR"
    farm_name: str = "My Egg Farm"
    theme: Theme = Theme.STAINED_GLASS


@dataclass(frozen=True)
class FarmDocument:
    """The complete persisted state of one farm."""

    accounts: tuple[Account, ...] = ()
    transactions: tuple[Transaction, ...] = ()
    egg_collections: tuple[EggCollection, ...] = ()
    feed_transactions: tuple[FeedTransaction, ...] = ()
    settings: Settings = field(default_factory=Settings)


@dataclass(frozen=True)
class LedgerRow:
    """One transaction in an account statement."""

    transaction: Transaction
    debit: Decimal
    credit: Decimal
    balance: Decimal


@dataclass(frozen=True)
class LedgerStatement:
    """Account statement for a date range."""

    account_id: Optional[str]
    start_date: date
    end_date: date
    opening_balance: Decimal
    rows: tuple[LedgerRow, ...] = ()

    @property
    def closing_balance(self) -> Decimal:
        if self.rows:
            return self.rows[-1].balance
        return self.opening_balance


@dataclass(frozen=True)
class EggStock:
    """Egg stock movement for a date range."""

    opening: Decimal
    collected: Decimal
    wasted: Decimal
    sold: Decimal
    closing: Decimal


@dataclass(frozen=True)
class FeedStock:
    """Feed stock movement for a date range, in kg."""

    opening: Decimal
    purchased: Decimal
    consumed: Decimal
    wasted: Decimal
    closing: Decimal


@dataclass(frozen=True)
class CashPosition:
    """Cash in hand movement for a date range."""

    opening: Decimal
    cash_in: Decimal
    cash_out: Decimal
    withdrawals: Decimal
    closing: Decimal


@dataclass(frozen=True)
class TrendPoint:
    """Daily income/expense totals with their moving averages."""

    date: date
    income: Decimal
    expense: Decimal
    income_average: Decimal
    expense_average: Decimal


@dataclass(frozen=True)
class DailyPerformance:
    """Eggs collected and sales revenue for one day."""

    date: date
    collected: int
    revenue: Decimal


@dataclass(frozen=True)
class ReportSnapshot:
    """Fully computed figures handed to report renderers."""

    start_date: date
    end_date: date
    eggs: EggStock
    feed: FeedStock
    cash: CashPosition
    sales_revenue: Decimal


@dataclass(frozen=True)
class CustomerActivity:
    """Whether a customer bought anything inside the lookback window."""

    account: Account
    last_sale_date: Optional[date]
    is_active: bool


@dataclass(frozen=True)
class InsightSnapshot:
    """Numbers sent to the insight generator."""

    as_of: date
    window_start: date
    total_collected: int
    total_wasted: int
    average_daily_collection: Decimal
    waste_rate: Decimal
    total_revenue: Decimal
    customer_count: int
    active_customer_count: int
    inactive_customers: tuple[str, ...] = ()
