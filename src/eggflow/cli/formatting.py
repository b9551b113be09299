"""Text formatting helpers for CLI output."""

from decimal import Decimal

from eggflow.domain.entities import ReportSnapshot


def format_money(amount: Decimal, currency: str) -> str:
    """Format an amount with the farm currency, e.g. 'PKR1,250.00'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency}{abs(amount):,.2f}"


def format_quantity(value: Decimal | int) -> str:
    """Format a quantity without trailing zeros."""
    value = Decimal(value)
    if value == value.to_integral_value():
        return f"{int(value):,}"
    return f"{value.normalize():f}"


def format_report_lines(snapshot: ReportSnapshot, currency: str) -> list[str]:
    """Render a report snapshot as aligned text lines."""
    rows = [
        ("EGGS", None),
        ("Opening Stock", format_quantity(snapshot.eggs.opening)),
        ("Collected", format_quantity(snapshot.eggs.collected)),
        ("Wasted", format_quantity(snapshot.eggs.wasted)),
        ("Sold", format_quantity(snapshot.eggs.sold)),
        ("Closing Stock", format_quantity(snapshot.eggs.closing)),
        ("FEED (kg)", None),
        ("Opening Stock", format_quantity(snapshot.feed.opening)),
        ("Purchased", format_quantity(snapshot.feed.purchased)),
        ("Consumed", format_quantity(snapshot.feed.consumed)),
        ("Wasted", format_quantity(snapshot.feed.wasted)),
        ("Closing Stock", format_quantity(snapshot.feed.closing)),
        ("CASH", None),
        ("Opening Cash", format_money(snapshot.cash.opening, currency)),
        ("Cash In", format_money(snapshot.cash.cash_in, currency)),
        ("Cash Out", format_money(snapshot.cash.cash_out, currency)),
        ("Withdrawals", format_money(snapshot.cash.withdrawals, currency)),
        ("Closing Cash", format_money(snapshot.cash.closing, currency)),
        ("SALES", None),
        ("Revenue", format_money(snapshot.sales_revenue, currency)),
    ]
    lines = []
    for label, value in rows:
        if value is None:
            if lines:
                lines.append("")
            lines.append(f"--- {label} ---")
        else:
            lines.append(f"  {label:<20} {value:>18}")
    return lines


def format_share_text(snapshot: ReportSnapshot, farm_name: str, currency: str) -> str:
    """Plain-text report for sharing through a messaging app."""
    eggs, feed, cash = snapshot.eggs, snapshot.feed, snapshot.cash
    return "\n".join(
        [
            f"*{farm_name} Report ({snapshot.start_date} to {snapshot.end_date})*",
            "",
            "*Egg Production*",
            f"Opening: {format_quantity(eggs.opening)}",
            f"Collected: {format_quantity(eggs.collected)}",
            f"Wasted: {format_quantity(eggs.wasted)}",
            f"Sold: {format_quantity(eggs.sold)}",
            f"Closing Stock: {format_quantity(eggs.closing)}",
            "",
            "*Feed & Nutrition*",
            f"Purchased: {format_quantity(feed.purchased)}kg",
            f"Consumed: {format_quantity(feed.consumed)}kg",
            f"Inventory: {format_quantity(feed.closing)}kg",
            "",
            "*Cash Flow*",
            f"Opening Cash: {format_money(cash.opening, currency)}",
            f"Cash In: {format_money(cash.cash_in, currency)}",
            f"Cash Out: {format_money(cash.cash_out, currency)}",
            f"Withdrawals: {format_money(cash.withdrawals, currency)}",
            f"Closing Cash: {format_money(cash.closing, currency)}",
        ]
    )
