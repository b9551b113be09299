"""Tests for egg and feed stock."""

from datetime import date
from decimal import Decimal

from eggflow.domain.entities import (
    EggCollection,
    FarmDocument,
    FeedTransaction,
    FeedTransactionType,
    InvoiceItem,
    Transaction,
    TransactionType,
)
from eggflow.domain.inventory import InventoryService
from eggflow.domain.store import RecordStore


def _collection(day, collected, wasted=0):
    return EggCollection(id=f"e{day.isoformat()}", date=day, collected=collected, wasted=wasted)


def _sale(day, *quantities, amount="1"):
    items = tuple(
        InvoiceItem("Eggs", Decimal(q), Decimal("0"), Decimal("0")) for q in quantities
    )
    return Transaction(
        id=f"s{day.isoformat()}", date=day, type=TransactionType.SALE, account_id="c1",
        amount=Decimal(amount), items=items,
    )


def _feed(day, feed_type, quantity):
    return FeedTransaction(id=f"f{day.isoformat()}{feed_type.value}", date=day, type=feed_type, quantity=Decimal(quantity))


def _inventory(**parts):
    return InventoryService(RecordStore(document=FarmDocument(**parts)))


def test_egg_stock_for_range():
    inventory = _inventory(
        egg_collections=(
            _collection(date(2024, 3, 1), 1000, 10),
            _collection(date(2024, 3, 2), 900, 5),
            _collection(date(2024, 3, 3), 950, 20),
        ),
        transactions=(_sale(date(2024, 3, 1), "300"), _sale(date(2024, 3, 3), "500", "100")),
    )

    stock = inventory.egg_stock(date(2024, 3, 2), date(2024, 3, 3))

    assert stock.opening == Decimal("690")
    assert stock.collected == Decimal("1850")
    assert stock.wasted == Decimal("25")
    assert stock.sold == Decimal("600")
    assert stock.closing == Decimal("1915")


def test_sold_counts_item_quantity_not_amount():
    inventory = _inventory(transactions=(_sale(date(2024, 3, 1), "30", amount="750"),))

    assert inventory.egg_stock_for_day(date(2024, 3, 1)).sold == Decimal("30")


def test_only_sales_reduce_egg_stock():
    purchase = Transaction(
        id="p1", date=date(2024, 3, 1), type=TransactionType.PURCHASE, account_id="v1",
        amount=Decimal("100"), items=(InvoiceItem("Eggs", Decimal("40"), Decimal("2.5"), Decimal("100")),),
    )
    inventory = _inventory(transactions=(purchase,))

    assert inventory.egg_stock_for_day(date(2024, 3, 1)).sold == Decimal("0")


def test_egg_stock_is_not_clamped():
    """Selling more than was collected shows a negative closing stock."""
    inventory = _inventory(
        egg_collections=(_collection(date(2024, 3, 1), 100),),
        transactions=(_sale(date(2024, 3, 1), "150"),),
    )

    stock = inventory.egg_stock_for_day(date(2024, 3, 1))

    assert stock.closing == Decimal("-50")
    assert inventory.egg_stock_for_day(date(2024, 3, 2)).opening == Decimal("-50")


def test_egg_closing_equals_next_opening():
    inventory = _inventory(
        egg_collections=(_collection(date(2024, 3, 1), 100, 3), _collection(date(2024, 3, 2), 80, 1)),
        transactions=(_sale(date(2024, 3, 2), "60"),),
    )

    day_one = inventory.egg_stock_for_day(date(2024, 3, 1))
    day_two = inventory.egg_stock_for_day(date(2024, 3, 2))

    assert day_two.opening == day_one.closing
    assert day_two.closing == Decimal("116")


def test_empty_farm_has_zero_stock():
    stock = _inventory().egg_stock(date(2024, 3, 1), date(2024, 3, 31))

    assert stock.opening == stock.closing == Decimal("0")


def test_feed_stock_for_range():
    inventory = _inventory(
        feed_transactions=(
            _feed(date(2024, 3, 1), FeedTransactionType.PURCHASE, "500"),
            _feed(date(2024, 3, 1), FeedTransactionType.CONSUME, "45"),
            _feed(date(2024, 3, 2), FeedTransactionType.CONSUME, "50"),
            _feed(date(2024, 3, 2), FeedTransactionType.WASTE, "2.5"),
            _feed(date(2024, 3, 3), FeedTransactionType.PURCHASE, "100"),
        )
    )

    stock = inventory.feed_stock(date(2024, 3, 2), date(2024, 3, 2))

    assert stock.opening == Decimal("455")
    assert stock.purchased == Decimal("0")
    assert stock.consumed == Decimal("50")
    assert stock.wasted == Decimal("2.5")
    assert stock.closing == Decimal("402.5")
    assert inventory.feed_stock_for_day(date(2024, 3, 3)).opening == stock.closing


def test_current_feed_inventory():
    inventory = _inventory(
        feed_transactions=(
            _feed(date(2024, 3, 1), FeedTransactionType.PURCHASE, "500"),
            _feed(date(2024, 3, 5), FeedTransactionType.CONSUME, "520"),
        )
    )

    assert inventory.current_feed_inventory() == Decimal("-20")
