"""Tests for customer activity and farm insights."""

import asyncio
from datetime import date, timedelta
from decimal import Decimal

import pytest

from eggflow.cli.main import cli
from eggflow.domain.entities import (
    Account,
    AccountType,
    EggCollection,
    FarmDocument,
    Transaction,
    TransactionType,
)
from eggflow.domain.insight import INSIGHT_FAILURE_MESSAGE, InsightService
from eggflow.domain.store import RecordStore

AS_OF = date(2024, 3, 31)
WINDOW_START = AS_OF - timedelta(days=30)


class FakeGenerator:
    """Records prompts and returns a canned reply."""

    def __init__(self, reply="All good"):
        self.reply = reply
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        return self.reply


class FailingGenerator:
    def generate(self, prompt):
        raise ConnectionError("network down")


def _sale(txn_id, account_id, day, amount="100"):
    return Transaction(id=txn_id, date=day, type=TransactionType.SALE, account_id=account_id, amount=Decimal(amount))


def _service(accounts=(), transactions=(), egg_collections=()):
    return InsightService(
        RecordStore(
            document=FarmDocument(
                accounts=tuple(accounts),
                transactions=tuple(transactions),
                egg_collections=tuple(egg_collections),
            )
        )
    )


def _customer(account_id, name, archived=False):
    return Account(id=account_id, name=name, type=AccountType.CUSTOMER, archived=archived)


class TestClassifyCustomers:
    def test_sale_on_window_start_is_active(self):
        service = _service(
            accounts=[_customer("c1", "Ali"), _customer("c2", "Bilal")],
            transactions=[
                _sale("t1", "c1", WINDOW_START),
                _sale("t2", "c2", WINDOW_START - timedelta(days=1)),
            ],
        )

        activity = {a.account.id: a for a in service.classify_customers(AS_OF)}

        assert activity["c1"].is_active is True
        assert activity["c2"].is_active is False
        assert activity["c2"].last_sale_date == WINDOW_START - timedelta(days=1)

    def test_customer_without_sales_is_inactive(self):
        service = _service(accounts=[_customer("c1", "Ali")])

        [activity] = service.classify_customers(AS_OF)

        assert activity.is_active is False
        assert activity.last_sale_date is None

    def test_latest_sale_decides(self):
        service = _service(
            accounts=[_customer("c1", "Ali")],
            transactions=[_sale("t2", "c1", AS_OF), _sale("t1", "c1", date(2023, 1, 1))],
        )

        [activity] = service.classify_customers(AS_OF)

        assert activity.last_sale_date == AS_OF
        assert activity.is_active is True

    def test_receipts_do_not_count_as_sales(self):
        receipt = Transaction(
            id="r1", date=AS_OF, type=TransactionType.RECEIPT, account_id="c1", amount=Decimal("50")
        )
        service = _service(accounts=[_customer("c1", "Ali")], transactions=[receipt])

        assert service.classify_customers(AS_OF)[0].is_active is False

    def test_only_non_archived_customers(self):
        service = _service(
            accounts=[
                _customer("c1", "Ali"),
                _customer("c2", "Old Shop", archived=True),
                Account(id="v1", name="Feed Mills", type=AccountType.VENDOR),
            ]
        )

        assert [a.account.id for a in service.classify_customers(AS_OF)] == ["c1"]


class TestSnapshot:
    def test_build_snapshot(self):
        service = _service(
            accounts=[_customer("c1", "Ali"), _customer("c2", "Bilal")],
            transactions=[
                _sale("t1", "c1", AS_OF, "9000"),
                _sale("t2", "c1", WINDOW_START - timedelta(days=1), "5000"),
            ],
            egg_collections=[
                EggCollection(id="e1", date=AS_OF, collected=1000, wasted=10),
                EggCollection(id="e2", date=WINDOW_START, collected=900, wasted=20),
                EggCollection(id="e3", date=WINDOW_START - timedelta(days=1), collected=5000, wasted=500),
            ],
        )

        snapshot = service.build_snapshot(AS_OF)

        assert snapshot.window_start == WINDOW_START
        assert snapshot.total_collected == 1900
        assert snapshot.total_wasted == 30
        assert snapshot.average_daily_collection == Decimal("950")
        assert snapshot.waste_rate.quantize(Decimal("0.01")) == Decimal("1.58")
        assert snapshot.total_revenue == Decimal("9000")
        assert snapshot.customer_count == 2
        assert snapshot.active_customer_count == 1
        assert snapshot.inactive_customers == ("Bilal",)

    def test_empty_farm_snapshot(self):
        snapshot = _service().build_snapshot(AS_OF)

        assert snapshot.average_daily_collection == Decimal("0")
        assert snapshot.waste_rate == Decimal("0")
        assert snapshot.total_revenue == Decimal("0")

    def test_prompt_contains_figures(self):
        service = _service(
            accounts=[_customer("c1", "Ali"), _customer("c2", "Bilal")],
            transactions=[_sale("t1", "c1", AS_OF, "9000")],
            egg_collections=[EggCollection(id="e1", date=AS_OF, collected=1000, wasted=15)],
        )

        prompt = service.build_prompt(service.build_snapshot(AS_OF))

        assert "last 30 days" in prompt
        assert "Total Eggs Collected: 1000" in prompt
        assert "Wastage Rate: 1.50%" in prompt
        assert "Total Revenue: PKR9000" in prompt
        assert "Total Active Customers: 1" in prompt
        assert "Inactive Customers (No Purchase in 30 days): Bilal" in prompt


class TestGenerateInsight:
    def test_generator_called_once(self):
        generator = FakeGenerator("**Production Insight** fine")
        service = _service()

        assert service.generate_insight(generator, AS_OF) == "**Production Insight** fine"
        assert len(generator.prompts) == 1

    def test_failure_returns_fixed_message(self, caplog):
        assert _service().generate_insight(FailingGenerator(), AS_OF) == INSIGHT_FAILURE_MESSAGE
        assert "network down" in caplog.text

    def test_async_insight(self):
        generator = FakeGenerator("ok")

        result = asyncio.run(_service().generate_insight_async(generator, AS_OF))

        assert result == "ok"
        assert len(generator.prompts) == 1

    def test_async_failure(self):
        result = asyncio.run(_service().generate_insight_async(FailingGenerator(), AS_OF))

        assert result == INSIGHT_FAILURE_MESSAGE


def test_insight_dry_run_command(cli_runner, temp_db, sample_customer):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "insight", "--dry-run"])

    assert result.exit_code == 0
    assert "Ali Traders: inactive (last sale: never)" in result.output
    assert "Act as an expert farm consultant" in result.output


def test_insight_requires_api_key(cli_runner, temp_db, monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "insight"])

    assert result.exit_code == 1
    assert "Gemini API key is required" in result.output
