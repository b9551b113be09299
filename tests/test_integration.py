"""Integration tests for end-to-end workflows."""

from datetime import date, timedelta
from decimal import Decimal

from eggflow.cli.main import cli
from eggflow.domain.ledger import LedgerService
from eggflow.domain.store import RecordStore


def _invoke(cli_runner, temp_db, *args, **kwargs):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)
    assert result.exit_code == 0, result.output
    return result


def test_full_workflow(cli_runner, temp_db):
    """Accounts -> production -> feed -> sale -> receipt -> ledger and report."""
    _invoke(cli_runner, temp_db, "account", "create", "Ali Traders")
    _invoke(cli_runner, temp_db, "account", "create", "Feed Mills Ltd", "--type", "Vendor")
    _invoke(cli_runner, temp_db, "account", "create", "Owner", "--type", "Owner")

    _invoke(cli_runner, temp_db, "cash", "deposit", "--account", "Owner", "--amount", "50000", "--date", "2024-03-01")
    _invoke(cli_runner, temp_db, "eggs", "collect", "1500", "--wasted", "20", "--date", "2024-03-01")
    _invoke(cli_runner, temp_db, "eggs", "collect", "1450", "--wasted", "10", "--date", "2024-03-02")
    _invoke(
        cli_runner, temp_db,
        "feed", "add", "Purchase", "--quantity", "500", "--cost", "42000", "--vendor", "Feed Mills Ltd",
        "--date", "2024-03-01",
    )
    _invoke(cli_runner, temp_db, "feed", "add", "Consume", "--quantity", "50", "--date", "2024-03-02")
    _invoke(
        cli_runner, temp_db,
        "invoice", "create", "--account", "Ali Traders", "--item", "Eggs:1800:25", "--date", "2024-03-02",
    )
    _invoke(
        cli_runner, temp_db,
        "transaction", "add", "--account", "Ali Traders", "--type", "Receipt", "--amount", "30000",
        "--date", "2024-03-02",
    )

    store = RecordStore.open(temp_db)
    customer = next(a for a in store.document.accounts if a.name == "Ali Traders")
    vendor = next(a for a in store.document.accounts if a.name == "Feed Mills Ltd")
    ledger = LedgerService(store)
    assert ledger.account_balance(customer.id) == Decimal("15000")
    assert ledger.account_balance(vendor.id) == Decimal("-42000")

    result = _invoke(cli_runner, temp_db, "ledger", "Ali Traders", "--start-date", "2024-03-01", "--end-date", "2024-03-31")
    assert "Closing balance: PKR15,000.00" in result.output

    result = _invoke(cli_runner, temp_db, "report", "--start-date", "2024-03-01", "--end-date", "2024-03-02")
    assert "1,120" in result.output  # closing egg stock
    assert "PKR83,000.00" in result.output  # closing cash
    assert "PKR45,000.00" in result.output  # revenue

    result = _invoke(cli_runner, temp_db, "feed", "stock")
    assert "Feed in stock: 450kg" in result.output


def test_inactive_customer_shows_in_dry_run(cli_runner, temp_db):
    today = date.today()
    _invoke(cli_runner, temp_db, "account", "create", "Ali Traders")
    _invoke(cli_runner, temp_db, "account", "create", "Bilal Store")
    _invoke(
        cli_runner, temp_db,
        "invoice", "create", "--account", "Ali Traders", "--item", "Eggs:30:25", "--date", str(today - timedelta(days=2)),
    )
    _invoke(
        cli_runner, temp_db,
        "invoice", "create", "--account", "Bilal Store", "--item", "Eggs:30:25", "--date", str(today - timedelta(days=45)),
    )

    result = _invoke(cli_runner, temp_db, "insight", "--dry-run")

    assert "Ali Traders: active" in result.output
    assert "Bilal Store: inactive" in result.output
    assert "Inactive Customers (No Purchase in 30 days): Bilal Store" in result.output


def test_deleted_account_history_is_kept(cli_runner, temp_db):
    _invoke(cli_runner, temp_db, "account", "create", "Ali Traders")
    _invoke(cli_runner, temp_db, "invoice", "create", "--account", "Ali Traders", "--item", "Eggs:30:25")
    _invoke(cli_runner, temp_db, "account", "delete", "Ali Traders", input="y\n")

    result = _invoke(cli_runner, temp_db, "invoice", "list")

    assert "Unknown" in result.output
    assert "PKR750.00" in result.output
