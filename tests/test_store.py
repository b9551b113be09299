"""Tests for the record store and its persistence."""

import json
import re
from datetime import date
from decimal import Decimal

import pytest

from eggflow.domain.entities import (
    Account,
    AccountType,
    EggCollection,
    FeedTransaction,
    FeedTransactionType,
    Theme,
    Transaction,
    TransactionType,
)
from eggflow.domain.errors import ImportFormatError, NotFoundError
from eggflow.domain.store import RecordStore


def _account(name="Ali Traders", account_type=AccountType.CUSTOMER):
    return Account(id="", name=name, type=account_type)


def test_new_ids_are_short_lowercase_alphanumerics(memory_store):
    ids = {memory_store.add_account(_account(f"A{i}")).id for i in range(20)}

    assert len(ids) == 20
    for new_id in ids:
        assert re.fullmatch(r"[a-z0-9]{9}", new_id)


def test_mutations_are_saved(temp_db, store):
    account = store.add_account(_account())
    store.add_transaction(
        Transaction(
            id="",
            date=date(2024, 3, 15),
            type=TransactionType.RECEIPT,
            account_id=account.id,
            amount=Decimal("500"),
        )
    )

    reopened = RecordStore.open(temp_db)

    assert reopened.document == store.document
    assert reopened.get_account(account.id).name == "Ali Traders"


def test_open_empty_storage_uses_defaults(store):
    assert store.document.accounts == ()
    assert store.settings.currency == "PKR"
    assert store.settings.farm_name == "My Egg Farm"


def test_open_malformed_storage_starts_empty(temp_db):
    temp_db.save_document("{broken")

    store = RecordStore.open(temp_db)

    assert store.document.accounts == ()
    # Stored text is left alone until the next save
    assert temp_db.load_document() == "{broken"


def test_get_missing_returns_none(memory_store):
    assert memory_store.get_account("missing") is None
    assert memory_store.get_transaction("missing") is None


def test_update_account(memory_store):
    account = memory_store.add_account(_account())
    memory_store.update_account(Account(id=account.id, name="Ali & Sons", type=AccountType.CUSTOMER))

    assert memory_store.get_account(account.id).name == "Ali & Sons"


def test_update_missing_account_raises(memory_store):
    with pytest.raises(NotFoundError):
        memory_store.update_account(Account(id="missing", name="X", type=AccountType.CUSTOMER))


def test_delete_account_keeps_transactions(memory_store):
    account = memory_store.add_account(_account())
    txn = memory_store.add_transaction(
        Transaction(id="", date=date(2024, 3, 15), type=TransactionType.SALE, account_id=account.id, amount=Decimal("10"))
    )

    memory_store.delete_account(account.id)

    assert memory_store.get_account(account.id) is None
    assert memory_store.get_transaction(txn.id) is not None


def test_delete_records(memory_store):
    collection = memory_store.add_egg_collection(
        EggCollection(id="", date=date(2024, 3, 15), collected=100, wasted=1)
    )
    feed = memory_store.add_feed_transaction(
        FeedTransaction(id="", date=date(2024, 3, 15), type=FeedTransactionType.CONSUME, quantity=Decimal("40"))
    )

    memory_store.delete_egg_collection(collection.id)
    memory_store.delete_feed_transaction(feed.id)

    assert memory_store.document.egg_collections == ()
    assert memory_store.document.feed_transactions == ()
    with pytest.raises(NotFoundError):
        memory_store.delete_egg_collection(collection.id)
    with pytest.raises(NotFoundError):
        memory_store.delete_feed_transaction(feed.id)
    with pytest.raises(NotFoundError):
        memory_store.delete_transaction("missing")


def test_update_settings(temp_db, store):
    store.update_settings(farm_name="Sunrise Poultry", theme=Theme.MINIMAL)

    reopened = RecordStore.open(temp_db)
    assert reopened.settings.farm_name == "Sunrise Poultry"
    assert reopened.settings.theme is Theme.MINIMAL
    assert reopened.settings.currency == "PKR"


def test_export_import_round_trip(memory_store):
    """Exported data imports back to the same document."""
    customer = memory_store.add_account(_account())
    memory_store.add_account(_account("Feed Mills Ltd", AccountType.VENDOR))
    memory_store.add_transaction(
        Transaction(id="", date=date(2024, 3, 15), type=TransactionType.RECEIPT, account_id=customer.id, amount=Decimal("1250.50"))
    )
    memory_store.add_egg_collection(EggCollection(id="", date=date(2024, 3, 15), collected=1450, wasted=12))
    memory_store.add_feed_transaction(
        FeedTransaction(id="", date=date(2024, 3, 14), type=FeedTransactionType.PURCHASE, quantity=Decimal("500"), cost=Decimal("42000"))
    )
    memory_store.update_settings(currency="USD")

    exported = memory_store.export_data()
    other = RecordStore()
    other.import_data(exported)

    assert other.document == memory_store.document
    assert json.loads(exported)["feedTransactions"][0]["cost"] == 42000


def test_import_malformed_keeps_state(temp_db, store):
    account = store.add_account(_account())
    before = store.document

    with pytest.raises(ImportFormatError):
        store.import_data('{"accounts": [{"name": "no id or type"}]}')

    assert store.document == before
    assert RecordStore.open(temp_db).get_account(account.id) is not None


def test_import_replaces_everything(memory_store):
    memory_store.add_account(_account())

    memory_store.import_data('{"accounts": [{"id": "a1", "name": "Bilal", "type": "Vendor"}]}')

    assert [a.name for a in memory_store.document.accounts] == ["Bilal"]
    assert memory_store.document.transactions == ()


def test_reset_data(temp_db, store):
    store.add_account(_account())
    store.update_settings(currency="USD")

    store.reset_data()

    reopened = RecordStore.open(temp_db)
    assert reopened.document.accounts == ()
    assert reopened.settings.currency == "PKR"


def test_import_non_finite_amount_keeps_state(temp_db, store):
    account = store.add_account(_account())
    before = store.document
    saved = temp_db.load_document()

    with pytest.raises(ImportFormatError):
        store.import_data(
            '{"transactions": [{"id": "t1", "date": "2024-03-15", "type": "Sale", '
            '"accountId": "a1", "amount": Infinity}]}'
        )

    assert store.document == before
    assert temp_db.load_document() == saved
    assert RecordStore.open(temp_db).get_account(account.id) is not None


def test_failed_save_keeps_current_document(memory_store, monkeypatch):
    account = memory_store.add_account(_account())
    before = memory_store.document

    def fail(document, indent=None):
        raise RuntimeError("disk full")

    monkeypatch.setattr("eggflow.domain.store.dumps_document", fail)

    with pytest.raises(RuntimeError):
        memory_store.delete_account(account.id)

    assert memory_store.document == before
