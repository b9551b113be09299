"""Shared pytest fixtures for eggflow tests."""

import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest

from eggflow.database.factories import create_sqlite_storage
from eggflow.domain.account import AccountService
from eggflow.domain.entities import AccountType
from eggflow.domain.store import RecordStore
from eggflow.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    storage = create_sqlite_storage(database_path=db_path)
    # Store the path for tests that need it
    storage.database_path = db_path
    storage.connect()
    storage.initialize_schema()

    yield storage

    storage.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def store(temp_db):
    """Create a RecordStore that saves to the temporary database."""
    return RecordStore.open(temp_db)


@pytest.fixture
def memory_store():
    """Create a RecordStore that is never persisted."""
    return RecordStore()


@pytest.fixture
def account_service(store):
    """Create an AccountService on the temporary store."""
    return AccountService(store)


@pytest.fixture
def transaction_service(store):
    """Create a TransactionService on the temporary store."""
    return TransactionService(store)


@pytest.fixture
def sample_customer(account_service):
    """Create a sample customer account."""
    return account_service.create_account(
        name="Ali Traders", account_type=AccountType.CUSTOMER, phone="0300-1234567"
    )


@pytest.fixture
def sample_vendor(account_service):
    """Create a sample vendor account."""
    return account_service.create_account(name="Feed Mills Ltd", account_type=AccountType.VENDOR)


@pytest.fixture
def sample_owner(account_service):
    """Create a sample owner account."""
    return account_service.create_account(name="Owner", account_type=AccountType.OWNER)


@pytest.fixture
def sale_items():
    """Line items for a 360 egg sale at 25 each."""
    return [("Eggs", Decimal("360"), Decimal("25"))]


@pytest.fixture
def day():
    """A fixed reference day used across engine tests."""
    return date(2024, 3, 15)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
