"""Record store holding the whole farm document."""

import logging
import secrets
import string
from dataclasses import replace
from typing import Optional

from eggflow.database.base import DocumentStorage
from eggflow.database.mappers import dumps_document, loads_document
from eggflow.domain.entities import (
    Account,
    EggCollection,
    FarmDocument,
    FeedTransaction,
    Settings,
    Transaction,
)
from eggflow.domain.errors import (
    ImportFormatError,
    NotFoundError,
    account_not_found,
    egg_collection_not_found,
    feed_transaction_not_found,
    transaction_not_found,
)

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits
_ID_LENGTH = 9


class RecordStore:
    """Owner of the farm document.

    Every mutation builds a new ``FarmDocument`` from the current one and
    then writes the whole document to storage. Engines read ``document``
    and never write back.
    """

    def __init__(
        self,
        storage: Optional[DocumentStorage] = None,
        document: Optional[FarmDocument] = None,
    ):
        """Initialize the store.

        Args:
            storage: Storage to save to after each mutation (None keeps the
                store in memory only)
            document: Starting document (defaults to an empty farm)
        """
        self.storage = storage
        self._document = document if document is not None else FarmDocument()

    @classmethod
    def open(cls, storage: DocumentStorage) -> "RecordStore":
        """Create a store from whatever the storage currently holds.

        A stored document that cannot be read is logged and replaced by
        defaults in memory; storage is left untouched until the next save.
        """
        text = storage.load_document()
        if text is None:
            return cls(storage)
        try:
            document = loads_document(text)
        except ImportFormatError:
            logger.exception("Failed to load stored data, starting empty")
            return cls(storage)
        return cls(storage, document)

    @property
    def document(self) -> FarmDocument:
        return self._document

    @property
    def settings(self) -> Settings:
        return self._document.settings

    def _commit(self, document: FarmDocument) -> None:
        """Persist a document and make it current.

        The document is serialized first so a failure leaves the current
        document in place.
        """
        text = dumps_document(document)
        if self.storage is not None:
            self.storage.save_document(text)
        self._document = document

    def _new_id(self) -> str:
        taken = {a.id for a in self._document.accounts}
        taken.update(t.id for t in self._document.transactions)
        taken.update(c.id for c in self._document.egg_collections)
        taken.update(f.id for f in self._document.feed_transactions)
        while True:
            new_id = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))
            if new_id not in taken:
                return new_id

    # Account operations
    def add_account(self, account: Account) -> Account:
        """Append an account, assigning it a fresh ID."""
        account = replace(account, id=self._new_id())
        self._commit(
            replace(self._document, accounts=self._document.accounts + (account,))
        )
        logger.info("Added account %s (%s)", account.id, account.name)
        return account

    def update_account(self, account: Account) -> None:
        """Replace the account with the same ID."""
        if self.get_account(account.id) is None:
            raise NotFoundError(account_not_found(account.id))
        accounts = tuple(
            account if a.id == account.id else a for a in self._document.accounts
        )
        self._commit(replace(self._document, accounts=accounts))

    def delete_account(self, account_id: str) -> None:
        """Remove an account. Transactions referring to it are kept."""
        if self.get_account(account_id) is None:
            raise NotFoundError(account_not_found(account_id))
        accounts = tuple(a for a in self._document.accounts if a.id != account_id)
        self._commit(replace(self._document, accounts=accounts))
        logger.info("Deleted account %s", account_id)

    def get_account(self, account_id: Optional[str]) -> Optional[Account]:
        """Get account by ID, or None if it does not exist."""
        for account in self._document.accounts:
            if account.id == account_id:
                return account
        return None

    # Transaction operations
    def add_transaction(self, transaction: Transaction) -> Transaction:
        """Append a transaction, assigning it a fresh ID."""
        transaction = replace(transaction, id=self._new_id())
        self._commit(
            replace(
                self._document,
                transactions=self._document.transactions + (transaction,),
            )
        )
        logger.info(
            "Added %s transaction %s for %s",
            transaction.type.value,
            transaction.id,
            transaction.account_id,
        )
        return transaction

    def delete_transaction(self, transaction_id: str) -> None:
        """Remove a transaction."""
        if self.get_transaction(transaction_id) is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        transactions = tuple(
            t for t in self._document.transactions if t.id != transaction_id
        )
        self._commit(replace(self._document, transactions=transactions))

    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID, or None if it does not exist."""
        for transaction in self._document.transactions:
            if transaction.id == transaction_id:
                return transaction
        return None

    # Egg collection operations
    def add_egg_collection(self, collection: EggCollection) -> EggCollection:
        """Append an egg collection entry, assigning it a fresh ID."""
        collection = replace(collection, id=self._new_id())
        self._commit(
            replace(
                self._document,
                egg_collections=self._document.egg_collections + (collection,),
            )
        )
        return collection

    def delete_egg_collection(self, collection_id: str) -> None:
        """Remove an egg collection entry."""
        collections = tuple(
            c for c in self._document.egg_collections if c.id != collection_id
        )
        if len(collections) == len(self._document.egg_collections):
            raise NotFoundError(egg_collection_not_found(collection_id))
        self._commit(replace(self._document, egg_collections=collections))

    # Feed operations
    def add_feed_transaction(self, feed: FeedTransaction) -> FeedTransaction:
        """Append a feed entry, assigning it a fresh ID."""
        feed = replace(feed, id=self._new_id())
        self._commit(
            replace(
                self._document,
                feed_transactions=self._document.feed_transactions + (feed,),
            )
        )
        return feed

    def delete_feed_transaction(self, feed_id: str) -> None:
        """Remove a feed entry."""
        feed_transactions = tuple(
            f for f in self._document.feed_transactions if f.id != feed_id
        )
        if len(feed_transactions) == len(self._document.feed_transactions):
            raise NotFoundError(feed_transaction_not_found(feed_id))
        self._commit(replace(self._document, feed_transactions=feed_transactions))

    # Settings and whole-document operations
    def update_settings(self, **changes) -> Settings:
        """Overwrite individual settings fields."""
        settings = replace(self._document.settings, **changes)
        self._commit(replace(self._document, settings=settings))
        return settings

    def export_data(self) -> str:
        """Serialize the whole document as pretty-printed JSON."""
        return dumps_document(self._document, indent=2)

    def import_data(self, text: str) -> FarmDocument:
        """Replace the whole document with the one in ``text``.

        Raises:
            ImportFormatError: If the text cannot be read; the current
                document is kept as it was
        """
        document = loads_document(text)
        self._commit(document)
        logger.info(
            "Imported %d accounts, %d transactions, %d egg collections, %d feed entries",
            len(document.accounts),
            len(document.transactions),
            len(document.egg_collections),
            len(document.feed_transactions),
        )
        return document

    def reset_data(self) -> None:
        """Replace the document with an empty farm."""
        self._commit(FarmDocument())
        logger.info("Reset all data")

