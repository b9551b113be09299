"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ImportFormatError(DomainError):
    """Imported document could not be read."""


def account_not_found(account_id: str) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def egg_collection_not_found(collection_id: str) -> str:
    """Return message for missing egg collection entry."""
    return f"Egg collection {collection_id} not found"


def feed_transaction_not_found(feed_id: str) -> str:
    """Return message for missing feed entry."""
    return f"Feed entry {feed_id} not found"


def invoice_amount_mismatch(amount, expected) -> str:
    """Return message when a supplied invoice amount disagrees with its items."""
    return f"Invoice amount {amount} does not match item total {expected}"
