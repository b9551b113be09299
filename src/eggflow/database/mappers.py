"""Mapper functions to convert between domain entities and the JSON document.

The persisted and exported document keeps the camelCase layout used by
earlier versions of the app:

    {"accounts": [...], "transactions": [...], "eggCollections": [...],
     "feedTransactions": [...], "settings": {"currency", "farmName", "theme"}}

Documents saved before feed tracking existed have no ``feedTransactions``
key; any missing collection is read as empty.
"""

import json
import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from dateutil.parser import isoparse

from eggflow.domain import entities as domain
from eggflow.domain.errors import ImportFormatError

logger = logging.getLogger(__name__)


def parse_day(value: Any) -> date:
    """Convert a stored date string to a calendar day.

    Accepts plain ``YYYY-MM-DD`` values as well as full ISO timestamps,
    which are truncated to their date part.
    """
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        raise ValueError(f"Invalid date value: {value!r}")
    return isoparse(value).date()


def _decimal(value: Any) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Invalid number: {value!r}")
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid number: {value!r}")
    if not result.is_finite():
        raise ValueError(f"Invalid number: {value!r}")
    return result


def _count(value: Any) -> int:
    """Read a whole-number count; fractional values are rejected."""
    if value is None:
        return 0
    result = _decimal(value)
    if result != result.to_integral_value():
        raise ValueError(f"Count must be a whole number: {value!r}")
    return int(result)


def _optional_decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    return _decimal(value)


def _number(value: Decimal) -> int | float:
    """Render a Decimal as a JSON number."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def account_to_domain(data: dict[str, Any]) -> domain.Account:
    """Convert a document account object to an Account entity."""
    category = data.get("category")
    joining_date = data.get("joiningDate")
    return domain.Account(
        id=str(data["id"]),
        name=data["name"],
        type=domain.AccountType(data["type"]),
        phone=data.get("phone") or "",
        address=data.get("address") or "",
        category=domain.AccountCategory(category) if category else None,
        salary=_optional_decimal(data.get("salary")),
        joining_date=parse_day(joining_date) if joining_date else None,
        archived=bool(data.get("archived", False)),
    )


def account_to_dict(account: domain.Account) -> dict[str, Any]:
    """Convert an Account entity to a document object."""
    data: dict[str, Any] = {
        "id": account.id,
        "name": account.name,
        "type": account.type.value,
        "phone": account.phone,
        "address": account.address,
    }
    if account.category is not None:
        data["category"] = account.category.value
    if account.salary is not None:
        data["salary"] = _number(account.salary)
    if account.joining_date is not None:
        data["joiningDate"] = account.joining_date.isoformat()
    data["archived"] = account.archived
    return data


def invoice_item_to_domain(data: dict[str, Any]) -> domain.InvoiceItem:
    """Convert a document line item to an InvoiceItem entity."""
    quantity = _decimal(data["quantity"])
    unit_price = _decimal(data["unitPrice"])
    total = data.get("total")
    return domain.InvoiceItem(
        description=data.get("description") or "",
        quantity=quantity,
        unit_price=unit_price,
        total=_decimal(total) if total is not None else quantity * unit_price,
    )


def invoice_item_to_dict(item: domain.InvoiceItem) -> dict[str, Any]:
    """Convert an InvoiceItem entity to a document line item."""
    return {
        "description": item.description,
        "quantity": _number(item.quantity),
        "unitPrice": _number(item.unit_price),
        "total": _number(item.total),
    }


def transaction_to_domain(data: dict[str, Any]) -> domain.Transaction:
    """Convert a document transaction object to a Transaction entity."""
    transaction = domain.Transaction(
        id=str(data["id"]),
        date=parse_day(data["date"]),
        type=domain.TransactionType(data["type"]),
        account_id=str(data.get("accountId") or ""),
        amount=_decimal(data["amount"]),
        items=tuple(invoice_item_to_domain(item) for item in data.get("items") or []),
        notes=data.get("notes"),
    )
    if transaction.items:
        expected = sum((item.total for item in transaction.items), Decimal("0"))
        if expected != transaction.amount:
            logger.warning(
                "Transaction %s amount %s does not match item total %s",
                transaction.id,
                transaction.amount,
                expected,
            )
    return transaction


def transaction_to_dict(transaction: domain.Transaction) -> dict[str, Any]:
    """Convert a Transaction entity to a document object."""
    data: dict[str, Any] = {
        "id": transaction.id,
        "date": transaction.date.isoformat(),
        "type": transaction.type.value,
        "accountId": transaction.account_id,
        "amount": _number(transaction.amount),
    }
    if transaction.items:
        data["items"] = [invoice_item_to_dict(item) for item in transaction.items]
    if transaction.notes is not None:
        data["notes"] = transaction.notes
    return data


def egg_collection_to_domain(data: dict[str, Any]) -> domain.EggCollection:
    """Convert a document egg collection object to an EggCollection entity."""
    return domain.EggCollection(
        id=str(data["id"]),
        date=parse_day(data["date"]),
        collected=_count(data.get("collected")),
        wasted=_count(data.get("wasted")),
        notes=data.get("notes"),
    )


def egg_collection_to_dict(collection: domain.EggCollection) -> dict[str, Any]:
    """Convert an EggCollection entity to a document object."""
    data: dict[str, Any] = {
        "id": collection.id,
        "date": collection.date.isoformat(),
        "collected": collection.collected,
        "wasted": collection.wasted,
    }
    if collection.notes is not None:
        data["notes"] = collection.notes
    return data


def feed_transaction_to_domain(data: dict[str, Any]) -> domain.FeedTransaction:
    """Convert a document feed object to a FeedTransaction entity."""
    vendor_id = data.get("vendorId")
    return domain.FeedTransaction(
        id=str(data["id"]),
        date=parse_day(data["date"]),
        type=domain.FeedTransactionType(data["type"]),
        quantity=_decimal(data["quantity"]),
        cost=_optional_decimal(data.get("cost")),
        vendor_id=str(vendor_id) if vendor_id else None,
        notes=data.get("notes"),
    )


def feed_transaction_to_dict(feed: domain.FeedTransaction) -> dict[str, Any]:
    """Convert a FeedTransaction entity to a document object."""
    data: dict[str, Any] = {
        "id": feed.id,
        "date": feed.date.isoformat(),
        "type": feed.type.value,
        "quantity": _number(feed.quantity),
    }
    if feed.cost is not None:
        data["cost"] = _number(feed.cost)
    if feed.vendor_id is not None:
        data["vendorId"] = feed.vendor_id
    if feed.notes is not None:
        data["notes"] = feed.notes
    return data


def settings_to_domain(data: Optional[dict[str, Any]]) -> domain.Settings:
    """Merge stored settings over the defaults."""
    defaults = domain.Settings()
    data = data or {}
    return domain.Settings(
        currency=data.get("currency", defaults.currency),
        farm_name=data.get("farmName", defaults.farm_name),
        theme=domain.Theme(data.get("theme", defaults.theme.value)),
    )


def settings_to_dict(settings: domain.Settings) -> dict[str, Any]:
    """Convert Settings to a document object."""
    return {
        "currency": settings.currency,
        "farmName": settings.farm_name,
        "theme": settings.theme.value,
    }


def document_to_domain(data: dict[str, Any]) -> domain.FarmDocument:
    """Convert a parsed JSON document to a FarmDocument.

    Raises:
        ImportFormatError: If the document shape or any record is invalid
    """
    if not isinstance(data, dict):
        raise ImportFormatError("Document must be a JSON object")
    try:
        return domain.FarmDocument(
            accounts=tuple(account_to_domain(a) for a in data.get("accounts") or []),
            transactions=tuple(
                transaction_to_domain(t) for t in data.get("transactions") or []
            ),
            egg_collections=tuple(
                egg_collection_to_domain(c) for c in data.get("eggCollections") or []
            ),
            feed_transactions=tuple(
                feed_transaction_to_domain(f) for f in data.get("feedTransactions") or []
            ),
            settings=settings_to_domain(data.get("settings")),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ImportFormatError(f"Invalid document: {e}") from e


def document_to_dict(document: domain.FarmDocument) -> dict[str, Any]:
    """Convert a FarmDocument to a JSON-ready dict."""
    return {
        "accounts": [account_to_dict(a) for a in document.accounts],
        "transactions": [transaction_to_dict(t) for t in document.transactions],
        "eggCollections": [egg_collection_to_dict(c) for c in document.egg_collections],
        "feedTransactions": [
            feed_transaction_to_dict(f) for f in document.feed_transactions
        ],
        "settings": settings_to_dict(document.settings),
    }


def dumps_document(document: domain.FarmDocument, indent: Optional[int] = None) -> str:
    """Serialize a FarmDocument to JSON text."""
    return json.dumps(document_to_dict(document), indent=indent, ensure_ascii=False)


def loads_document(text: str) -> domain.FarmDocument:
    """Parse JSON text into a FarmDocument.

    Raises:
        ImportFormatError: If the text is not valid JSON or not a valid document
    """
    try:
        data = json.loads(text, parse_float=Decimal)
    except (TypeError, ValueError) as e:
        raise ImportFormatError(f"Invalid JSON data: {e}") from e
    return document_to_domain(data)
