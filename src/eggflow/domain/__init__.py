"""Domain layer for eggflow application."""

from importlib import import_module

# Services are imported lazily so that eggflow.database can import the
# entities module without pulling in the store.
_SERVICES = {
    "RecordStore": "eggflow.domain.store",
    "AccountService": "eggflow.domain.account",
    "TransactionService": "eggflow.domain.transaction",
    "EggService": "eggflow.domain.eggs",
    "FeedService": "eggflow.domain.feed",
    "LedgerService": "eggflow.domain.ledger",
    "InventoryService": "eggflow.domain.inventory",
    "CashFlowService": "eggflow.domain.cashflow",
    "ReportService": "eggflow.domain.report",
    "InsightService": "eggflow.domain.insight",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
