"""Storage layer for eggflow application."""

from eggflow.database.base import DocumentStorage
from eggflow.database.factories import create_sqlite_storage

__all__ = ["DocumentStorage", "create_sqlite_storage"]
