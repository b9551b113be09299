"""Egg production domain service."""

from datetime import date
from typing import Optional

from eggflow.domain.entities import EggCollection
from eggflow.domain.errors import ValidationError
from eggflow.domain.store import RecordStore


class EggService:
    """Service for recording daily egg collections."""

    def __init__(self, store: RecordStore):
        """Initialize egg service.

        Args:
            store: Record store instance
        """
        self.store = store

    def record_collection(
        self,
        date: date,
        collected: int,
        wasted: int = 0,
        notes: Optional[str] = None,
    ) -> EggCollection:
        """Record eggs collected and broken on a day.

        Raises:
            ValidationError: If either count is negative
        """
        if collected < 0 or wasted < 0:
            raise ValidationError("Egg counts cannot be negative")
        return self.store.add_egg_collection(
            EggCollection(
                id="",
                date=date,
                collected=collected,
                wasted=wasted,
                notes=notes or None,
            )
        )

    def list_collections(self) -> list[EggCollection]:
        """List collections, most recently entered first."""
        return list(reversed(self.store.document.egg_collections))

    def delete_collection(self, collection_id: str) -> None:
        """Delete a collection entry.

        Raises:
            NotFoundError: If the entry doesn't exist
        """
        self.store.delete_egg_collection(collection_id)
