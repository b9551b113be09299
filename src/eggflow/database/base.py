"""Abstract document storage interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Key the farm document is stored under
DOCUMENT_KEY = "eggflow_data"


class DocumentStorage(ABC):
    """Key-value store holding whole serialized documents."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the storage backend."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the storage backend."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def load_document(self, key: str = DOCUMENT_KEY) -> Optional[str]:
        """Return the stored document text, or None if nothing was saved."""
        pass

    @abstractmethod
    def save_document(self, content: str, key: str = DOCUMENT_KEY) -> None:
        """Overwrite the stored document text."""
        pass

    @abstractmethod
    def delete_document(self, key: str = DOCUMENT_KEY) -> None:
        """Remove the stored document if present."""
        pass
