"""Generic SQLAlchemy document storage implementation."""

from typing import Optional
from sqlalchemy.orm import Session

from eggflow.database.base import DocumentStorage, DOCUMENT_KEY
from eggflow.database.models import StoredDocument, create_session_factory


class SQLAlchemyStorage(DocumentStorage):
    """SQLAlchemy-based implementation of DocumentStorage."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy storage.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def load_document(self, key: str = DOCUMENT_KEY) -> Optional[str]:
        """Return the stored document text, or None if nothing was saved."""
        session = self._get_session()
        # Another process may have written since this session last looked
        stored = session.get(StoredDocument, key, populate_existing=True)
        if stored is None:
            return None
        return stored.content

    def save_document(self, content: str, key: str = DOCUMENT_KEY) -> None:
        """Overwrite the stored document text in a single commit."""
        session = self._get_session()
        stored = session.get(StoredDocument, key)
        if stored is None:
            session.add(StoredDocument(key=key, content=content))
        else:
            stored.content = content
        try:
            session.commit()
        except Exception:
            session.rollback()
            raise

    def delete_document(self, key: str = DOCUMENT_KEY) -> None:
        """Remove the stored document if present."""
        session = self._get_session()
        stored = session.get(StoredDocument, key)
        if stored is not None:
            session.delete(stored)
            session.commit()
