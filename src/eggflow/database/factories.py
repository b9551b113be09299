"""Storage factory functions for creating storage instances."""

import os
from pathlib import Path
from typing import Optional

from eggflow.database.sqlalchemy_db import SQLAlchemyStorage


def create_sqlite_storage(database_path: Optional[str] = None) -> SQLAlchemyStorage:
    """Create a SQLite document storage instance.

    Args:
        database_path: Path to SQLite database file. If None, checks EGGFLOW_DB_PATH
            environment variable, then defaults to ~/.eggflow/eggflow.db

    Returns:
        SQLAlchemyStorage instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("EGGFLOW_DB_PATH")

    if database_path is None:
        # Default to ~/.eggflow/eggflow.db
        home = Path.home()
        db_dir = home / ".eggflow"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "eggflow.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyStorage(database_url)
