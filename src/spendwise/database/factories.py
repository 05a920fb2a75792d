"""Construction of the ledger store used by the CLI and tests."""

import logging
import os
from pathlib import Path
from typing import Optional

from spendwise.database.sqlalchemy_db import SQLAlchemyDatabase

logger = logging.getLogger(__name__)

DB_PATH_ENV = "SPENDWISE_DB_PATH"
DEFAULT_DB_FILE = Path("~/.spendwise/spendwise.db")


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the SQLite file: explicit path, then SPENDWISE_DB_PATH, then ~/.spendwise."""
    raw = database_path or os.environ.get(DB_PATH_ENV)
    path = Path(raw).expanduser() if raw else DEFAULT_DB_FILE.expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Open (creating if needed) the SQLite ledger at the resolved path."""
    path = resolve_database_path(database_path)
    logger.debug("Using ledger database %s", path)
    return SQLAlchemyDatabase(f"sqlite:///{path}")
