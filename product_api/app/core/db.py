"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager that commits on success
(``get_cursor``) and the schema bootstrap run at application start
(``init_db``).  Each store operation opens its own connection, so
isolation and atomicity of individual writes are SQLite's concern.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings


SCHEMA = """
CREATE TABLE IF NOT EXISTS products (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    category TEXT,
    name TEXT
);

CREATE INDEX IF NOT EXISTS idx_products_category ON products(category);
"""


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If ``database_url`` (or ``settings.database_url`` when omitted) is
    an absolute path, use it directly.  Otherwise resolve it relative
    to the ``product_api`` package directory.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    package_dir = Path(__file__).resolve().parent.parent.parent
    return str((package_dir / db_url).resolve())


def get_connection(database_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be read by
    name.
    """
    conn = sqlite3.connect(database_path or get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(database_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed only if the block finishes without
    raising.
    """
    conn = get_connection(database_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(database_path: Optional[str] = None) -> None:
    """Create the products table and its index if they do not exist.

    Safe to call multiple times.
    """
    with get_cursor(database_path) as cursor:
        cursor.executescript(SCHEMA)
