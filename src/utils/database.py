"""Database connection helpers."""

import atexit
import sqlite3
from contextlib import contextmanager
from pathlib import Path

from .db_init import DB_PATH, ensure_db

_SESSION_CONN = None  # conexão única da sessão (notebook)


def _connect_readonly() -> sqlite3.Connection:
    """Open the sample DB read-only; any write raises sqlite3.OperationalError."""
    uri = Path(DB_PATH).resolve().as_uri() + "?mode=ro"
    return sqlite3.connect(uri, uri=True)


@contextmanager
def get_conn():
    """Context manager to open short-lived read-only connections to the sample DB."""
    ensure_db()
    conn = _connect_readonly()
    try:
        yield conn
    finally:
        conn.close()


def get_session_conn() -> sqlite3.Connection:
    """Return the read-only connection kept open for the whole interactive session."""
    global _SESSION_CONN
    if _SESSION_CONN is None:
        ensure_db()
        _SESSION_CONN = _connect_readonly()
    return _SESSION_CONN


def close_session_conn():
    global _SESSION_CONN
    if _SESSION_CONN is None:
        return
    _SESSION_CONN.close()
    _SESSION_CONN = None


atexit.register(close_session_conn)


__all__ = ["get_conn", "get_session_conn", "close_session_conn"]
