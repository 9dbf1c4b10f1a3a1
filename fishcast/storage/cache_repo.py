"""Repository for cached API responses with time-to-live."""

import json
import sqlite3
import time
from typing import Any


def cache_get(conn: sqlite3.Connection, key: str, now: float | None = None) -> Any | None:
    """Return the cached value for ``key``, or None if missing or expired."""
    if now is None:
        now = time.time()
    row = conn.execute(
        "SELECT value_json, expires_at FROM cache_entries WHERE cache_key = ?",
        (key,),
    ).fetchone()
    if row is None:
        return None
    if now > row["expires_at"]:
        return None
    return json.loads(row["value_json"])


def cache_set(
    conn: sqlite3.Connection,
    key: str,
    value: Any,
    ttl_seconds: float,
    now: float | None = None,
) -> None:
    """Store a JSON-serialisable value that expires ``ttl_seconds`` from now."""
    if now is None:
        now = time.time()
    conn.execute(
        "INSERT INTO cache_entries (cache_key, value_json, expires_at) VALUES (?, ?, ?) "
        "ON CONFLICT(cache_key) DO UPDATE SET value_json = excluded.value_json, "
        "expires_at = excluded.expires_at, created_at = CURRENT_TIMESTAMP",
        (key, json.dumps(value), now + ttl_seconds),
    )
    conn.commit()


def purge_expired(conn: sqlite3.Connection, now: float | None = None) -> int:
    """Delete expired entries. Returns the number removed."""
    if now is None:
        now = time.time()
    cursor = conn.execute("DELETE FROM cache_entries WHERE expires_at < ?", (now,))
    conn.commit()
    return cursor.rowcount


def clear_cache(conn: sqlite3.Connection) -> int:
    """Delete every entry. Returns the number removed."""
    cursor = conn.execute("DELETE FROM cache_entries")
    conn.commit()
    return cursor.rowcount


def count_entries(conn: sqlite3.Connection) -> int:
    return conn.execute("SELECT COUNT(*) FROM cache_entries").fetchone()[0]
