"""Initial schema: key/value response cache with expiry."""

import sqlite3

DDL = [
    """
    CREATE TABLE IF NOT EXISTS cache_entries (
        cache_key TEXT PRIMARY KEY,
        value_json TEXT NOT NULL,
        expires_at REAL NOT NULL,
        created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
    (
        "CREATE INDEX IF NOT EXISTS idx_cache_entries_expires "
        "ON cache_entries(expires_at)"
    ),
]


def up(conn: sqlite3.Connection) -> None:
    for stmt in DDL:
        conn.execute(stmt)
    conn.commit()
