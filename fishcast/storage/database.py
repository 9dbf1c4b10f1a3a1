"""SQLite cache database: connection setup and schema migrations."""

import importlib
import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

MIGRATIONS_PACKAGE = "fishcast.storage.migrations"
MIGRATIONS_DIR = Path(__file__).parent / "migrations"


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open the cache database, creating its directory if needed.

    ``:memory:`` is passed through untouched.
    """
    if str(db_path) != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA busy_timeout=5000")
    return conn


def open_database(db_path: str | Path) -> sqlite3.Connection:
    """Connect and bring the schema up to date."""
    conn = connect(db_path)
    applied = run_migrations(conn)
    if applied:
        logger.info("Applied cache migrations: %s", ", ".join(applied))
    return conn


def run_migrations(conn: sqlite3.Connection) -> list[str]:
    """Apply pending ``v###_*`` migration modules in name order.

    Returns the names applied by this call.
    """
    conn.execute(
        "CREATE TABLE IF NOT EXISTS schema_versions ("
        "  version TEXT PRIMARY KEY,"
        "  applied_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP"
        ")"
    )
    conn.commit()

    done = {row[0] for row in conn.execute("SELECT version FROM schema_versions")}
    pending = [name for name in _discover_migrations() if name not in done]

    for name in pending:
        module = importlib.import_module(f"{MIGRATIONS_PACKAGE}.{name}")
        module.up(conn)
        conn.execute("INSERT INTO schema_versions (version) VALUES (?)", (name,))
        conn.commit()

    return pending


def _discover_migrations() -> list[str]:
    return sorted(p.stem for p in MIGRATIONS_DIR.glob("v[0-9]*_*.py"))
