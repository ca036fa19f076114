import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import config
from .schema import SCHEMA_SQL, INDEXES_SQL, SCHEMA_VERSION

logger = logging.getLogger(__name__)

# Set to pin the database file; otherwise resolved on each use
DB_PATH: Optional[Path] = None

def get_db_path() -> Path:
    """Database file: DB_PATH if pinned, else LEETSPACE_DB_PATH (env or .env), else ~/.leetspace."""
    if DB_PATH is not None:
        return Path(DB_PATH)
    config.load_env()
    return Path(os.getenv("LEETSPACE_DB_PATH", str(config.CONFIG_DIR / "leetspace.db")))

def init_db():
    """Initialize the database by creating tables and indexes if they don't exist."""
    db_path = get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    with get_conn() as conn:
        conn.executescript(SCHEMA_SQL)
        ensure_item_notes(conn)
        conn.executescript(INDEXES_SQL)
        ensure_schema_version(conn)
        conn.commit()
    logger.info("Database ready at %s", db_path)

def ensure_item_notes(conn: sqlite3.Connection) -> None:
    """Ensure items table has notes column for databases created before notes existed."""
    cursor = conn.cursor()
    cursor.execute("PRAGMA table_info(items)")
    columns = {row[1] for row in cursor.fetchall()}
    if "notes" not in columns:
        cursor.execute("ALTER TABLE items ADD COLUMN notes TEXT NOT NULL DEFAULT ''")
        logger.info("Added notes column to items")

def get_schema_version(conn: sqlite3.Connection) -> int:
    """Read the SQLite schema version from PRAGMA user_version."""
    cursor = conn.cursor()
    cursor.execute("PRAGMA user_version")
    row = cursor.fetchone()
    return int(row[0]) if row else 0

def set_schema_version(conn: sqlite3.Connection, version: int) -> None:
    """Set the SQLite schema version via PRAGMA user_version."""
    conn.execute(f"PRAGMA user_version = {int(version)}")

def ensure_schema_version(conn: sqlite3.Connection) -> None:
    """Ensure the current schema version is written to the database."""
    current = get_schema_version(conn)
    if current != SCHEMA_VERSION:
        set_schema_version(conn, SCHEMA_VERSION)

@contextmanager
def get_conn():
    """Context manager for SQLite connection, using row_factory for dict-like rows."""
    conn = sqlite3.connect(get_db_path(), detect_types=sqlite3.PARSE_DECLTYPES, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    try:
        yield conn
    finally:
        conn.close()

def get_db():
    """FastAPI dependency that yields a DB connection and closes it afterwards."""
    with get_conn() as conn:
        yield conn
