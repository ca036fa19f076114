# SQL schema for LeetSpace database

SCHEMA_VERSION = 2

SCHEMA_SQL = """
-- Practice items
CREATE TABLE IF NOT EXISTS items (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL CHECK(length(trim(title)) > 0),
    created_at TEXT NOT NULL,
    notes TEXT NOT NULL DEFAULT ''
);

-- Review dates generated for each item
CREATE TABLE IF NOT EXISTS scheduled_reviews (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    item_id INTEGER NOT NULL,
    due_date TEXT NOT NULL,
    completed INTEGER NOT NULL DEFAULT 0 CHECK(completed IN (0, 1)),
    FOREIGN KEY (item_id) REFERENCES items (id)
);
"""

# Indexes for performance
INDEXES_SQL = """
CREATE INDEX IF NOT EXISTS idx_reviews_due ON scheduled_reviews (due_date);
CREATE INDEX IF NOT EXISTS idx_reviews_item ON scheduled_reviews (item_id);
CREATE INDEX IF NOT EXISTS idx_reviews_open_due ON scheduled_reviews (completed, due_date);
"""
