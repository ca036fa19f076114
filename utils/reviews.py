"""Item and scheduled review storage.

Every helper receives the open ``sqlite3.Connection`` it should use; route
handlers get one per request from ``db.database.get_db``.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional

from utils.errors import NotFoundError, ValidationError
from utils.schedule import DayLike, generate_schedule, iso_day

logger = logging.getLogger(__name__)

def _review_row(row) -> Dict:
    review = dict(row)
    review["completed"] = bool(review["completed"])
    return review


def create_item(conn, title: Optional[str], today: Optional[date] = None) -> Dict:
    """Insert an item and its full review schedule as one transaction."""
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Title is required")
    created_on = today or date.today()
    try:
        with conn:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO items (title, created_at) VALUES (?, ?)",
                (title, created_on.isoformat()),
            )
            item_id = cursor.lastrowid
            due_dates = generate_schedule(created_on)
            cursor.executemany(
                "INSERT INTO scheduled_reviews (item_id, due_date) VALUES (?, ?)",
                [(item_id, due.isoformat()) for due in due_dates],
            )
    except Exception:
        logger.exception("Creating item %r failed, rolled back", title)
        raise
    logger.info("Created item %s with %d reviews", item_id, len(due_dates))
    return get_item(conn, item_id)


def get_item(conn, item_id: int) -> Optional[Dict]:
    cursor = conn.cursor()
    cursor.execute(
        "SELECT id, title, created_at, notes FROM items WHERE id = ?",
        (item_id,),
    )
    row = cursor.fetchone()
    if not row:
        return None
    item = dict(row)
    item["notes"] = item["notes"] or ""
    return item


def item_exists(conn, item_id: int) -> bool:
    cursor = conn.cursor()
    cursor.execute("SELECT 1 FROM items WHERE id = ?", (item_id,))
    return cursor.fetchone() is not None


def get_review(conn, review_id: int) -> Optional[Dict]:
    cursor = conn.cursor()
    cursor.execute(
        "SELECT id, item_id, due_date, completed FROM scheduled_reviews WHERE id = ?",
        (review_id,),
    )
    row = cursor.fetchone()
    return _review_row(row) if row else None


def list_reviews_for_item(conn, item_id: int) -> List[Dict]:
    cursor = conn.cursor()
    cursor.execute(
        """
        SELECT id, item_id, due_date, completed
        FROM scheduled_reviews
        WHERE item_id = ?
        ORDER BY due_date ASC, id ASC
        """,
        (item_id,),
    )
    return [_review_row(row) for row in cursor.fetchall()]


def list_reviews_for_date(conn, day: DayLike) -> List[Dict]:
    """Reviews due on ``day`` joined with their item's title and notes."""
    cursor = conn.cursor()
    cursor.execute(
        """
        SELECT s.id, s.due_date, s.completed, i.id AS item_id, i.title, i.notes
        FROM scheduled_reviews s
        JOIN items i ON i.id = s.item_id
        WHERE s.due_date = ?
        ORDER BY s.id ASC
        """,
        (iso_day(day),),
    )
    reviews = []
    for row in cursor.fetchall():
        review = _review_row(row)
        review["notes"] = review["notes"] or ""
        reviews.append(review)
    return reviews


def toggle_review(conn, review_id: int) -> Dict:
    """Flip a review's completed flag. Calling it twice restores the original state."""
    with conn:
        cursor = conn.cursor()
        cursor.execute(
            "UPDATE scheduled_reviews SET completed = NOT completed WHERE id = ?",
            (review_id,),
        )
        if cursor.rowcount == 0:
            raise NotFoundError("Review", review_id)
    review = get_review(conn, review_id)
    logger.debug("Review %s completed=%s", review_id, review["completed"])
    return review


def set_notes(conn, item_id: int, raw_text: Optional[str]) -> None:
    notes = raw_text if raw_text is not None else ""
    with conn:
        cursor = conn.cursor()
        cursor.execute("UPDATE items SET notes = ? WHERE id = ?", (notes, item_id))
        if cursor.rowcount == 0:
            raise NotFoundError("Item", item_id)
    logger.debug("Saved %d chars of notes for item %s", len(notes), item_id)


def get_notes(conn, item_id: int) -> str:
    """Stored notes, or an empty string when the item is missing."""
    cursor = conn.cursor()
    cursor.execute("SELECT notes FROM items WHERE id = ?", (item_id,))
    row = cursor.fetchone()
    if not row:
        return ""
    return row["notes"] or ""
