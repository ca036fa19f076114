from typing import Dict

from utils.schedule import DayLike, iso_day

def counts_by_date(conn) -> Dict[str, int]:
    """Outstanding (not completed) reviews per due date. Dates with none are omitted."""
    cursor = conn.cursor()
    cursor.execute("""
        SELECT due_date, COUNT(*) FROM scheduled_reviews
        WHERE completed = 0
        GROUP BY due_date
        ORDER BY due_date
    """)
    return dict(cursor.fetchall() or [])

def counts_between(conn, start: DayLike, end: DayLike) -> Dict[str, int]:
    """Same as counts_by_date, limited to an inclusive date window."""
    cursor = conn.cursor()
    cursor.execute("""
        SELECT due_date, COUNT(*) FROM scheduled_reviews
        WHERE completed = 0 AND due_date BETWEEN ? AND ?
        GROUP BY due_date
        ORDER BY due_date
    """, (iso_day(start), iso_day(end)))
    return dict(cursor.fetchall() or [])
