from datetime import date

from utils.calendar_stats import counts_between, counts_by_date
from utils.reviews import create_item, list_reviews_for_date, toggle_review


def test_counts_by_date_groups_outstanding_reviews(conn):
    create_item(conn, "LC 1", today=date(2024, 1, 1))
    create_item(conn, "LC 2", today=date(2024, 1, 1))
    create_item(conn, "LC 3", today=date(2024, 1, 2))

    counts = counts_by_date(conn)
    assert counts["2024-01-02"] == 2
    assert counts["2024-01-03"] == 1
    assert counts["2024-04-04"] == 2
    assert sum(counts.values()) == 18
    assert 0 not in counts.values()


def test_completed_date_disappears(conn):
    create_item(conn, "LC 1", today=date(2024, 1, 1))
    create_item(conn, "LC 2", today=date(2024, 1, 1))
    entries = list_reviews_for_date(conn, "2024-01-02")

    toggle_review(conn, entries[0]["id"])
    assert counts_by_date(conn)["2024-01-02"] == 1

    toggle_review(conn, entries[1]["id"])
    assert "2024-01-02" not in counts_by_date(conn)

    toggle_review(conn, entries[1]["id"])
    assert counts_by_date(conn)["2024-01-02"] == 1


def test_counts_by_date_empty_store(conn):
    assert counts_by_date(conn) == {}


def test_counts_between_is_inclusive(conn):
    create_item(conn, "LC 1", today=date(2024, 1, 1))

    window = counts_between(conn, date(2024, 1, 2), "2024-01-11")
    assert window == {"2024-01-02": 1, "2024-01-05": 1, "2024-01-11": 1}
