from datetime import date, timedelta
from typing import List, Union

# Days between consecutive reviews. Each step is added to the previous due date.
INTERVALS = (1, 3, 6, 12, 24, 48)

DayLike = Union[date, str]

def iso_day(day: DayLike) -> str:
    """Stored form of a calendar day (YYYY-MM-DD); strings pass through."""
    if isinstance(day, date):
        return day.isoformat()
    return day

def generate_schedule(created_on: date) -> List[date]:
    """Expand a creation date into the ordered review due dates."""
    due_dates: List[date] = []
    cursor = created_on
    for days in INTERVALS:
        cursor = cursor + timedelta(days=days)
        due_dates.append(cursor)
    return due_dates

def cumulative_offsets() -> List[int]:
    """Day offsets of each review from the creation date."""
    offsets: List[int] = []
    total = 0
    for days in INTERVALS:
        total += days
        offsets.append(total)
    return offsets
