from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from db.database import get_db
from models.review import DateCount
from utils.calendar_stats import counts_between, counts_by_date

router = APIRouter()

@router.get("/calendar-stats", response_model=List[DateCount])
async def calendar_stats(
    start: Optional[date] = None,
    end: Optional[date] = None,
    conn = Depends(get_db),
):
    """Outstanding review counts per day, optionally limited to start..end."""
    if (start is None) != (end is None):
        raise HTTPException(status_code=400, detail="Both start and end are required for a window")
    if start is not None and start > end:
        raise HTTPException(status_code=400, detail="Start must be <= end")
    counts = counts_between(conn, start, end) if start is not None else counts_by_date(conn)
    return [{"due_date": due_date, "count": count} for due_date, count in counts.items()]
