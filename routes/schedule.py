from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from db.database import get_db
from models.review import ReviewEntry
from utils.errors import NotFoundError
from utils.reviews import list_reviews_for_date, toggle_review

router = APIRouter()

@router.get("", response_model=List[ReviewEntry])
async def reviews_for_day(
    day: Optional[date] = Query(None, alias="date", description="YYYY-MM-DD, defaults to today"),
    conn = Depends(get_db),
):
    """Reviews due on the given day (or today)."""
    return list_reviews_for_date(conn, day or date.today())

@router.post("/{review_id}/toggle")
async def toggle(review_id: int, conn = Depends(get_db)):
    """Flip a review between done and not done."""
    try:
        review = toggle_review(conn, review_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Review not found")
    return {"success": True, "completed": review["completed"]}
