from pydantic import BaseModel

class ScheduledReview(BaseModel):
    id: int
    item_id: int
    due_date: str  # ISO date
    completed: bool = False

    class Config:
        from_attributes = True

class ReviewEntry(ScheduledReview):
    """A review due on a given day, joined with its item."""
    title: str
    notes: str = ""

class DateCount(BaseModel):
    due_date: str
    count: int
