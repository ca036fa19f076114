from pydantic import BaseModel
from typing import List, Optional

from .review import ScheduledReview

class ItemBase(BaseModel):
    title: str

class ItemCreate(BaseModel):
    # Left optional so a missing title is rejected by the store like a blank one
    title: Optional[str] = None

class Item(ItemBase):
    id: int
    created_at: str  # ISO date
    notes: str = ""

    class Config:
        from_attributes = True

class ItemDetail(Item):
    reviews: List[ScheduledReview] = []
