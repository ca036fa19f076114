from pydantic import BaseModel, Field
from typing import Optional

class NotesPayload(BaseModel):
    brute_force: str = Field(default="", alias="bruteForce")
    optimized: str = ""

    class Config:
        populate_by_name = True

class NotesUpdate(BaseModel):
    """Either a raw stored blob or the two structured fields."""
    notes: Optional[str] = None
    brute_force: Optional[str] = Field(default=None, alias="bruteForce")
    optimized: Optional[str] = None

    class Config:
        populate_by_name = True

class NotesResponse(NotesPayload):
    notes: str = ""
