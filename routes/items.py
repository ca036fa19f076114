from fastapi import APIRouter, Depends, HTTPException

from db.database import get_db
from models.item import ItemCreate, ItemDetail
from models.notes import NotesPayload, NotesResponse, NotesUpdate
from utils.errors import NotFoundError, ValidationError
from utils.notes import encode_notes, parse_notes
from utils.reviews import create_item, get_item, get_notes, list_reviews_for_item, set_notes

router = APIRouter()

@router.post("")
async def add_item(payload: ItemCreate, conn = Depends(get_db)):
    """Create an item and schedule all of its reviews."""
    try:
        item = create_item(conn, payload.title)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"id": item["id"], "success": True}

@router.get("/{item_id}", response_model=ItemDetail)
async def item_detail(item_id: int, conn = Depends(get_db)):
    item = get_item(conn, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    item["reviews"] = list_reviews_for_item(conn, item_id)
    return item

@router.get("/{item_id}/notes", response_model=NotesResponse)
async def read_notes(item_id: int, conn = Depends(get_db)):
    """Raw notes plus the decoded fields. A missing item reads as empty notes."""
    raw = get_notes(conn, item_id)
    payload = parse_notes(raw)
    return NotesResponse(notes=raw, brute_force=payload.brute_force, optimized=payload.optimized)

@router.put("/{item_id}/notes")
async def write_notes(item_id: int, update: NotesUpdate, conn = Depends(get_db)):
    if update.brute_force is None and update.optimized is None:
        raw = update.notes or ""
    else:
        raw = encode_notes(
            NotesPayload(brute_force=update.brute_force or "", optimized=update.optimized or "")
        )
    try:
        set_notes(conn, item_id, raw)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Item not found")
    return {"success": True}
