from .item import Item, ItemCreate, ItemDetail
from .review import ScheduledReview, ReviewEntry, DateCount
from .notes import NotesPayload, NotesUpdate, NotesResponse

__all__ = [
    'Item', 'ItemCreate', 'ItemDetail',
    'ScheduledReview', 'ReviewEntry', 'DateCount',
    'NotesPayload', 'NotesUpdate', 'NotesResponse',
]
