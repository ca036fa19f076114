# Routes package __init__.py - re-exports routers for main.py convenience
from .items import router as items_router
from .schedule import router as schedule_router
from .calendar import router as calendar_router

__all__ = ['items_router', 'schedule_router', 'calendar_router']
