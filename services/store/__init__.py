"""In-memory demo store package."""

from services.store.errors import RecordNotFoundError
from services.store.store import DemoStore, get_store
from services.store.types import TripRecord, UserRecord

__all__ = [
    "DemoStore",
    "RecordNotFoundError",
    "TripRecord",
    "UserRecord",
    "get_store",
]
