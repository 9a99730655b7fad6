"""
Services module - the record store and its two backends.
"""
from app.services.record_store import RecordStore, StoreStatus
from app.services.memory_store import InMemoryRecordStore
from app.services.mongo_store import MongoRecordStore
from app.services.store_selector import select_store

__all__ = [
    "RecordStore",
    "StoreStatus",
    "InMemoryRecordStore",
    "MongoRecordStore",
    "select_store",
]
