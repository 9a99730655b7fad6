"""
Database module - MongoDB connection and the in-memory store lock.
"""
from app.db.mongodb import connect_mongo, init_mongo_indexes
from app.db.rwlock import ReadWriteLock

__all__ = [
    "connect_mongo",
    "init_mongo_indexes",
    "ReadWriteLock"
]
