"""
Backend selection - runs once at startup.

Tries MongoDB within the configured timeout. On any failure the process does
not abort: it logs a warning and runs on the in-memory store instead. The
choice is fixed for the lifetime of the returned store; there is no re-probe.
"""

import logging
from typing import Optional

from pymongo.errors import PyMongoError

from app.core.config import Settings, get_settings
from app.core.errors import BackendUnavailableError
from app.db.mongodb import connect_mongo, init_mongo_indexes
from app.services.memory_store import InMemoryRecordStore
from app.services.mongo_store import MongoRecordStore
from app.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def select_store(settings: Optional[Settings] = None) -> RecordStore:
    """
    Build the store for this process.

    Usage:
        app.state.store = select_store()
    """
    settings = settings or get_settings()
    try:
        db = connect_mongo(
            settings.mongo_uri,
            settings.mongo_db,
            timeout_seconds=settings.mongo_connect_timeout_seconds,
        )
    except BackendUnavailableError as e:
        logger.warning("Failed to connect to MongoDB, switching to in-memory store: %s", e)
        logger.info("Using in-memory store (development fallback)")
        return InMemoryRecordStore(db_name=settings.mongo_db)

    try:
        init_mongo_indexes(db)
    except PyMongoError as e:
        logger.warning("MongoDB index initialization failed: %s", e)

    logger.info("Connected to MongoDB: %s db: %s", settings.mongo_uri, settings.mongo_db)
    return MongoRecordStore(db)
