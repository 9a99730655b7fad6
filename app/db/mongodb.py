"""
MongoDB Connection Utility

MongoDB stores the seven placement portal collections:
- profiles, student_profiles, companies, job_postings
- resumes, applications, interviews

Identifiers are app-generated strings kept in `_id`.
Relationships are by id only and resolved with $lookup pipelines.
"""
import logging

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.errors import BackendUnavailableError
from app.models.records import (
    STUDENT_PROFILES, COMPANIES, JOB_POSTINGS, RESUMES, APPLICATIONS, INTERVIEWS
)

logger = logging.getLogger(__name__)


def connect_mongo(uri: str, db_name: str, timeout_seconds: float = 10) -> Database:
    """
    Connect and ping within `timeout_seconds`.

    Returns the database handle, or raises BackendUnavailableError if the
    server cannot be reached (bad URI, refused connection, failed ping).
    """
    timeout_ms = int(timeout_seconds * 1000)
    client = None
    try:
        client = MongoClient(
            uri,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
        )
        # ping command checks connection
        client.admin.command("ping")
    except (PyMongoError, ValueError) as e:
        # URI parse errors (e.g. port out of range) come through as ValueError
        if client is not None:
            client.close()
        raise BackendUnavailableError(f"MongoDB unreachable: {e}", uri=uri) from e
    return client[db_name]


def init_mongo_indexes(db: Database) -> None:
    """
    Create indexes on the foreign-key fields the store filters and joins on.
    Safe to call on every startup.
    """
    db[STUDENT_PROFILES].create_index("user_id")
    db[COMPANIES].create_index("recruiter_id")
    db[JOB_POSTINGS].create_index([("status", 1), ("company_id", 1)])
    db[RESUMES].create_index("student_id")
    db[APPLICATIONS].create_index("job_id")
    db[APPLICATIONS].create_index("student_id")
    db[INTERVIEWS].create_index("application_id")
    logger.info("MongoDB indexes ensured on %s", db.name)
