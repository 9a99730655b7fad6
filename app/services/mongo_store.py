"""
MongoDB Record Store - forwards every operation to the live database.

Documents keep their id in `_id`. The adapter maps `id` <-> `_id` at the
boundary, so callers only ever see `id` (nested join objects included).
Any driver error surfaces as QueryFailureError carrying the driver message.
No retries.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Optional

from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.errors import NotFoundError, QueryFailureError
from app.models.records import (
    APPLICATIONS, INTERVIEWS, JOB_POSTINGS, ApplicationStatus
)
from app.services.aggregations import (
    company_applications_pipeline, active_job_postings_pipeline,
    normalize_application_row, normalize_job_posting_row,
)
from app.services.record_store import (
    RecordStore, StoreStatus, LIVE,
    check_collection, clean_filter, clean_patch, prepare_record, reconcile, utc_now,
)

logger = logging.getLogger(__name__)


# ============================================================
# HELPER: id <-> _id translation
# ============================================================

def to_mongo(doc: Mapping[str, Any]) -> dict:
    """Store `id` as `_id`."""
    out = dict(doc)
    if "id" in out:
        out["_id"] = out.pop("id")
    return out


def from_mongo(value: Any) -> Any:
    """Rename `_id` to `id` in a document and every document nested in it."""
    if isinstance(value, dict):
        out = {}
        for k, v in value.items():
            out["id" if k == "_id" else k] = from_mongo(v)
        return out
    if isinstance(value, list):
        return [from_mongo(v) for v in value]
    return value


@contextmanager
def query_errors(operation: str):
    """Re-raise driver errors as QueryFailureError."""
    try:
        yield
    except PyMongoError as e:
        logger.error("MongoDB %s failed: %s", operation, e)
        raise QueryFailureError(str(e), operation=operation) from e


class MongoRecordStore(RecordStore):
    """
    Live store backed by a pymongo Database.

    Usage:
        store = MongoRecordStore(connect_mongo(uri, "placement_portal"))
    """

    mode = LIVE

    def __init__(self, db: Database):
        self.db = db

    def find(self, collection: str, filter: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        query = to_mongo(clean_filter(collection, filter))
        with query_errors(f"find {collection}"):
            docs = list(self.db[collection].find(query))
        return reconcile(collection, [from_mongo(d) for d in docs])

    def create(self, collection: str, record: Mapping[str, Any]) -> Dict[str, Any]:
        if collection == INTERVIEWS:
            return self.create_interview(record)
        doc = prepare_record(collection, record)
        with query_errors(f"insert {collection}"):
            self.db[collection].insert_one(to_mongo(doc))
        logger.debug("Created %s/%s", collection, doc["id"])
        return doc

    def patch(self, collection: str, record_id: str, fieldset: Mapping[str, Any]) -> Dict[str, Any]:
        patch = clean_patch(collection, fieldset)
        with query_errors(f"update {collection}"):
            if patch:
                result = self.db[collection].update_one({"_id": record_id}, {"$set": patch})
                matched = result.matched_count
            else:
                # $set with no fields is rejected by the server
                matched = self.db[collection].count_documents({"_id": record_id}, limit=1)
        if not matched:
            raise NotFoundError(collection, record_id)
        logger.debug("Patched %s/%s fields=%s", collection, record_id, sorted(patch))
        return patch

    def delete(self, collection: str, record_id: str) -> None:
        check_collection(collection)
        with query_errors(f"delete {collection}"):
            self.db[collection].delete_one({"_id": record_id})

    def applications_by_company(self, company_id: str) -> List[Dict[str, Any]]:
        with query_errors("aggregate company applications"):
            docs = list(self.db[APPLICATIONS].aggregate(company_applications_pipeline(company_id)))
        return [normalize_application_row(from_mongo(d)) for d in docs]

    def active_job_postings(self, company_id: Optional[str] = None) -> List[Dict[str, Any]]:
        with query_errors("aggregate job postings"):
            docs = list(self.db[JOB_POSTINGS].aggregate(active_job_postings_pipeline(company_id)))
        return [normalize_job_posting_row(from_mongo(d)) for d in docs]

    def create_interview(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        doc = prepare_record(INTERVIEWS, record)
        with query_errors("insert interviews"):
            self.db[INTERVIEWS].insert_one(to_mongo(doc))
            if doc.get("application_id"):
                self.db[APPLICATIONS].update_one(
                    {"_id": doc["application_id"]},
                    {"$set": {
                        "status": ApplicationStatus.interview_scheduled.value,
                        "updated_at": utc_now(),
                    }},
                )
        logger.debug("Created interview %s for application %s", doc["id"], doc.get("application_id"))
        return doc

    def status(self) -> StoreStatus:
        return StoreStatus(mode=self.mode, connected=True, db_name=self.db.name)
