"""
In-memory Record Store - development fallback when MongoDB is unreachable.

Each collection is a dict of id -> record. A single ReadWriteLock covers all
seven collections: every find/join scans under the shared lock, every
create/patch/delete/interview runs under the exclusive lock. A scan therefore
sees a mutation either entirely or not at all.

Records go in and come out as deep copies.
Duplicate ids on create overwrite the existing record.
Iteration order of an unfiltered find is unspecified.
"""

import logging
from copy import deepcopy
from typing import Any, Dict, List, Mapping, Optional

from app.core.errors import NotFoundError
from app.db.rwlock import ReadWriteLock
from app.models.records import COLLECTIONS, APPLICATIONS, INTERVIEWS, ApplicationStatus
from app.services.aggregations import join_company_applications, join_active_job_postings
from app.services.record_store import (
    RecordStore, StoreStatus, FALLBACK,
    check_collection, clean_filter, clean_patch, prepare_record, reconcile, utc_now,
)

logger = logging.getLogger(__name__)


class InMemoryRecordStore(RecordStore):
    """
    Lock-guarded maps implementing the full store contract.
    Not for production load: all writes are serialized.
    """

    mode = FALLBACK

    def __init__(self, db_name: str):
        self.db_name = db_name
        self._lock = ReadWriteLock()
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {
            name: {} for name in COLLECTIONS
        }

    def find(self, collection: str, filter: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        predicates = clean_filter(collection, filter)
        with self._lock.read_locked():
            records = self._collections[collection]
            if set(predicates) == {"id"}:
                # direct key lookup
                hit = records.get(predicates["id"])
                out = [deepcopy(hit)] if hit is not None else []
            else:
                out = [
                    deepcopy(r) for r in records.values()
                    if all(r.get(k) == v for k, v in predicates.items())
                ]
        return reconcile(collection, out)

    def create(self, collection: str, record: Mapping[str, Any]) -> Dict[str, Any]:
        if collection == INTERVIEWS:
            return self.create_interview(record)
        doc = prepare_record(collection, record)
        with self._lock.write_locked():
            self._collections[collection][doc["id"]] = deepcopy(doc)
        logger.debug("Created %s/%s", collection, doc["id"])
        return doc

    def patch(self, collection: str, record_id: str, fieldset: Mapping[str, Any]) -> Dict[str, Any]:
        patch = clean_patch(collection, fieldset)
        with self._lock.write_locked():
            existing = self._collections[collection].get(record_id)
            if existing is None:
                raise NotFoundError(collection, record_id)
            existing.update(deepcopy(patch))
        logger.debug("Patched %s/%s fields=%s", collection, record_id, sorted(patch))
        return patch

    def delete(self, collection: str, record_id: str) -> None:
        check_collection(collection)
        with self._lock.write_locked():
            removed = self._collections[collection].pop(record_id, None)
        if removed is not None:
            logger.debug("Deleted %s/%s", collection, record_id)

    def applications_by_company(self, company_id: str) -> List[Dict[str, Any]]:
        with self._lock.read_locked():
            return join_company_applications(self._collections, company_id)

    def active_job_postings(self, company_id: Optional[str] = None) -> List[Dict[str, Any]]:
        with self._lock.read_locked():
            return join_active_job_postings(self._collections, company_id)

    def create_interview(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        doc = prepare_record(INTERVIEWS, record)
        application_id = doc.get("application_id")
        with self._lock.write_locked():
            self._collections[INTERVIEWS][doc["id"]] = deepcopy(doc)
            application = self._collections[APPLICATIONS].get(application_id) if application_id else None
            if application is not None:
                application["status"] = ApplicationStatus.interview_scheduled.value
                application["updated_at"] = utc_now()
        logger.debug("Created interview %s for application %s", doc["id"], application_id)
        return doc

    def status(self) -> StoreStatus:
        return StoreStatus(mode=self.mode, connected=False, db_name=self.db_name)
