"""
Record Store - the one contract every caller uses.

Two implementations exist:
1. MongoRecordStore     - live MongoDB (app/services/mongo_store.py)
2. InMemoryRecordStore  - lock-guarded maps (app/services/memory_store.py)

The backend is chosen once at startup (app/services/store_selector.py) and the
resulting store is handed to every consumer. Callers never branch on backend.

Everything that must behave identically on both backends lives here:
filter checking, patch cleaning, create defaults and company approval sync.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ValidationError

from app.core.errors import InvalidQueryError, InvalidRecordError
from app.models.records import (
    COLLECTIONS, COMPANIES, JOB_POSTINGS, APPLICATIONS,
    RECORD_MODELS, UPDATE_MODELS, FILTER_KEYS, TIMESTAMPED,
    JobStatus, ApplicationStatus,
)

logger = logging.getLogger(__name__)

LIVE = "live"
FALLBACK = "fallback"


class StoreStatus(BaseModel):
    """Which backend is active and where it points."""
    mode: str
    connected: bool
    db_name: str


# ============================================================
# SHARED NORMALISATION
# ============================================================

def utc_now() -> str:
    """ISO-8601 UTC timestamp. Lexicographic order matches time order."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def new_id() -> str:
    return str(uuid.uuid4())


def check_collection(collection: str) -> str:
    if collection not in COLLECTIONS:
        raise InvalidQueryError(f"unknown collection '{collection}'")
    return collection


def clean_filter(collection: str, filter: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Keep the equality predicates the collection supports.

    Empty values mean "no filter on that key". Unsupported keys raise
    InvalidQueryError.
    """
    check_collection(collection)
    cleaned = {}
    for key, value in (filter or {}).items():
        if value is None or value == "":
            continue
        if key not in FILTER_KEYS[collection]:
            raise InvalidQueryError(f"cannot filter {collection} by '{key}'")
        cleaned[key] = value
    return cleaned


def clean_patch(collection: str, fieldset: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Reduce a patch to the fields the entity recognises.

    Unknown keys, None values and values of the wrong type are dropped, never
    rejected. Company approval flags are synced here.
    """
    check_collection(collection)
    model = UPDATE_MODELS[collection]
    candidate = {
        k: v for k, v in fieldset.items()
        if k in model.model_fields and v is not None
    }
    try:
        update = model.model_validate(candidate)
    except ValidationError as e:
        bad = {err["loc"][0] for err in e.errors() if err["loc"]}
        logger.debug("Dropping malformed %s patch fields: %s", collection, sorted(bad))
        update = model.model_validate({k: v for k, v in candidate.items() if k not in bad})

    patch = update.model_dump(exclude_unset=True)
    dropped = set(fieldset) - set(patch)
    if dropped:
        logger.debug("Ignored %s patch keys: %s", collection, sorted(dropped))

    if collection == COMPANIES:
        if "verified" in patch:
            patch["approved"] = patch["verified"]
        elif "approved" in patch:
            patch["verified"] = patch["approved"]
    return patch


def prepare_record(collection: str, record: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Coerce an incoming record to its entity type and fill server defaults.

    Defaults: id, created_at, updated_at (timestamped entities), job status
    "active", application status "applied" and applied_at.
    """
    check_collection(collection)
    try:
        doc = RECORD_MODELS[collection].model_validate(dict(record)).model_dump(exclude_none=True)
    except ValidationError as e:
        raise InvalidRecordError(f"invalid {collection} record: {e}") from e

    now = utc_now()
    if not doc.get("id"):
        doc["id"] = new_id()

    if collection == JOB_POSTINGS and not doc.get("status"):
        doc["status"] = JobStatus.active.value
    if collection == APPLICATIONS:
        if not doc.get("status"):
            doc["status"] = ApplicationStatus.applied.value
        if not doc.get("applied_at"):
            doc["applied_at"] = now
        if not doc.get("created_at"):
            doc["created_at"] = doc["applied_at"]
    if collection == COMPANIES:
        doc["approved"] = doc["verified"] = bool(doc["approved"] or doc["verified"])

    if not doc.get("created_at"):
        doc["created_at"] = now
    if collection in TIMESTAMPED and not doc.get("updated_at"):
        doc["updated_at"] = doc["created_at"]
    return doc


def reconcile_company(company: Dict[str, Any]) -> Dict[str, Any]:
    """Records from before `verified` existed: approved implies verified."""
    if company.get("approved") and not company.get("verified"):
        company["verified"] = True
    return company


def reconcile(collection: str, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Read-side fixups applied by every backend before returning records."""
    if collection == COMPANIES:
        for record in records:
            reconcile_company(record)
    return records


# ============================================================
# CONTRACT
# ============================================================

class RecordStore(ABC):
    """
    Backend-agnostic store.

    Usage:
        store = select_store(settings)
        store.create("companies", {"name": "Acme"})
        store.find("companies", {"recruiter_id": "u1"})
    """

    mode: str = ""

    @abstractmethod
    def find(self, collection: str, filter: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """Records matching every equality predicate. Empty list if none match."""

    @abstractmethod
    def create(self, collection: str, record: Mapping[str, Any]) -> Dict[str, Any]:
        """Insert unconditionally. Returns the stored record (defaults filled)."""

    @abstractmethod
    def patch(self, collection: str, record_id: str, fieldset: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Merge the recognised fields of `fieldset` into record `record_id`.
        Returns the subset that was applied. Raises NotFoundError.
        """

    @abstractmethod
    def delete(self, collection: str, record_id: str) -> None:
        """Remove the record if present. Deleting a missing id is not an error."""

    @abstractmethod
    def applications_by_company(self, company_id: str) -> List[Dict[str, Any]]:
        """Applications for a company's postings joined to job, student and profile."""

    @abstractmethod
    def active_job_postings(self, company_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """Active postings joined to their company with an applications_count."""

    @abstractmethod
    def create_interview(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        """Store an interview and mark its application interview_scheduled."""

    @abstractmethod
    def status(self) -> StoreStatus:
        """Active backend kind, connection flag and database name."""
