"""
Application Routes

GET /applications - List (?student_id=) or company view (?company_id=, joined)
POST /applications - Apply (status applied, applied_at now)
PUT /applications/{id} - Update status / eligibility
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.api.deps import get_store, stamp_updated_at
from app.models.records import APPLICATIONS
from app.schemas.schemas import RecordBody, DataResponse
from app.services.record_store import RecordStore

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.get("", response_model=DataResponse)
def list_applications(
    student_id: Optional[str] = Query(None),
    company_id: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store)
):
    """
    With company_id: applications to that company's postings, each joined
    to its job posting, student profile and profile, newest first.
    Otherwise a plain listing, optionally by student.
    """
    if company_id:
        return DataResponse(data=store.applications_by_company(company_id))
    return DataResponse(data=store.find(APPLICATIONS, {"student_id": student_id}))


@router.post("", response_model=DataResponse, status_code=201)
def create_application(body: RecordBody, store: RecordStore = Depends(get_store)):
    return DataResponse(data=store.create(APPLICATIONS, body))


@router.put("/{application_id}", response_model=DataResponse)
def update_application(application_id: str, body: RecordBody, store: RecordStore = Depends(get_store)):
    return DataResponse(data=store.patch(APPLICATIONS, application_id, stamp_updated_at(body)))
