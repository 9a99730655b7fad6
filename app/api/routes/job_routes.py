"""
Job Posting Routes

GET /job_postings - Active postings with company and applications_count (?company_id=)
POST /job_postings - Create posting (status defaults to active)
PUT /job_postings/{id} - Update posting
DELETE /job_postings/{id} - Delete posting
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.api.deps import get_store
from app.models.records import JOB_POSTINGS
from app.schemas.schemas import RecordBody, DataResponse
from app.services.record_store import RecordStore

router = APIRouter(prefix="/job_postings", tags=["Jobs"])


@router.get("", response_model=DataResponse)
def list_job_postings(
    company_id: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store)
):
    """Active postings only, newest first."""
    return DataResponse(data=store.active_job_postings(company_id))


@router.post("", response_model=DataResponse, status_code=201)
def create_job_posting(body: RecordBody, store: RecordStore = Depends(get_store)):
    # created_at is always server time for postings
    body.pop("created_at", None)
    return DataResponse(data=store.create(JOB_POSTINGS, body))


@router.put("/{job_id}", response_model=DataResponse)
def update_job_posting(job_id: str, body: RecordBody, store: RecordStore = Depends(get_store)):
    return DataResponse(data=store.patch(JOB_POSTINGS, job_id, body))


@router.delete("/{job_id}", response_model=DataResponse)
def delete_job_posting(job_id: str, store: RecordStore = Depends(get_store)):
    store.delete(JOB_POSTINGS, job_id)
    return DataResponse(data="deleted")
