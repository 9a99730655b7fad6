"""
Company Routes

GET /companies - List companies (?recruiter_id=)
POST /companies - Create company
PUT /companies/{id} - Update company (admin approval sets approved and verified together)
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.api.deps import get_store, stamp_updated_at
from app.models.records import COMPANIES
from app.schemas.schemas import RecordBody, DataResponse
from app.services.record_store import RecordStore

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.get("", response_model=DataResponse)
def list_companies(
    recruiter_id: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store)
):
    return DataResponse(data=store.find(COMPANIES, {"recruiter_id": recruiter_id}))


@router.post("", response_model=DataResponse, status_code=201)
def create_company(body: RecordBody, store: RecordStore = Depends(get_store)):
    body.pop("created_at", None)
    return DataResponse(data=store.create(COMPANIES, body))


@router.put("/{company_id}", response_model=DataResponse)
def update_company(company_id: str, body: RecordBody, store: RecordStore = Depends(get_store)):
    """Patch a company. Returns the fields actually applied."""
    return DataResponse(data=store.patch(COMPANIES, company_id, stamp_updated_at(body)))
