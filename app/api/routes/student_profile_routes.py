"""
Student Profile Routes

GET /student_profiles - List (?user_id=)
POST /student_profiles - Create
PUT /student_profiles/{id} - Update
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.api.deps import get_store, stamp_updated_at
from app.models.records import STUDENT_PROFILES
from app.schemas.schemas import RecordBody, DataResponse
from app.services.record_store import RecordStore

router = APIRouter(prefix="/student_profiles", tags=["Student Profiles"])


@router.get("", response_model=DataResponse)
def list_student_profiles(
    user_id: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store)
):
    return DataResponse(data=store.find(STUDENT_PROFILES, {"user_id": user_id}))


@router.post("", response_model=DataResponse, status_code=201)
def create_student_profile(body: RecordBody, store: RecordStore = Depends(get_store)):
    # both timestamps are server time on create
    body.pop("created_at", None)
    body.pop("updated_at", None)
    return DataResponse(data=store.create(STUDENT_PROFILES, body))


@router.put("/{student_profile_id}", response_model=DataResponse)
def update_student_profile(
    student_profile_id: str,
    body: RecordBody,
    store: RecordStore = Depends(get_store)
):
    return DataResponse(data=store.patch(STUDENT_PROFILES, student_profile_id, stamp_updated_at(body)))
