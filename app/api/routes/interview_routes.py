"""
Interview Routes

POST /interviews - Schedule an interview; its application moves to interview_scheduled
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_store
from app.schemas.schemas import RecordBody, DataResponse
from app.services.record_store import RecordStore

router = APIRouter(prefix="/interviews", tags=["Interviews"])


@router.post("", response_model=DataResponse, status_code=201)
def create_interview(body: RecordBody, store: RecordStore = Depends(get_store)):
    body.pop("created_at", None)
    return DataResponse(data=store.create_interview(body))
