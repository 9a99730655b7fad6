"""
Resume Routes

GET /resumes - List (?student_id=)
POST /resumes/upload - Register an uploaded resume

The uploaded bytes are not persisted. The record only references a URL.
"""

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from typing import Optional

from app.api.deps import get_store
from app.models.records import RESUMES
from app.schemas.schemas import DataResponse
from app.services.record_store import RecordStore, new_id

router = APIRouter(prefix="/resumes", tags=["Resumes"])


@router.get("", response_model=DataResponse)
def list_resumes(
    student_id: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store)
):
    return DataResponse(data=store.find(RESUMES, {"student_id": student_id}))


@router.post("/upload", response_model=DataResponse, status_code=201)
def upload_resume(
    file: UploadFile = File(...),
    student_id: str = Form(""),
    store: RecordStore = Depends(get_store)
):
    """Accept a multipart upload and store a resume record pointing at it."""
    if not student_id:
        raise HTTPException(status_code=400, detail="student_id required")
    if not file.filename:
        raise HTTPException(status_code=400, detail="file required")

    resume_id = new_id()
    record = {
        "id": resume_id,
        "student_id": student_id,
        "file_url": f"/uploads/{resume_id}.pdf",
    }
    return DataResponse(data=store.create(RESUMES, record))
