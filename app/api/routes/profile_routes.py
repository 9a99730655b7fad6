"""
Profile Routes

GET /profiles - List profiles (?id=<id> or ?id=eq.<id>, ?user_id=<id>)
POST /profiles - Create profile
PUT /profiles/{id} - Update profile
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.api.deps import get_store, stamp_updated_at
from app.models.records import PROFILES
from app.schemas.schemas import RecordBody, DataResponse
from app.services.record_store import RecordStore

router = APIRouter(prefix="/profiles", tags=["Profiles"])


@router.get("", response_model=DataResponse)
def list_profiles(
    id: Optional[str] = Query(None),
    user_id: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store)
):
    """List profiles. `id` also accepts the `eq.<id>` form; `user_id` is the profile id."""
    if id:
        profile_id = id[3:] if len(id) > 3 and id.startswith("eq.") else id
    else:
        profile_id = user_id
    return DataResponse(data=store.find(PROFILES, {"id": profile_id}))


@router.post("", response_model=DataResponse, status_code=201)
def create_profile(body: RecordBody, store: RecordStore = Depends(get_store)):
    return DataResponse(data=store.create(PROFILES, body))


@router.put("/{profile_id}", response_model=DataResponse)
def update_profile(profile_id: str, body: RecordBody, store: RecordStore = Depends(get_store)):
    return DataResponse(data=store.patch(PROFILES, profile_id, stamp_updated_at(body)))
