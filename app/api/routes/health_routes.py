"""
Health Routes

GET /health - Which backend is active and the database name
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_store
from app.schemas.schemas import HealthResponse
from app.services.record_store import RecordStore

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
def health(store: RecordStore = Depends(get_store)):
    """Report live vs fallback mode."""
    status = store.status()
    return HealthResponse(
        db_connected=status.connected,
        db_mode=status.mode,
        db_name=status.db_name
    )
