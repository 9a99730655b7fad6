"""
API dependencies.
"""

from fastapi import Request

from app.services.record_store import RecordStore, utc_now


def get_store(request: Request) -> RecordStore:
    """
    Dependency - the store selected at startup.

    Usage:
        @router.get("/things")
        def list_things(store: RecordStore = Depends(get_store)):
            ...
    """
    return request.app.state.store


def stamp_updated_at(body: dict) -> dict:
    """Callers stamp updated_at before patching; keep a client-sent value."""
    body.setdefault("updated_at", utc_now())
    return body
