"""
Pydantic Schemas - Request/Response envelopes

All API request and response schemas in one file for simplicity.
Record bodies stay permissive JSON objects: the store coerces them.
"""

from pydantic import BaseModel
from typing import Any, Dict


# ============================================================
# REQUEST BODIES
# ============================================================

# Create and patch bodies: any JSON object, cleaned by the store
RecordBody = Dict[str, Any]


# ============================================================
# RESPONSES
# ============================================================

class DataResponse(BaseModel):
    data: Any


class HealthResponse(BaseModel):
    db_connected: bool
    db_mode: str
    db_name: str
