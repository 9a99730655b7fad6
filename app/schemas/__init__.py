"""
Schemas module - Request/Response schemas for API endpoints.

Difference from models:
- Models: Stored record structures (app/models)
- Schemas: API contract (what client sends/receives)
"""

from app.schemas.schemas import RecordBody, DataResponse, HealthResponse

__all__ = ["RecordBody", "DataResponse", "HealthResponse"]
