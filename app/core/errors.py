"""
Error hierarchy for the record store.

Every error carries a stable `code` and the HTTP status the API layer maps it
to. Nothing in the store retries: an error is raised once and surfaces as-is.
"""

from typing import Optional


class StoreError(Exception):
    """Base exception for all record store failures."""

    code = "store_error"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": {"code": self.code, "message": self.message}}


class NotFoundError(StoreError):
    """Patch targeted an id that does not exist in the collection."""

    code = "not_found"
    http_status = 404

    def __init__(self, collection: str, record_id: str):
        super().__init__(f"{collection} record '{record_id}' not found")
        self.collection = collection
        self.record_id = record_id


class BackendUnavailableError(StoreError):
    """Live database could not be reached at startup."""

    code = "backend_unavailable"
    http_status = 503

    def __init__(self, message: str, uri: Optional[str] = None):
        super().__init__(message)
        self.uri = uri


class QueryFailureError(StoreError):
    """A live database operation failed. Wraps the driver error message unchanged."""

    code = "query_failure"
    http_status = 500

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation


class InvalidQueryError(StoreError):
    """Unknown collection or a filter key the collection does not support."""

    code = "invalid_query"
    http_status = 400


class InvalidRecordError(StoreError):
    """A record could not be coerced to its entity type."""

    code = "invalid_record"
    http_status = 422
