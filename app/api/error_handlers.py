"""
Error Handlers - map store errors onto HTTP responses.

StoreError subclasses carry their own http_status and response envelope.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.errors import StoreError, NotFoundError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register global error handlers on the FastAPI app."""

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        if isinstance(exc, NotFoundError):
            logger.info("%s on %s", exc.message, request.url.path)
        elif exc.http_status >= 500:
            logger.error("StoreError on %s: %s", request.url.path, exc.message)
        else:
            logger.warning("StoreError on %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())
