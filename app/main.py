"""
Placement Portal API - Main Application

FastAPI backend over a single record store:
- MongoDB when reachable at startup
- In-memory fallback otherwise (chosen once, never re-probed)

Run: uvicorn app.main:app --reload --port 8081
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import api_router
from app.core.config import get_settings
from app.core.logging_config import setup_logging
from app.services.store_selector import select_store

settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Placement Portal",
    description="""
    Campus placement portal backend.

    ## Collections
    profiles, student_profiles, companies, job_postings, resumes,
    applications, interviews

    ## Storage
    - MongoDB: normal operation
    - In-memory: development fallback when MongoDB is unreachable at startup
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "Content-Type", "Authorization"],
    expose_headers=["Content-Length"],
    max_age=12 * 60 * 60,
)

register_error_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api")


# Startup event
@app.on_event("startup")
def startup_event():
    """Choose the storage backend once for the process."""
    if getattr(app.state, "store", None) is None:
        app.state.store = select_store(settings)
    logger.info("Record store mode: %s", app.state.store.mode)
