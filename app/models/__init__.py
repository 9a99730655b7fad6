"""
Models module - Pydantic models for the stored records.

Difference from schemas:
- Models: Internal record structures the store coerces data through
- Schemas: API contract (what client sends/receives)
"""

from app.models.records import (
    COLLECTIONS,
    PROFILES,
    STUDENT_PROFILES,
    COMPANIES,
    JOB_POSTINGS,
    RESUMES,
    APPLICATIONS,
    INTERVIEWS,
)

__all__ = [
    "COLLECTIONS",
    "PROFILES",
    "STUDENT_PROFILES",
    "COMPANIES",
    "JOB_POSTINGS",
    "RESUMES",
    "APPLICATIONS",
    "INTERVIEWS",
]
