"""
Join shapes - the two fixed aggregations both backends must reproduce.

(a) Applications by company:
    applications -> job_postings (job_id)     filtered on job company_id
                 -> student_profiles (student_id)
                 -> profiles (student_profiles.user_id)
    sorted by created_at, newest first

(b) Active job postings:
    job_postings (status active) -> companies (company_id)
                                 -> applications, reduced to applications_count
    optionally filtered on company_id, sorted by created_at, newest first

MongoDB runs the pipelines server-side; the in-memory store runs the join
functions below over its maps. Both results go through the same row
normaliser so callers see identical structure: a missing related record is
an empty object, never a dropped row.

created_at is an ISO-8601 string and is compared as a string.
"""

from collections import Counter
from copy import deepcopy
from typing import Any, Dict, List, Mapping, Optional

from app.models.records import (
    PROFILES, STUDENT_PROFILES, COMPANIES, JOB_POSTINGS, APPLICATIONS,
    JobStatus,
)
from app.services.record_store import reconcile_company

Collections = Mapping[str, Mapping[str, Dict[str, Any]]]


# ============================================================
# MONGODB PIPELINES
# ============================================================

def company_applications_pipeline(company_id: str) -> List[dict]:
    """Pipeline over `applications` for join shape (a)."""
    return [
        {"$lookup": {
            "from": JOB_POSTINGS,
            "localField": "job_id",
            "foreignField": "_id",
            "as": "job_postings",
        }},
        {"$unwind": {"path": "$job_postings", "preserveNullAndEmptyArrays": True}},
        {"$match": {"job_postings.company_id": company_id}},
        {"$lookup": {
            "from": STUDENT_PROFILES,
            "localField": "student_id",
            "foreignField": "_id",
            "as": "student_profiles",
        }},
        {"$unwind": {"path": "$student_profiles", "preserveNullAndEmptyArrays": True}},
        {"$lookup": {
            "from": PROFILES,
            "localField": "student_profiles.user_id",
            "foreignField": "_id",
            "as": "student_profiles.profiles",
        }},
        {"$unwind": {"path": "$student_profiles.profiles", "preserveNullAndEmptyArrays": True}},
        {"$sort": {"created_at": -1}},
    ]


def active_job_postings_pipeline(company_id: Optional[str] = None) -> List[dict]:
    """Pipeline over `job_postings` for join shape (b)."""
    pipeline = [
        {"$match": {"status": JobStatus.active.value}},
        {"$lookup": {
            "from": COMPANIES,
            "localField": "company_id",
            "foreignField": "_id",
            "as": "companies",
        }},
        {"$unwind": {"path": "$companies", "preserveNullAndEmptyArrays": True}},
        {"$lookup": {
            "from": APPLICATIONS,
            "localField": "_id",
            "foreignField": "job_id",
            "as": "applications",
        }},
        {"$addFields": {"applications_count": {"$size": "$applications"}}},
        {"$project": {"applications": 0}},
    ]
    if company_id:
        pipeline.append({"$match": {"company_id": company_id}})
    pipeline.append({"$sort": {"created_at": -1}})
    return pipeline


# ============================================================
# ROW NORMALISERS (shared by both backends)
# ============================================================

def _as_object(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def normalize_application_row(row: Dict[str, Any]) -> Dict[str, Any]:
    row["job_postings"] = _as_object(row.get("job_postings"))
    student = _as_object(row.get("student_profiles"))
    student["profiles"] = _as_object(student.get("profiles"))
    row["student_profiles"] = student
    return row


def normalize_job_posting_row(row: Dict[str, Any]) -> Dict[str, Any]:
    row["companies"] = reconcile_company(_as_object(row.get("companies")))
    row.pop("applications", None)
    row["applications_count"] = int(row.get("applications_count") or 0)
    return row


def newest_first(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Sort on the raw created_at string, descending. Missing values last."""
    return sorted(rows, key=lambda r: r.get("created_at") or "", reverse=True)


# ============================================================
# IN-MEMORY JOINS
# `collections` maps collection name -> {id: record}. Callers hold the
# read lock; nothing stored is returned by reference.
# ============================================================

def join_company_applications(collections: Collections, company_id: str) -> List[Dict[str, Any]]:
    jobs = collections[JOB_POSTINGS]
    students = collections[STUDENT_PROFILES]
    profiles = collections[PROFILES]

    rows = []
    for application in collections[APPLICATIONS].values():
        job = jobs.get(application.get("job_id"))
        if job is None or job.get("company_id") != company_id:
            continue

        row = deepcopy(application)
        row["job_postings"] = deepcopy(job)

        student = students.get(application.get("student_id"))
        if student is not None:
            student = deepcopy(student)
            profile = profiles.get(student.get("user_id"))
            student["profiles"] = deepcopy(profile) if profile is not None else {}
        row["student_profiles"] = student

        rows.append(normalize_application_row(row))
    return newest_first(rows)


def join_active_job_postings(collections: Collections, company_id: Optional[str] = None) -> List[Dict[str, Any]]:
    companies = collections[COMPANIES]
    counts = Counter(a.get("job_id") for a in collections[APPLICATIONS].values())

    rows = []
    for job in collections[JOB_POSTINGS].values():
        if job.get("status") != JobStatus.active.value:
            continue
        if company_id and job.get("company_id") != company_id:
            continue

        row = deepcopy(job)
        company = companies.get(job.get("company_id"))
        row["companies"] = deepcopy(company) if company is not None else {}
        row["applications_count"] = counts.get(job.get("id"), 0)
        rows.append(normalize_job_posting_row(row))
    return newest_first(rows)
