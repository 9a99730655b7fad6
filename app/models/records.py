"""
Record models - the seven entity types the store keeps.

Each collection has:
- a record model (what `create` coerces incoming data through)
- an update model (the fixed set of fields a patch may touch)
- a set of filter keys (the equality predicates `find` accepts)

Relationships are by identifier only; nothing here holds another record.
"""

from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Type

from pydantic import BaseModel, ConfigDict


# ============================================================
# COLLECTION NAMES
# ============================================================

PROFILES = "profiles"
STUDENT_PROFILES = "student_profiles"
COMPANIES = "companies"
JOB_POSTINGS = "job_postings"
RESUMES = "resumes"
APPLICATIONS = "applications"
INTERVIEWS = "interviews"

COLLECTIONS = (
    PROFILES,
    STUDENT_PROFILES,
    COMPANIES,
    JOB_POSTINGS,
    RESUMES,
    APPLICATIONS,
    INTERVIEWS,
)


# ============================================================
# ENUMS
# ============================================================

class JobStatus(str, Enum):
    active = "active"
    closed = "closed"


class ApplicationStatus(str, Enum):
    applied = "applied"
    interview_scheduled = "interview_scheduled"


# ============================================================
# RECORDS
# Role and status fields stay plain strings: other values are allowed.
# ============================================================

class Record(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None


class Profile(Record):
    email: Optional[str] = None
    full_name: Optional[str] = None
    role: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class StudentProfile(Record):
    user_id: Optional[str] = None
    roll_number: Optional[str] = None
    cgpa: Optional[float] = None
    branch: Optional[str] = None
    graduation_year: Optional[int] = None
    skills: Any = None
    projects: Any = None
    internships: Any = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Company(Record):
    name: Optional[str] = None
    email: Optional[str] = None
    recruiter_id: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None
    industry: Optional[str] = None
    approved: bool = False
    verified: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class JobPosting(Record):
    company_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    eligibility_criteria: Any = None
    status: Optional[str] = None
    created_at: Optional[str] = None


class Resume(Record):
    student_id: Optional[str] = None
    file_url: Optional[str] = None
    created_at: Optional[str] = None


class Application(Record):
    job_id: Optional[str] = None
    student_id: Optional[str] = None
    status: Optional[str] = None
    resume_id: Optional[str] = None
    eligibility_status: Optional[str] = None
    eligibility_notes: Optional[str] = None
    applied_at: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class InterviewRecord(Record):
    """Loosely typed: every key the caller sends is kept."""
    model_config = ConfigDict(extra="allow")

    application_id: Optional[str] = None
    scheduled_at: Optional[str] = None
    location: Optional[str] = None
    mode: Optional[str] = None
    created_at: Optional[str] = None


# ============================================================
# UPDATES
# The only fields a patch may set, per collection.
# ============================================================

class RecordUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ProfileUpdate(RecordUpdate):
    email: Optional[str] = None
    full_name: Optional[str] = None
    role: Optional[str] = None
    updated_at: Optional[str] = None


class StudentProfileUpdate(RecordUpdate):
    roll_number: Optional[str] = None
    cgpa: Optional[float] = None
    branch: Optional[str] = None
    graduation_year: Optional[int] = None
    skills: Any = None
    projects: Any = None
    internships: Any = None
    updated_at: Optional[str] = None


class CompanyUpdate(RecordUpdate):
    name: Optional[str] = None
    email: Optional[str] = None
    recruiter_id: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None
    industry: Optional[str] = None
    approved: Optional[bool] = None
    verified: Optional[bool] = None
    updated_at: Optional[str] = None


class JobPostingUpdate(RecordUpdate):
    title: Optional[str] = None
    description: Optional[str] = None
    eligibility_criteria: Any = None
    status: Optional[str] = None


class ResumeUpdate(RecordUpdate):
    file_url: Optional[str] = None


class ApplicationUpdate(RecordUpdate):
    status: Optional[str] = None
    resume_id: Optional[str] = None
    eligibility_status: Optional[str] = None
    eligibility_notes: Optional[str] = None
    applied_at: Optional[str] = None
    updated_at: Optional[str] = None


class InterviewUpdate(RecordUpdate):
    scheduled_at: Optional[str] = None
    location: Optional[str] = None
    mode: Optional[str] = None


# ============================================================
# REGISTRIES (keyed by collection name)
# ============================================================

RECORD_MODELS: Dict[str, Type[Record]] = {
    PROFILES: Profile,
    STUDENT_PROFILES: StudentProfile,
    COMPANIES: Company,
    JOB_POSTINGS: JobPosting,
    RESUMES: Resume,
    APPLICATIONS: Application,
    INTERVIEWS: InterviewRecord,
}

UPDATE_MODELS: Dict[str, Type[RecordUpdate]] = {
    PROFILES: ProfileUpdate,
    STUDENT_PROFILES: StudentProfileUpdate,
    COMPANIES: CompanyUpdate,
    JOB_POSTINGS: JobPostingUpdate,
    RESUMES: ResumeUpdate,
    APPLICATIONS: ApplicationUpdate,
    INTERVIEWS: InterviewUpdate,
}

FILTER_KEYS: Dict[str, FrozenSet[str]] = {
    PROFILES: frozenset({"id"}),
    STUDENT_PROFILES: frozenset({"id", "user_id"}),
    COMPANIES: frozenset({"id", "recruiter_id"}),
    JOB_POSTINGS: frozenset({"id", "company_id", "status"}),
    RESUMES: frozenset({"id", "student_id"}),
    APPLICATIONS: frozenset({"id", "student_id", "job_id"}),
    INTERVIEWS: frozenset({"id", "application_id"}),
}

# Collections whose records carry an updated_at timestamp
TIMESTAMPED = frozenset({PROFILES, STUDENT_PROFILES, COMPANIES, APPLICATIONS})
