"""
Tests for the two join shapes: in-memory joins and the MongoDB pipelines.
"""
from app.services.aggregations import (
    company_applications_pipeline,
    active_job_postings_pipeline,
    normalize_application_row,
    normalize_job_posting_row,
)


# ============================================================
# APPLICATIONS BY COMPANY
# ============================================================

def test_applications_by_company_joins_job_and_student(store):
    store.create("companies", {"id": "c1", "name": "Acme", "approved": True, "verified": True})
    store.create("job_postings", {"id": "j1", "company_id": "c1", "status": "active"})
    store.create("student_profiles", {"id": "sp1", "user_id": "u1"})
    store.create("applications", {
        "id": "a1", "job_id": "j1", "student_id": "sp1", "created_at": "2025-01-01T00:00:00Z",
    })

    rows = store.applications_by_company("c1")

    assert len(rows) == 1
    row = rows[0]
    assert row["id"] == "a1"
    assert row["job_postings"]["id"] == "j1"
    assert row["student_profiles"]["id"] == "sp1"
    # no profile u1 exists
    assert row["student_profiles"]["profiles"] == {}


def test_applications_by_company_includes_profile(seeded_store):
    row = seeded_store.applications_by_company("c1")[0]
    assert row["student_profiles"]["profiles"]["full_name"] == "Asha Rao"


def test_applications_by_company_excludes_other_companies(seeded_store):
    seeded_store.create("job_postings", {"id": "j2", "company_id": "c2", "status": "active"})
    seeded_store.create("applications", {"id": "a2", "job_id": "j2", "student_id": "sp1"})
    # an application whose posting no longer exists cannot belong to any company
    seeded_store.create("applications", {"id": "a3", "job_id": "deleted-job", "student_id": "sp1"})

    assert [r["id"] for r in seeded_store.applications_by_company("c1")] == ["a1"]
    assert [r["id"] for r in seeded_store.applications_by_company("c2")] == ["a2"]


def test_applications_by_company_keeps_rows_without_student(seeded_store):
    seeded_store.create("applications", {
        "id": "a2", "job_id": "j1", "student_id": "ghost", "created_at": "2025-01-03T00:00:00Z",
    })

    rows = seeded_store.applications_by_company("c1")

    assert [r["id"] for r in rows] == ["a2", "a1"]
    assert rows[0]["student_profiles"] == {"profiles": {}}


def test_applications_by_company_sorts_newest_first_by_string(store):
    store.create("job_postings", {"id": "j1", "company_id": "c1"})
    for app_id, created in [
        ("old", "2024-12-31T23:59:59Z"),
        ("new", "2025-02-01T08:00:00Z"),
        ("mid", "2025-01-15T12:00:00Z"),
    ]:
        store.create("applications", {"id": app_id, "job_id": "j1", "created_at": created})

    assert [r["id"] for r in store.applications_by_company("c1")] == ["new", "mid", "old"]


# ============================================================
# ACTIVE JOB POSTINGS
# ============================================================

def test_active_job_postings_counts_applications(seeded_store):
    seeded_store.create("student_profiles", {"id": "sp2", "user_id": "u2"})
    seeded_store.create("applications", {"id": "a2", "job_id": "j1", "student_id": "sp2"})

    rows = seeded_store.active_job_postings()

    assert len(rows) == 1
    assert rows[0]["id"] == "j1"
    assert rows[0]["applications_count"] == 2
    assert rows[0]["companies"]["name"] == "Acme"
    assert "applications" not in rows[0]


def test_active_job_postings_skips_closed(seeded_store):
    seeded_store.create("job_postings", {"id": "j2", "company_id": "c1", "status": "closed"})
    assert [r["id"] for r in seeded_store.active_job_postings()] == ["j1"]


def test_active_job_postings_filters_by_company(seeded_store):
    seeded_store.create("job_postings", {
        "id": "j2", "company_id": "c2", "status": "active", "created_at": "2025-03-01T00:00:00Z",
    })

    assert [r["id"] for r in seeded_store.active_job_postings()] == ["j2", "j1"]
    assert [r["id"] for r in seeded_store.active_job_postings("c2")] == ["j2"]
    assert seeded_store.active_job_postings("c3") == []


def test_active_job_postings_missing_company_is_empty_object(seeded_store):
    seeded_store.create("job_postings", {"id": "j2", "company_id": "gone", "status": "active"})

    row = next(r for r in seeded_store.active_job_postings() if r["id"] == "j2")

    assert row["companies"] == {}
    assert row["applications_count"] == 0


def test_active_job_postings_reconciles_company_flags(store):
    store.create("companies", {"id": "c1", "name": "Acme"})
    store._collections["companies"]["c1"].update({"approved": True, "verified": False})
    store.create("job_postings", {"id": "j1", "company_id": "c1"})

    assert store.active_job_postings()[0]["companies"]["verified"] is True


# ============================================================
# PIPELINES AND NORMALISERS
# ============================================================

def test_company_applications_pipeline_shape():
    pipeline = company_applications_pipeline("c1")

    stages = [next(iter(stage)) for stage in pipeline]
    assert stages == ["$lookup", "$unwind", "$match", "$lookup", "$unwind", "$lookup", "$unwind", "$sort"]
    assert pipeline[2] == {"$match": {"job_postings.company_id": "c1"}}
    assert pipeline[5]["$lookup"]["localField"] == "student_profiles.user_id"
    assert pipeline[-1] == {"$sort": {"created_at": -1}}


def test_active_job_postings_pipeline_company_filter_is_optional():
    unfiltered = active_job_postings_pipeline()
    filtered = active_job_postings_pipeline("c1")

    assert unfiltered[0] == {"$match": {"status": "active"}}
    assert {"$project": {"applications": 0}} in unfiltered
    assert {"$match": {"company_id": "c1"}} not in unfiltered
    assert filtered[-2] == {"$match": {"company_id": "c1"}}
    assert filtered[-1] == {"$sort": {"created_at": -1}}


def test_normalize_application_row_fills_missing_objects():
    row = normalize_application_row({"id": "a1"})
    assert row == {"id": "a1", "job_postings": {}, "student_profiles": {"profiles": {}}}


def test_normalize_job_posting_row_drops_raw_applications():
    row = normalize_job_posting_row({"id": "j1", "applications": [{"id": "a1"}], "applications_count": 1})
    assert row == {"id": "j1", "companies": {}, "applications_count": 1}
