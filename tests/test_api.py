"""
Tests for the HTTP routes with the in-memory store injected.
"""


def test_health_reports_fallback(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {
        "db_connected": False,
        "db_mode": "fallback",
        "db_name": "placement_portal_test",
    }


def test_profile_create_list_update(client):
    created = client.post("/api/profiles", json={"id": "u1", "email": "a@example.edu", "role": "student"})
    assert created.status_code == 201

    listed = client.get("/api/profiles", params={"id": "eq.u1"})
    assert [p["id"] for p in listed.json()["data"]] == ["u1"]

    updated = client.put("/api/profiles/u1", json={"full_name": "Asha Rao", "shoe_size": 7})
    assert updated.status_code == 200
    assert updated.json()["data"]["full_name"] == "Asha Rao"
    assert "shoe_size" not in updated.json()["data"]
    assert "updated_at" in updated.json()["data"]


def test_update_missing_record_is_404(client):
    response = client.put("/api/applications/missing", json={"status": "rejected"})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "not_found"


def test_company_approval_via_api(client):
    client.post("/api/companies", json={"id": "c1", "name": "Acme", "recruiter_id": "r1"})

    client.put("/api/companies/c1", json={"verified": True})

    company = client.get("/api/companies", params={"recruiter_id": "r1"}).json()["data"][0]
    assert company["approved"] is True
    assert company["verified"] is True


def test_job_postings_listing_is_joined(client, seeded_store):
    response = client.get("/api/job_postings", params={"company_id": "c1"})

    rows = response.json()["data"]
    assert [r["id"] for r in rows] == ["j1"]
    assert rows[0]["applications_count"] == 1
    assert rows[0]["companies"]["id"] == "c1"


def test_job_posting_create_and_delete(client):
    created = client.post("/api/job_postings", json={"company_id": "c1", "title": "Analyst"}).json()["data"]
    assert created["status"] == "active"

    assert client.delete(f"/api/job_postings/{created['id']}").json() == {"data": "deleted"}
    assert client.delete(f"/api/job_postings/{created['id']}").status_code == 200
    assert client.get("/api/job_postings").json()["data"] == []


def test_applications_by_company_via_api(client, seeded_store):
    rows = client.get("/api/applications", params={"company_id": "c1"}).json()["data"]

    assert len(rows) == 1
    assert rows[0]["job_postings"]["id"] == "j1"
    assert rows[0]["student_profiles"]["profiles"]["id"] == "u1"


def test_applications_by_student_via_api(client, seeded_store):
    rows = client.get("/api/applications", params={"student_id": "sp1"}).json()["data"]
    assert [r["id"] for r in rows] == ["a1"]


def test_interview_marks_application(client, seeded_store):
    response = client.post("/api/interviews", json={
        "application_id": "a1", "scheduled_at": "2025-01-01T10:00:00Z", "mode": "onsite",
    })

    assert response.status_code == 201
    assert response.json()["data"]["id"]
    assert seeded_store.find("applications", {"id": "a1"})[0]["status"] == "interview_scheduled"


def test_resume_upload_stores_url_only(client, seeded_store):
    response = client.post(
        "/api/resumes/upload",
        data={"student_id": "sp1"},
        files={"file": ("cv.pdf", b"%PDF-1.4 fake", "application/pdf")},
    )

    assert response.status_code == 201
    resume = response.json()["data"]
    assert resume["file_url"] == f"/uploads/{resume['id']}.pdf"
    assert [r["id"] for r in client.get("/api/resumes", params={"student_id": "sp1"}).json()["data"]] == [resume["id"]]


def test_resume_upload_requires_student(client):
    response = client.post("/api/resumes/upload", files={"file": ("cv.pdf", b"x", "application/pdf")})
    assert response.status_code == 400


def test_student_profile_routes(client):
    client.post("/api/student_profiles", json={"id": "sp1", "user_id": "u1", "cgpa": 8.1})

    client.put("/api/student_profiles/sp1", json={"branch": "ECE"})

    rows = client.get("/api/student_profiles", params={"user_id": "u1"}).json()["data"]
    assert rows[0]["branch"] == "ECE"
    assert rows[0]["cgpa"] == 8.1


def test_invalid_record_is_422(client):
    response = client.post("/api/student_profiles", json={"user_id": "u1", "graduation_year": "soon"})
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "invalid_record"


def test_profile_id_prefix_handling(client):
    client.post("/api/profiles", json={"id": "u1", "role": "student"})
    client.post("/api/profiles", json={"id": "eq.u2", "role": "student"})
    client.post("/api/profiles", json={"id": "u3", "role": "recruiter"})

    bare_prefix = client.get("/api/profiles", params={"id": "eq."}).json()["data"]
    assert bare_prefix == []

    by_user_id = client.get("/api/profiles", params={"user_id": "eq.u2"}).json()["data"]
    assert [p["id"] for p in by_user_id] == ["eq.u2"]

    by_id = client.get("/api/profiles", params={"id": "eq.u3"}).json()["data"]
    assert [p["id"] for p in by_id] == ["u3"]


def test_create_ignores_client_timestamps(client):
    stale = "2001-01-01T00:00:00Z"
    company = client.post("/api/companies", json={"id": "c9", "name": "Acme", "created_at": stale})
    student = client.post("/api/student_profiles",
                          json={"id": "sp9", "user_id": "u9", "created_at": stale, "updated_at": stale})

    assert company.json()["data"]["created_at"] != stale
    assert student.json()["data"]["created_at"] != stale
    assert student.json()["data"]["updated_at"] == student.json()["data"]["created_at"]
