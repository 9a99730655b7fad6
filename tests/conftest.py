"""
Pytest configuration and shared fixtures.
"""
import os

import pytest
from fastapi.testclient import TestClient

# Point any accidental connection attempt at a closed port
os.environ.setdefault("MONGO_URI", "mongodb://127.0.0.1:1")
os.environ.setdefault("MONGO_CONNECT_TIMEOUT_SECONDS", "0.2")

from app.api.deps import get_store
from app.main import app
from app.services.memory_store import InMemoryRecordStore


@pytest.fixture
def store():
    """Fresh in-memory store per test."""
    return InMemoryRecordStore(db_name="placement_portal_test")


@pytest.fixture
def seeded_store(store):
    """
    One company with an active posting, one student with a user profile,
    and one application to the posting.
    """
    store.create("profiles", {"id": "u1", "email": "asha@example.edu", "full_name": "Asha Rao", "role": "student"})
    store.create("student_profiles", {"id": "sp1", "user_id": "u1", "roll_number": "CS21-007", "cgpa": 8.7})
    store.create("companies", {"id": "c1", "name": "Acme", "recruiter_id": "r1", "approved": True, "verified": True})
    store.create("job_postings", {
        "id": "j1", "company_id": "c1", "title": "Backend Intern",
        "status": "active", "created_at": "2025-01-01T00:00:00Z",
    })
    store.create("applications", {
        "id": "a1", "job_id": "j1", "student_id": "sp1",
        "created_at": "2025-01-02T00:00:00Z",
    })
    return store


@pytest.fixture
def client(store):
    """Test client with the in-memory store injected."""
    app.dependency_overrides[get_store] = lambda: store
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
