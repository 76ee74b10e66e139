"""Shared test fixtures — in-memory MongoDB + FastAPI test client.

Every test gets a fresh mongomock database injected through
app.dependency_overrides[get_mongo_db]. The client is not used as a context
manager, so the lifespan (real MongoDB indexes) never runs.
"""

import mongomock
import pytest
from fastapi.testclient import TestClient

from cohort_api.db.mongodb import get_mongo_db, init_mongo_indexes
from cohort_api.main import app


@pytest.fixture
def db():
    database = mongomock.MongoClient()["cohort-tools-test"]
    init_mongo_indexes(database)
    return database


@pytest.fixture
def client(db):
    app.dependency_overrides[get_mongo_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def cohort_payload():
    return {
        "slug": "ft-wd-paris-2023-07-03",
        "name": "FT WD PARIS 2023 07",
        "program": "Web Dev",
        "languages": ["French", "English"],
        "format": "Full Time",
        "campus": "Paris",
        "startDate": "2023-07-03T09:00:00+02:00",
        "endDate": "2023-09-08T18:00:00+00:00",
        "inProgress": False,
        "programManager": "Sally Daher",
        "leadTeacher": "Florian Aube",
        "totalHours": 360,
    }


@pytest.fixture
def cohort(client, cohort_payload):
    """A cohort created through the API."""
    res = client.post("/api/cohorts", json=cohort_payload)
    assert res.status_code == 200
    return res.json()


@pytest.fixture
def student_payload():
    return {
        "firstName": "Christine",
        "lastName": "Clayton",
        "email": "christine.clayton@example.com",
        "phone": "567-890-1234",
        "linkedinUrl": "https://linkedin.com/in/christineclaytonexample",
        "languages": ["English", "Dutch"],
        "program": "Web Dev",
        "background": "Computer Engineering",
        "image": "https://i.imgur.com/r8bo8u7.png",
    }
