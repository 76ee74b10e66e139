"""Application-level wiring — greeting, unmatched routes, uniform error bodies."""

from fastapi.testclient import TestClient

from cohort_api.main import app
from cohort_api.services.mongo_service import StudentService


def test_root_greeting(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.json() == {"message": "Hello from the route /"}


def test_unmatched_route_is_404_error_body(client):
    res = client.get("/api/nothing-here")
    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}


def test_wrong_method_is_405_error_body(client):
    res = client.patch("/api/cohorts")
    assert res.status_code == 405
    assert "error" in res.json()


def test_invalid_json_body_is_400(client):
    res = client.post(
        "/api/cohorts",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert "error" in res.json()


def test_unhandled_exception_is_500_without_details(client, monkeypatch):
    def explode(self):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(StudentService, "list_all", explode)

    res = TestClient(app, raise_server_exceptions=False).get("/api/students")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}


def test_cors_allows_frontend_origin(client):
    res = client.get("/api/cohorts", headers={"Origin": "http://localhost:5173"})
    assert res.headers["access-control-allow-origin"] == "http://localhost:5173"
