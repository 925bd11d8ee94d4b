"""Teacher directory and service root."""

from sqlalchemy.exc import SQLAlchemyError

from edumate.core.config import settings
from edumate.services import teacher_service

from tests.conftest import TEACHER_PAYLOAD


def test_root_reports_running(client):
    assert client.get("/").json() == {"message": "Running"}


def test_health(client):
    assert client.get("/health/live").json() == {"status": "ok"}
    assert client.get("/health/db").json() == {"status": "ok"}


def test_list_teachers_empty(client):
    resp = client.get("/api/teachers")

    assert resp.status_code == 200
    assert resp.json() == []


def test_list_teachers(client, teacher):
    client.post(
        "/api/teacher-register",
        json={**TEACHER_PAYLOAD, "email": "ada@edumate.io", "name": "Ada Lovelace"},
    )

    resp = client.get("/api/teachers")

    names = [t["name"] for t in resp.json()]
    assert names == ["Grace Hopper", "Ada Lovelace"]
    assert all("password_hash" not in t for t in resp.json())


def test_teacher_profile(client, teacher):
    resp = client.get(f"/api/teacher-profile/{teacher['id']}")

    assert resp.status_code == 200
    assert resp.json()["email"] == TEACHER_PAYLOAD["email"]


def test_teacher_profile_not_found(client):
    resp = client.get("/api/teacher-profile/4242")

    assert resp.status_code == 404
    assert resp.json() == {"message": "Teacher not found"}


def _broken(*args, **kwargs):
    raise SQLAlchemyError("boom")


def test_list_teachers_database_error(client, monkeypatch):
    monkeypatch.setattr(teacher_service, "list_teachers", _broken)

    resp = client.get("/api/teachers")

    assert resp.status_code == 500
    assert resp.json() == {"message": "Error fetching teachers", "error": "boom"}


def test_teacher_profile_database_error(client, monkeypatch):
    monkeypatch.setattr(teacher_service, "get_teacher", _broken)

    resp = client.get("/api/teacher-profile/1")

    assert resp.status_code == 500
    assert resp.json() == {"message": "Error fetching teacher profile", "error": "boom"}


def test_database_error_detail_can_be_hidden(client, monkeypatch):
    monkeypatch.setattr(teacher_service, "list_teachers", _broken)
    monkeypatch.setattr(settings, "EXPOSE_ERROR_DETAILS", False)

    resp = client.get("/api/teachers")

    assert resp.status_code == 500
    assert resp.json() == {"message": "Error fetching teachers"}
