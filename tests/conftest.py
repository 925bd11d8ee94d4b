"""
Shared fixtures: a throwaway SQLite database and a verification ledger
whose mailer records messages instead of sending them.
"""

import os
import tempfile

# Must be set before edumate is imported (settings and engine are module level)
_TMP_DIR = tempfile.mkdtemp(prefix="edumate-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["VERIFICATION_BACKEND"] = "memory"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from edumate.main import app
from edumate.db.base import Base
from edumate.db.session import SessionLocal, engine
from edumate.services.mailer import MailDeliveryError
from edumate.services.verification_service import (
    VerificationLedger,
    get_verification_ledger,
)
from edumate.services.verification_store import MemoryCodeStore


class RecordingMailer:
    """Mail transport double: keeps (to, code) pairs, can be told to fail."""

    def __init__(self):
        self.outbox = []
        self.fail_with = None

    def send_verification_code(self, to, code):
        if self.fail_with:
            raise MailDeliveryError(self.fail_with)
        self.outbox.append((to, code))

    def last_code_for(self, email):
        codes = [code for to, code in self.outbox if to == email]
        return codes[-1] if codes else None


@pytest.fixture(autouse=True)
def db_tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def ledger(mailer):
    return VerificationLedger(MemoryCodeStore(), mailer)


@pytest.fixture
def client(ledger):
    app.dependency_overrides[get_verification_ledger] = lambda: ledger
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


TEACHER_PAYLOAD = {
    "name": "Grace Hopper",
    "email": "grace@edumate.io",
    "password": "cobol-1959",
    "subject": "Computer Science",
    "experience": 12,
    "location": "Arlington",
    "contact": "555-0100",
    "description": "Educator with 12 years of experience in Computer Science.",
    "image": "",
}

STUDENT_PAYLOAD = {
    "name": "Ann",
    "email": "ann@x.com",
    "password": "pw",
}


@pytest.fixture
def teacher(client):
    """A registered teacher, as returned by /api/teacher-register."""
    resp = client.post("/api/teacher-register", json=TEACHER_PAYLOAD)
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def student(client):
    resp = client.post("/api/student-register", json=STUDENT_PAYLOAD)
    assert resp.status_code == 201, resp.text
    return resp.json()
