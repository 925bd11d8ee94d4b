"""Registration, login and teacher profile update."""

from edumate.core.config import settings
from edumate.models.student import Student
from edumate.models.teacher import Teacher

from tests.conftest import STUDENT_PAYLOAD, TEACHER_PAYLOAD


class TestStudentAccounts:
    def test_register_then_login(self, client):
        resp = client.post("/api/student-register", json=STUDENT_PAYLOAD)
        assert resp.status_code == 201
        created = resp.json()
        assert created["name"] == "Ann"
        assert created["email"] == "ann@x.com"

        resp = client.post(
            "/api/student-login", json={"email": "ann@x.com", "password": "pw"}
        )

        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Login successful"
        assert body["user"]["type"] == "student"
        assert body["user"]["id"] == created["id"]
        assert body["user"]["name"] == "Ann"

    def test_password_is_hashed_and_never_returned(self, client, db_session):
        resp = client.post("/api/student-register", json=STUDENT_PAYLOAD)

        assert "password" not in resp.json()
        assert "password_hash" not in resp.json()
        row = db_session.query(Student).filter(Student.email == "ann@x.com").one()
        assert row.password_hash != "pw"
        assert row.password_hash.startswith("$2")

    def test_duplicate_email_is_not_created(self, client, student):
        resp = client.post("/api/student-register", json=STUDENT_PAYLOAD)

        assert resp.status_code == 400
        body = resp.json()
        assert body["message"] == "User not created"
        assert body["error"]

    def test_missing_fields_are_not_created(self, client):
        resp = client.post("/api/student-register", json={"email": "ann@x.com"})

        assert resp.status_code == 400
        assert resp.json()["message"] == "User not created"

    def test_same_password_hashes_differently(self, client, db_session):
        client.post("/api/student-register", json=STUDENT_PAYLOAD)
        client.post(
            "/api/student-register",
            json={**STUDENT_PAYLOAD, "email": "bob@x.com", "name": "Bob"},
        )

        hashes = {s.password_hash for s in db_session.query(Student).all()}
        assert len(hashes) == 2


class TestLoginFailures:
    def test_unknown_email_and_wrong_password_look_the_same(self, client, student):
        unknown = client.post(
            "/api/student-login", json={"email": "ghost@x.com", "password": "pw"}
        )
        wrong = client.post(
            "/api/student-login", json={"email": "ann@x.com", "password": "nope"}
        )

        assert unknown.status_code == wrong.status_code == 200
        assert unknown.json() == wrong.json() == {"message": "Wrong email or password"}

    def test_teacher_login_failures_look_the_same(self, client, teacher):
        unknown = client.post(
            "/api/teacher-login", json={"email": "ghost@x.com", "password": "x"}
        )
        wrong = client.post(
            "/api/teacher-login",
            json={"email": TEACHER_PAYLOAD["email"], "password": "x"},
        )

        assert unknown.json() == wrong.json() == {"message": "Wrong email or password"}

    def test_student_cannot_log_in_as_teacher(self, client, student):
        resp = client.post(
            "/api/teacher-login", json={"email": "ann@x.com", "password": "pw"}
        )

        assert resp.json() == {"message": "Wrong email or password"}

    def test_malformed_email_looks_like_unknown_email(self, client, student):
        for path in ("/api/student-login", "/api/teacher-login"):
            resp = client.post(path, json={"email": "ghost", "password": "pw"})

            assert resp.status_code == 200
            assert resp.json() == {"message": "Wrong email or password"}

    def test_domain_case_is_normalized_like_registration(self, client, student):
        resp = client.post(
            "/api/student-login", json={"email": "ann@X.COM", "password": "pw"}
        )

        assert resp.json()["message"] == "Login successful"


class TestTeacherAccounts:
    def test_register_returns_profile(self, client):
        resp = client.post("/api/teacher-register", json=TEACHER_PAYLOAD)

        assert resp.status_code == 201
        body = resp.json()
        for field in ("name", "email", "subject", "experience", "location", "contact"):
            assert body[field] == TEACHER_PAYLOAD[field]
        assert "password" not in body

    def test_experience_accepts_numeric_string(self, client):
        resp = client.post(
            "/api/teacher-register", json={**TEACHER_PAYLOAD, "experience": "7"}
        )

        assert resp.status_code == 201
        assert resp.json()["experience"] == 7

    def test_optional_fields_may_be_omitted(self, client):
        payload = {
            k: v
            for k, v in TEACHER_PAYLOAD.items()
            if k not in ("contact", "description", "image")
        }

        resp = client.post("/api/teacher-register", json=payload)

        assert resp.status_code == 201
        assert resp.json()["contact"] is None

    def test_missing_subject_is_not_created(self, client):
        payload = {k: v for k, v in TEACHER_PAYLOAD.items() if k != "subject"}

        resp = client.post("/api/teacher-register", json=payload)

        assert resp.status_code == 400
        assert resp.json()["message"] == "User not created"

    def test_login_returns_teacher_session(self, client, teacher):
        resp = client.post(
            "/api/teacher-login",
            json={"email": TEACHER_PAYLOAD["email"], "password": TEACHER_PAYLOAD["password"]},
        )

        body = resp.json()
        assert body["message"] == "Login successful"
        user = body["user"]
        assert user["type"] == "teacher"
        assert user["id"] == teacher["id"]
        assert user["subject"] == "Computer Science"
        assert user["description"] == TEACHER_PAYLOAD["description"]


class TestProfileUpdate:
    def _update(self, **overrides):
        payload = {
            **TEACHER_PAYLOAD,
            "name": "Rear Admiral Hopper",
            "subject": "Compilers",
            "experience": 40,
            "location": "Washington",
            "contact": None,
            "description": "Invented the first compiler.",
            "image": "https://img.edumate.io/grace.png",
        }
        payload.update(overrides)
        return payload

    def test_update_with_correct_password(self, client, teacher, db_session):
        resp = client.post("/api/profile", json=self._update())

        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Update successful"
        assert body["user"]["subject"] == "Compilers"
        assert body["user"]["contact"] is None

        row = db_session.get(Teacher, teacher["id"])
        assert row.name == "Rear Admiral Hopper"
        assert row.experience == 40
        assert row.image == "https://img.edumate.io/grace.png"

    def test_wrong_password_is_a_normal_response(self, client, teacher, db_session):
        resp = client.post("/api/profile", json=self._update(password="guess"))

        assert resp.status_code == 200
        assert resp.json() == {"message": "Incorrect password"}
        assert db_session.get(Teacher, teacher["id"]).subject == "Computer Science"

    def test_unknown_email_gets_same_answer(self, client, teacher):
        resp = client.post("/api/profile", json=self._update(email="ghost@x.com"))

        assert resp.json() == {"message": "Incorrect password"}

    def test_malformed_email_gets_same_answer(self, client, teacher):
        resp = client.post("/api/profile", json=self._update(email="not-an-email"))

        assert resp.status_code == 200
        assert resp.json() == {"message": "Incorrect password"}

    def test_profile_is_visible_in_directory(self, client, teacher):
        client.post("/api/profile", json=self._update())

        resp = client.get(f"/api/teacher-profile/{teacher['id']}")

        assert resp.json()["location"] == "Washington"


class TestRequiredVerification:
    """REQUIRE_EMAIL_VERIFICATION gates registration on a verified code."""

    def test_unverified_email_is_refused(self, client, monkeypatch):
        monkeypatch.setattr(settings, "REQUIRE_EMAIL_VERIFICATION", True)

        resp = client.post("/api/student-register", json=STUDENT_PAYLOAD)

        assert resp.status_code == 400
        assert resp.json() == {"message": "User not created", "error": "Email not verified"}

    def test_verified_email_registers_once(self, client, mailer, monkeypatch):
        monkeypatch.setattr(settings, "REQUIRE_EMAIL_VERIFICATION", True)
        client.post("/api/send-verification-code", json={"email": "ann@x.com"})
        code = mailer.last_code_for("ann@x.com")
        assert client.post(
            "/api/verify-code", json={"email": "ann@x.com", "code": code}
        ).status_code == 200

        first = client.post("/api/student-register", json=STUDENT_PAYLOAD)
        again = client.post(
            "/api/student-register", json={**STUDENT_PAYLOAD, "name": "Ann 2"}
        )

        assert first.status_code == 201
        assert again.status_code == 400
        assert again.json()["error"] == "Email not verified"

    def test_failed_verify_does_not_unlock_registration(self, client, mailer, monkeypatch):
        monkeypatch.setattr(settings, "REQUIRE_EMAIL_VERIFICATION", True)
        client.post("/api/send-verification-code", json={"email": "ann@x.com"})
        code = mailer.last_code_for("ann@x.com")
        wrong = "1000" if code != "1000" else "1001"
        client.post("/api/verify-code", json={"email": "ann@x.com", "code": wrong})

        resp = client.post("/api/student-register", json=STUDENT_PAYLOAD)

        assert resp.status_code == 400

    def test_teacher_flow_end_to_end(self, client, mailer, monkeypatch):
        monkeypatch.setattr(settings, "REQUIRE_EMAIL_VERIFICATION", True)
        email = TEACHER_PAYLOAD["email"]
        client.post("/api/send-verification-code", json={"email": email})
        client.post(
            "/api/verify-code",
            json={"email": email, "code": mailer.last_code_for(email)},
        )

        resp = client.post("/api/teacher-register", json=TEACHER_PAYLOAD)

        assert resp.status_code == 201
