# edumate/api/v1/endpoints/auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from edumate.core.config import settings
from edumate.core.exceptions import APIError
from edumate.db.deps import get_db
from edumate.schemas.auth import (
    LOGIN_FAILED,
    LOGIN_OK,
    UPDATE_BAD_PASSWORD,
    UPDATE_OK,
    LoginRequest,
)
from edumate.schemas.student import StudentCreate, StudentPublic, StudentSession
from edumate.schemas.teacher import (
    TeacherCreate,
    TeacherProfileUpdate,
    TeacherPublic,
    TeacherSession,
)
from edumate.services import account_service
from edumate.services.account_service import RegistrationError
from edumate.services.verification_service import (
    VerificationLedger,
    get_verification_ledger,
)

router = APIRouter(tags=["auth"])

NOT_CREATED = "User not created"


def _require_verified_email(ledger: VerificationLedger, email: str) -> None:
    if settings.REQUIRE_EMAIL_VERIFICATION and not ledger.is_verified(email):
        raise APIError(NOT_CREATED, error="Email not verified")


@router.post(
    "/teacher-register",
    response_model=TeacherPublic,
    status_code=status.HTTP_201_CREATED,
)
def register_teacher(
    payload: TeacherCreate,
    db: Session = Depends(get_db),
    ledger: VerificationLedger = Depends(get_verification_ledger),
):
    _require_verified_email(ledger, payload.email)
    try:
        teacher = account_service.create_teacher(db, obj_in=payload)
    except RegistrationError as e:
        raise APIError(NOT_CREATED, error=str(e))
    ledger.consume_verified(payload.email)
    return teacher


@router.post(
    "/student-register",
    response_model=StudentPublic,
    status_code=status.HTTP_201_CREATED,
)
def register_student(
    payload: StudentCreate,
    db: Session = Depends(get_db),
    ledger: VerificationLedger = Depends(get_verification_ledger),
):
    _require_verified_email(ledger, payload.email)
    try:
        student = account_service.create_student(db, obj_in=payload)
    except RegistrationError as e:
        raise APIError(NOT_CREATED, error=str(e))
    ledger.consume_verified(payload.email)
    return student


# Login failures are a 200 with LOGIN_FAILED, whether the email is unknown
# or the password is wrong.
@router.post("/teacher-login")
def login_teacher(payload: LoginRequest, db: Session = Depends(get_db)):
    teacher = account_service.authenticate_teacher(db, payload.email, payload.password)
    if teacher is None:
        return {"message": LOGIN_FAILED}
    return {"message": LOGIN_OK, "user": TeacherSession.model_validate(teacher)}


@router.post("/student-login")
def login_student(payload: LoginRequest, db: Session = Depends(get_db)):
    student = account_service.authenticate_student(db, payload.email, payload.password)
    if student is None:
        return {"message": LOGIN_FAILED}
    return {"message": LOGIN_OK, "user": StudentSession.model_validate(student)}


@router.post("/profile")
def update_profile(payload: TeacherProfileUpdate, db: Session = Depends(get_db)):
    """
    Teacher profile update, re-authenticated by password. A mismatch is a
    normal 200 response carrying UPDATE_BAD_PASSWORD.
    """
    teacher = account_service.update_teacher_profile(db, obj_in=payload)
    if teacher is None:
        return {"message": UPDATE_BAD_PASSWORD}
    return {"message": UPDATE_OK, "user": TeacherSession.model_validate(teacher)}
