# edumate/services/account_service.py
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from edumate.core.security import authenticate_user, get_password_hash
from edumate.models.student import Student
from edumate.models.teacher import Teacher
from edumate.schemas.student import StudentCreate
from edumate.schemas.teacher import TeacherCreate, TeacherProfileUpdate

logger = logging.getLogger(__name__)


class RegistrationError(Exception):
    """Account was not created (duplicate email, rejected row)."""


# fields a teacher may change through a profile update
TEACHER_PROFILE_FIELDS = (
    "name",
    "subject",
    "experience",
    "location",
    "contact",
    "description",
    "image",
)


def _persist_account(db: Session, account):
    db.add(account)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        # uniqueness is left to the database constraint
        raise RegistrationError(str(e.orig)) from e
    db.refresh(account)
    return account


def create_teacher(db: Session, *, obj_in: TeacherCreate) -> Teacher:
    teacher = Teacher(
        email=obj_in.email,
        password_hash=get_password_hash(obj_in.password),
        name=obj_in.name,
        subject=obj_in.subject,
        experience=obj_in.experience,
        location=obj_in.location,
        contact=obj_in.contact,
        description=obj_in.description,
        image=obj_in.image,
    )
    teacher = _persist_account(db, teacher)
    logger.info(f"Registered teacher {teacher.id} ({teacher.email})")
    return teacher


def create_student(db: Session, *, obj_in: StudentCreate) -> Student:
    student = Student(
        email=obj_in.email,
        password_hash=get_password_hash(obj_in.password),
        name=obj_in.name,
    )
    student = _persist_account(db, student)
    logger.info(f"Registered student {student.id} ({student.email})")
    return student


def authenticate_teacher(db: Session, email: str, password: str) -> Optional[Teacher]:
    return authenticate_user(db, Teacher, email, password)


def authenticate_student(db: Session, email: str, password: str) -> Optional[Student]:
    return authenticate_user(db, Student, email, password)


def update_teacher_profile(
    db: Session,
    *,
    obj_in: TeacherProfileUpdate,
) -> Optional[Teacher]:
    """
    Re-authenticate with email + password, then overwrite every profile
    field. Returns None when the credentials do not match.
    """
    teacher = authenticate_teacher(db, obj_in.email, obj_in.password)
    if teacher is None:
        return None

    for field in TEACHER_PROFILE_FIELDS:
        setattr(teacher, field, getattr(obj_in, field))
    db.add(teacher)
    db.commit()
    db.refresh(teacher)
    logger.info(f"Updated profile of teacher {teacher.id}")
    return teacher
