# edumate/schemas/teacher.py
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr, field_validator

from edumate.schemas.auth import normalize_login_email


class TeacherBase(BaseModel):
    name: str
    email: EmailStr
    subject: str
    experience: int  # years
    location: str
    contact: str | None = None
    description: str | None = None
    image: str | None = None


class TeacherCreate(TeacherBase):
    password: str


class TeacherProfileUpdate(TeacherBase):
    """email + password re-authenticate; every other field is overwritten."""
    email: str  # not validated, a bad address reads as a wrong password
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return normalize_login_email(value)


class TeacherPublic(TeacherBase):
    id: int
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class TeacherSession(TeacherPublic):
    """Login payload; the client keeps it as its session."""
    type: Literal["teacher"] = "teacher"
