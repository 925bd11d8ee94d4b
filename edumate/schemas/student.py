# edumate/schemas/student.py
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, EmailStr


class StudentBase(BaseModel):
    name: str
    email: EmailStr


class StudentCreate(StudentBase):
    password: str


class StudentPublic(StudentBase):
    id: int
    created_at: datetime | None = None

    model_config = {"from_attributes": True}


class StudentSession(StudentPublic):
    type: Literal["student"] = "student"
