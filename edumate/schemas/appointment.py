# edumate/schemas/appointment.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from edumate.schemas.student import StudentPublic
from edumate.schemas.teacher import TeacherPublic


class AppointmentCreate(BaseModel):
    student_id: int = Field(alias="studentId")
    teacher_id: int = Field(alias="teacherId")
    date: str
    time: str

    model_config = ConfigDict(populate_by_name=True)


class AppointmentStatusUpdate(BaseModel):
    appointment_id: int = Field(alias="appointmentId")
    status: str = Field(min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class AppointmentBase(BaseModel):
    id: int
    date: str
    time: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class AppointmentPublic(AppointmentBase):
    student_id: int = Field(serialization_alias="studentId")
    teacher_id: int = Field(serialization_alias="teacherId")


class AppointmentWithTeacher(AppointmentBase):
    """Student view: teacherId carries the teacher's profile."""
    student_id: int = Field(serialization_alias="studentId")
    teacher: TeacherPublic | None = Field(default=None, serialization_alias="teacherId")


class AppointmentWithStudent(AppointmentBase):
    """Teacher view: studentId carries the student's profile."""
    student: StudentPublic | None = Field(default=None, serialization_alias="studentId")
    teacher_id: int = Field(serialization_alias="teacherId")
