# edumate/models/appointment.py
import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from edumate.db.base import Base


class AppointmentStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    REJECTED = "rejected"


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)

    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    teacher_id = Column(Integer, ForeignKey("teachers.id"), nullable=False, index=True)

    # free-form, as entered by the student
    date = Column(String(50), nullable=False)
    time = Column(String(50), nullable=False)

    # pending / confirmed / rejected, but any label is stored as given
    status = Column(
        String(50),
        nullable=False,
        default=AppointmentStatus.PENDING.value,
        index=True,
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    student = relationship("Student", back_populates="appointments")
    teacher = relationship("Teacher", back_populates="appointments")
