# edumate/models/teacher.py
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from edumate.db.base import Base

class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)

    # profile
    subject = Column(String(100), nullable=False)
    experience = Column(Integer, nullable=False)  # years
    location = Column(String(255), nullable=False)
    contact = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    image = Column(Text, nullable=True)  # URL or data URL

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    appointments = relationship("Appointment", back_populates="teacher")
