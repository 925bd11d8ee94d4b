# edumate/api/v1/endpoints/teachers.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from edumate.core.exceptions import NotFoundError
from edumate.db.deps import get_db
from edumate.schemas.teacher import TeacherPublic
from edumate.services import teacher_service

router = APIRouter(tags=["teachers"])


@router.get("/teachers", response_model=List[TeacherPublic])
def list_teachers(db: Session = Depends(get_db)):
    return teacher_service.list_teachers(db)


@router.get("/teacher-profile/{teacher_id}", response_model=TeacherPublic)
def get_teacher_profile(teacher_id: int, db: Session = Depends(get_db)):
    teacher = teacher_service.get_teacher(db, teacher_id)
    if teacher is None:
        raise NotFoundError("Teacher not found")
    return teacher
