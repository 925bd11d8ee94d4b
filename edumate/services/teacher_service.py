# edumate/services/teacher_service.py
from typing import List, Optional

from sqlalchemy.orm import Session

from edumate.models.teacher import Teacher


def list_teachers(db: Session) -> List[Teacher]:
    return db.query(Teacher).order_by(Teacher.id.asc()).all()


def get_teacher(db: Session, teacher_id: int) -> Optional[Teacher]:
    return db.get(Teacher, teacher_id)
