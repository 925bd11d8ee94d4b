# edumate/api/v1/endpoints/appointments.py
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from edumate.core.config import settings
from edumate.core.exceptions import APIError, NotFoundError
from edumate.db.deps import get_db
from edumate.schemas.appointment import (
    AppointmentCreate,
    AppointmentPublic,
    AppointmentStatusUpdate,
    AppointmentWithStudent,
    AppointmentWithTeacher,
)
from edumate.services import appointment_service
from edumate.services.appointment_service import (
    AppointmentError,
    AppointmentNotFound,
    InvalidStatusTransition,
)

router = APIRouter(tags=["appointments"])


@router.post(
    "/appointments",
    response_model=AppointmentPublic,
    status_code=status.HTTP_201_CREATED,
)
def create_appointment(payload: AppointmentCreate, db: Session = Depends(get_db)):
    try:
        return appointment_service.create_appointment(db, obj_in=payload)
    except AppointmentError as e:
        raise APIError("Appointment not created", error=str(e))


@router.get("/my-appointments")
def list_my_appointments(
    studentId: Optional[int] = None,
    teacherId: Optional[int] = None,
    db: Session = Depends(get_db),
):
    """
    Exactly one of studentId / teacherId. The other side of each booking is
    returned as a full profile under its id key.
    """
    if (studentId is None) == (teacherId is None):
        raise APIError("Student ID or Teacher ID is required")

    if studentId is not None:
        appointments = appointment_service.list_for_student(db, studentId)
        return [AppointmentWithTeacher.model_validate(a) for a in appointments]

    appointments = appointment_service.list_for_teacher(db, teacherId)
    return [AppointmentWithStudent.model_validate(a) for a in appointments]


@router.put("/update-appointment-status", response_model=AppointmentPublic)
def update_appointment_status(
    payload: AppointmentStatusUpdate,
    db: Session = Depends(get_db),
):
    try:
        return appointment_service.update_status(
            db,
            appointment_id=payload.appointment_id,
            status=payload.status,
            enforce_transitions=settings.ENFORCE_STATUS_TRANSITIONS,
        )
    except AppointmentNotFound:
        raise NotFoundError("Appointment not found")
    except InvalidStatusTransition as e:
        raise APIError("Invalid status transition", error=str(e))
