# edumate/services/appointment_service.py
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from edumate.models.appointment import Appointment, AppointmentStatus
from edumate.schemas.appointment import AppointmentCreate

logger = logging.getLogger(__name__)


class AppointmentError(Exception):
    pass


class AppointmentNotFound(AppointmentError):
    pass


class InvalidStatusTransition(AppointmentError):
    pass


# same-state writes are always allowed
ALLOWED_TRANSITIONS = {
    AppointmentStatus.PENDING.value: {
        AppointmentStatus.CONFIRMED.value,
        AppointmentStatus.REJECTED.value,
    },
    AppointmentStatus.CONFIRMED.value: set(),
    AppointmentStatus.REJECTED.value: set(),
}


def create_appointment(db: Session, *, obj_in: AppointmentCreate) -> Appointment:
    """
    Book a slot. Nothing is checked against existing bookings, so the same
    teacher/date/time can be booked any number of times.
    """
    appointment = Appointment(
        student_id=obj_in.student_id,
        teacher_id=obj_in.teacher_id,
        date=obj_in.date,
        time=obj_in.time,
        status=AppointmentStatus.PENDING.value,
    )
    db.add(appointment)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise AppointmentError(str(e.orig)) from e
    db.refresh(appointment)
    logger.info(
        f"Appointment {appointment.id} created: student={appointment.student_id} "
        f"teacher={appointment.teacher_id} {appointment.date} {appointment.time}"
    )
    return appointment


def list_for_student(db: Session, student_id: int) -> List[Appointment]:
    return (
        db.query(Appointment)
        .options(joinedload(Appointment.teacher))
        .filter(Appointment.student_id == student_id)
        .order_by(Appointment.id.asc())
        .all()
    )


def list_for_teacher(db: Session, teacher_id: int) -> List[Appointment]:
    return (
        db.query(Appointment)
        .options(joinedload(Appointment.student))
        .filter(Appointment.teacher_id == teacher_id)
        .order_by(Appointment.id.asc())
        .all()
    )


def get_appointment(db: Session, appointment_id: int) -> Optional[Appointment]:
    return db.get(Appointment, appointment_id)


def check_transition(current: str, new: str) -> None:
    valid = {s.value for s in AppointmentStatus}
    if new not in valid:
        raise InvalidStatusTransition(f"unknown status {new!r}")
    if new != current and new not in ALLOWED_TRANSITIONS.get(current, set()):
        raise InvalidStatusTransition(f"{current!r} -> {new!r} is not allowed")


def update_status(
    db: Session,
    *,
    appointment_id: int,
    status: str,
    enforce_transitions: bool = False,
) -> Appointment:
    """
    Overwrite the status label. Without `enforce_transitions` any string is
    stored and the last write wins.
    """
    appointment = get_appointment(db, appointment_id)
    if appointment is None:
        raise AppointmentNotFound(f"appointment {appointment_id} not found")

    if enforce_transitions:
        check_transition(appointment.status, status)

    previous = appointment.status
    appointment.status = status
    db.add(appointment)
    db.commit()
    db.refresh(appointment)
    logger.info(f"Appointment {appointment.id} status: {previous} -> {status}")
    return appointment
