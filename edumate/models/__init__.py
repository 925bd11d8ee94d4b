# Package marker
from edumate.models.teacher import Teacher  # noqa
from edumate.models.student import Student  # noqa
from edumate.models.appointment import Appointment, AppointmentStatus  # noqa
