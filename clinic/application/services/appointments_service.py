import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from ...enums import AppointmentStatus
from ...exceptions import DoubleBookingError, NotFoundError, ValidationError
from ...validators import optional_text, parse_appointment_datetime, parse_choice, parse_date_filter
from ..ports.appointments_repo import AppointmentsRepository, AppointmentDto

logger = logging.getLogger(__name__)


@dataclass
class AppointmentsService:
    repo: AppointmentsRepository
    now: Optional[datetime] = None

    def book(self, patient_id: int, doctor_id: int, appointment_datetime: str, reason: Optional[str] = None) -> int:
        """Book a BOOKED appointment and return its id.

        The doctor/time clash is left to the store's unique index so two
        concurrent bookings cannot both succeed.
        """
        normalized = parse_appointment_datetime(appointment_datetime, now=self.now)
        try:
            appointment_id = self.repo.create(patient_id, doctor_id, normalized, optional_text(reason))
        except DoubleBookingError:
            logger.warning(f"Doctor {doctor_id} already booked at {normalized}")
            raise
        logger.info(f"Appointment {appointment_id} booked for doctor {doctor_id} at {normalized}")
        return appointment_id

    def list_appointments(self, date_filter: Optional[str] = None) -> List[AppointmentDto]:
        return self.repo.list(date_filter=parse_date_filter(date_filter))

    def update_status(self, appointment_id: int, status: str) -> None:
        # Any status may follow any other
        new_status = parse_choice(status, AppointmentStatus, "Status").value
        if not self.repo.update_status(appointment_id, new_status):
            raise NotFoundError("Appointment not found (it may have been deleted).")
        logger.info(f"Appointment {appointment_id} set to {new_status}")

    def change_status(self, appointment_id: int, status: str) -> None:
        """Set a new status, refusing to rewrite the one already stored."""
        new_status = parse_choice(status, AppointmentStatus, "Status").value
        current = self.repo.get_status(appointment_id)
        if current is None:
            raise NotFoundError("Appointment not found (it may have been deleted).")
        if current == new_status:
            raise ValidationError(f"This appointment is already {new_status}.")
        self.update_status(appointment_id, new_status)
