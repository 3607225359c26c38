from typing import List, Optional
from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .....db.models import Appointment, Doctor, Patient
from .....db.models.records.appointment import DOCTOR_TIME_INDEX
from .....enums import AppointmentStatus
from .....exceptions import ClinicError, DoubleBookingError, NotFoundError
from .....application.ports.appointments_repo import AppointmentsRepository, AppointmentDto
from ..errors import constraint_message, storage_errors

DOUBLE_BOOKING_MESSAGE = "That doctor already has an appointment at this time. Choose a different time."


def _booking_conflict(exc: IntegrityError) -> Optional[ClinicError]:
    msg = constraint_message(exc)
    if DOCTOR_TIME_INDEX in msg or "unique" in msg:
        return DoubleBookingError(DOUBLE_BOOKING_MESSAGE)
    if "foreign key" in msg:
        return NotFoundError("Patient or doctor not found (it may have been deleted).")
    return None


class SqlAppointmentsRepository(AppointmentsRepository):
    def __init__(self, session: Session):
        self.session = session

    def create(self, patient_id: int, doctor_id: int, appointment_datetime: str, reason: Optional[str]) -> int:
        appt = Appointment(
            patient_id=patient_id,
            doctor_id=doctor_id,
            appointment_datetime=appointment_datetime,
            reason=reason,
            status=AppointmentStatus.BOOKED.value,
        )
        with storage_errors(self.session, "booking appointment", on_integrity=_booking_conflict):
            self.session.add(appt)
            self.session.commit()
            self.session.refresh(appt)
        return appt.id

    def list(self, date_filter: Optional[str] = None) -> List[AppointmentDto]:
        query = (
            select(Appointment, Patient.first_name, Patient.last_name, Doctor.name)
            .join(Patient, Appointment.patient_id == Patient.id)
            .join(Doctor, Appointment.doctor_id == Doctor.id)
        )
        if date_filter:
            query = query.where(func.substr(Appointment.appointment_datetime, 1, 10) == date_filter)
        query = query.order_by(Appointment.appointment_datetime, Appointment.id)

        with storage_errors(self.session, "loading appointments"):
            rows = self.session.exec(query).all()
        return [
            AppointmentDto(
                id=a.id,
                appointment_datetime=a.appointment_datetime,
                patient_id=a.patient_id,
                patient_name=f"{first_name} {last_name}",
                doctor_id=a.doctor_id,
                doctor_name=doctor_name,
                reason=a.reason,
                status=a.status,
            )
            for a, first_name, last_name, doctor_name in rows
        ]

    def get_status(self, appointment_id: int) -> Optional[str]:
        with storage_errors(self.session, "loading appointment"):
            a = self.session.get(Appointment, appointment_id)
        return a.status if a else None

    def update_status(self, appointment_id: int, status: str) -> bool:
        statement = update(Appointment).where(Appointment.id == appointment_id).values(status=status)
        # Re-booking a cancelled slot can collide with a newer booking
        with storage_errors(self.session, "updating status", on_integrity=_booking_conflict):
            result = self.session.exec(statement)
            self.session.commit()
        return result.rowcount > 0
