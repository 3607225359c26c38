# clinic/db/models/records/appointment.py
from typing import Optional
from sqlalchemy import CheckConstraint, Index, text
from sqlmodel import SQLModel, Field

from ....enums import AppointmentStatus

# Name is matched when translating unique violations on engines that report it
DOCTOR_TIME_INDEX = "uq_doctor_time_booked"

_booked_only = text("status = 'BOOKED'")

class Appointment(SQLModel, table=True):
    __tablename__ = "appointments"
    __table_args__ = (
        CheckConstraint(
            "status IN ('BOOKED', 'COMPLETED', 'CANCELLED')", name="ck_appointments_status"
        ),
        Index(
            DOCTOR_TIME_INDEX,
            "doctor_id",
            "appointment_datetime",
            unique=True,
            sqlite_where=_booked_only,
            postgresql_where=_booked_only,
        ),
    )
    id: Optional[int] = Field(default=None, primary_key=True)
    patient_id: int = Field(foreign_key="patients.id")
    doctor_id: int = Field(foreign_key="doctors.id")
    appointment_datetime: str = Field(max_length=16, index=True)  # YYYY-MM-DD HH:MM
    reason: Optional[str] = Field(default=None)
    status: str = Field(default=AppointmentStatus.BOOKED.value, max_length=10)
