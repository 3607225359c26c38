from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass
class AppointmentDto:
    id: int
    appointment_datetime: str
    patient_id: int
    patient_name: str
    doctor_id: int
    doctor_name: str
    reason: Optional[str]
    status: str


class AppointmentsRepository(Protocol):
    def create(self, patient_id: int, doctor_id: int, appointment_datetime: str, reason: Optional[str]) -> int:
        """Insert a BOOKED appointment.

        Raises NotFoundError when the patient or doctor is missing and
        DoubleBookingError when the doctor already has a BOOKED appointment
        at ``appointment_datetime``.
        """
        ...

    def list(self, date_filter: Optional[str] = None) -> List[AppointmentDto]:
        ...

    def get_status(self, appointment_id: int) -> Optional[str]:
        ...

    def update_status(self, appointment_id: int, status: str) -> bool:
        ...
