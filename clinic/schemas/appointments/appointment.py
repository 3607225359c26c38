# clinic/schemas/appointments/appointment.py
from pydantic import BaseModel
from typing import Optional

class AppointmentCreate(BaseModel):
    patient_id: int
    doctor_id: int
    appointment_datetime: str = ""  # YYYY-MM-DD HH:MM
    reason: Optional[str] = None

class AppointmentResponse(BaseModel):
    id: int
    appointment_datetime: str
    patient_id: int
    patient_name: str
    doctor_id: int
    doctor_name: str
    reason: Optional[str] = None
    status: str

class StatusUpdate(BaseModel):
    status: str
