# Schemas package (re-export feature modules for stable imports)
from .common.common import CreatedResponse, OptionItem
from .doctors.doctor import DoctorIn, DoctorResponse
from .patients.patient import PatientIn, PatientResponse
from .appointments.appointment import AppointmentCreate, AppointmentResponse, StatusUpdate
from .auth.auth import LoginRequest, LoginResponse

__all__ = [
    "CreatedResponse",
    "OptionItem",
    "DoctorIn",
    "DoctorResponse",
    "PatientIn",
    "PatientResponse",
    "AppointmentCreate",
    "AppointmentResponse",
    "StatusUpdate",
    "LoginRequest",
    "LoginResponse",
]
