# Models package (re-export feature modules for stable imports)
from .users.user import User
from .records.doctor import Doctor
from .records.patient import Patient
from .records.appointment import Appointment

__all__ = [
    "User",
    "Doctor",
    "Patient",
    "Appointment",
]
