from enum import Enum


class DoctorStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"
    OTHER = "O"
    NOT_APPLICABLE = "N/A"


class AppointmentStatus(str, Enum):
    BOOKED = "BOOKED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
