# clinic/schemas/doctors/doctor.py
from pydantic import BaseModel
from typing import Optional

# Raw form input; field rules live in clinic.validators
class DoctorIn(BaseModel):
    name: str = ""
    specialization: str = ""
    phone: str = ""
    email: Optional[str] = None
    status: str = "ACTIVE"

class DoctorResponse(BaseModel):
    id: int
    name: str
    specialization: str
    phone: str
    email: Optional[str] = None
    status: str
