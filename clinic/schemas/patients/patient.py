# clinic/schemas/patients/patient.py
from pydantic import BaseModel
from typing import Optional

class PatientIn(BaseModel):
    first_name: str = ""
    last_name: str = ""
    dob: str = ""  # YYYY-MM-DD
    gender: str = ""
    phone: str = ""
    email: Optional[str] = None
    address: Optional[str] = None

class PatientResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    gender: str
    dob: str
    phone: str
    email: Optional[str] = None
    address: Optional[str] = None
