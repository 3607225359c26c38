# clinic/db/models/records/doctor.py
from typing import Optional
from sqlalchemy import CheckConstraint
from sqlmodel import SQLModel, Field

from ....enums import DoctorStatus

class Doctor(SQLModel, table=True):
    __tablename__ = "doctors"
    __table_args__ = (
        CheckConstraint("status IN ('ACTIVE', 'INACTIVE')", name="ck_doctors_status"),
    )
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, index=True)
    specialization: str = Field(max_length=100)
    phone: str = Field(max_length=10)
    email: Optional[str] = Field(default=None, max_length=100)
    status: str = Field(default=DoctorStatus.ACTIVE.value, max_length=10)
