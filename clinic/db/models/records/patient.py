# clinic/db/models/records/patient.py
from typing import Optional
from sqlalchemy import CheckConstraint, Index
from sqlmodel import SQLModel, Field

class Patient(SQLModel, table=True):
    __tablename__ = "patients"
    __table_args__ = (
        CheckConstraint("gender IN ('M', 'F', 'O', 'N/A')", name="ck_patients_gender"),
        Index("ix_patients_last_first", "last_name", "first_name"),
    )
    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    gender: str = Field(max_length=3)
    dob: str = Field(max_length=10)  # YYYY-MM-DD
    phone: str = Field(max_length=10)
    email: Optional[str] = Field(default=None, max_length=100)
    address: Optional[str] = Field(default=None)
