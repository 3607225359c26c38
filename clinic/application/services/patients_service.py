import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ...enums import Gender
from ...exceptions import NotFoundError, ValidationError
from ...validators import (
    normalize_phone,
    optional_text,
    parse_choice,
    parse_dob,
    validate_email_optional,
)
from ..ports.patients_repo import PatientsRepository, PatientDto

logger = logging.getLogger(__name__)


@dataclass
class PatientsService:
    repo: PatientsRepository
    today: Optional[date] = None

    def _clean(self, first_name, last_name, dob, gender, phone, email, address):
        # Names, then date/gender, then phone, then email: first failure wins
        if not (first_name or "").strip() or not (last_name or "").strip():
            raise ValidationError("First name and last name are required.")
        first_name = first_name.strip()
        last_name = last_name.strip()
        dob = parse_dob(dob, today=self.today)
        gender = parse_choice(gender, Gender, "Gender").value
        phone = normalize_phone(phone)
        email = validate_email_optional(email)
        return first_name, last_name, gender, dob, phone, email, optional_text(address)

    def create_patient(self, first_name: str, last_name: str, dob: str, gender: str, phone: str, email: Optional[str] = None, address: Optional[str] = None) -> int:
        fields = self._clean(first_name, last_name, dob, gender, phone, email, address)
        patient_id = self.repo.create(*fields)
        logger.info(f"Patient {patient_id} created")
        return patient_id

    def list_patients(self) -> List[PatientDto]:
        return self.repo.list()

    def get_patient(self, patient_id: int) -> PatientDto:
        patient = self.repo.get_by_id(patient_id)
        if not patient:
            raise NotFoundError("Patient not found.")
        return patient

    def update_patient(self, patient_id: int, first_name: str, last_name: str, dob: str, gender: str, phone: str, email: Optional[str] = None, address: Optional[str] = None) -> None:
        fields = self._clean(first_name, last_name, dob, gender, phone, email, address)
        if not self.repo.update(patient_id, *fields):
            raise NotFoundError("Patient not found (it may have been deleted).")
        logger.info(f"Patient {patient_id} updated")
