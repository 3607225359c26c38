import logging
from dataclasses import dataclass
from typing import List, Optional

from ...enums import DoctorStatus
from ...exceptions import NotFoundError
from ...validators import normalize_phone, parse_choice, require_text, validate_email_optional
from ..ports.doctors_repo import DoctorsRepository, DoctorDto

logger = logging.getLogger(__name__)


@dataclass
class DoctorsService:
    repo: DoctorsRepository

    def _clean(self, name: str, specialization: str, phone: str, email: Optional[str], status: str):
        return (
            require_text(name, "Name"),
            require_text(specialization, "Specialization"),
            normalize_phone(phone),
            validate_email_optional(email),
            parse_choice(status, DoctorStatus, "Status").value,
        )

    def create_doctor(self, name: str, specialization: str, phone: str, email: Optional[str] = None, status: str = DoctorStatus.ACTIVE.value) -> int:
        fields = self._clean(name, specialization, phone, email, status)
        doctor_id = self.repo.create(*fields)
        logger.info(f"Doctor {doctor_id} created")
        return doctor_id

    def list_doctors(self, active_only: bool = False) -> List[DoctorDto]:
        return self.repo.list(active_only=active_only)

    def get_doctor(self, doctor_id: int) -> DoctorDto:
        doctor = self.repo.get_by_id(doctor_id)
        if not doctor:
            raise NotFoundError("Doctor not found.")
        return doctor

    def update_doctor(self, doctor_id: int, name: str, specialization: str, phone: str, email: Optional[str] = None, status: str = DoctorStatus.ACTIVE.value) -> None:
        fields = self._clean(name, specialization, phone, email, status)
        if not self.repo.update(doctor_id, *fields):
            raise NotFoundError("Doctor not found (it may have been deleted).")
        logger.info(f"Doctor {doctor_id} updated")
