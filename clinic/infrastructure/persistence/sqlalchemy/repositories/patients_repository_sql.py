from typing import List, Optional
from sqlalchemy import update
from sqlmodel import Session, select

from .....db.models import Patient
from .....application.ports.patients_repo import PatientsRepository, PatientDto
from ..errors import storage_errors


class SqlPatientsRepository(PatientsRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, p: Patient) -> PatientDto:
        return PatientDto(
            id=p.id,
            first_name=p.first_name,
            last_name=p.last_name,
            gender=p.gender,
            dob=p.dob,
            phone=p.phone,
            email=p.email,
            address=p.address,
        )

    def create(self, first_name: str, last_name: str, gender: str, dob: str, phone: str, email: Optional[str], address: Optional[str]) -> int:
        patient = Patient(
            first_name=first_name,
            last_name=last_name,
            gender=gender,
            dob=dob,
            phone=phone,
            email=email,
            address=address,
        )
        with storage_errors(self.session, "saving patient"):
            self.session.add(patient)
            self.session.commit()
            self.session.refresh(patient)
        return patient.id

    def list(self) -> List[PatientDto]:
        with storage_errors(self.session, "loading patients"):
            rows = self.session.exec(
                select(Patient).order_by(Patient.last_name, Patient.first_name, Patient.id)
            ).all()
        return [self._to_dto(r) for r in rows]

    def get_by_id(self, patient_id: int) -> Optional[PatientDto]:
        with storage_errors(self.session, "loading patient details"):
            p = self.session.get(Patient, patient_id)
        return self._to_dto(p) if p else None

    def update(self, patient_id: int, first_name: str, last_name: str, gender: str, dob: str, phone: str, email: Optional[str], address: Optional[str]) -> bool:
        statement = (
            update(Patient)
            .where(Patient.id == patient_id)
            .values(
                first_name=first_name,
                last_name=last_name,
                gender=gender,
                dob=dob,
                phone=phone,
                email=email,
                address=address,
            )
        )
        with storage_errors(self.session, "updating patient"):
            result = self.session.exec(statement)
            self.session.commit()
        return result.rowcount > 0
