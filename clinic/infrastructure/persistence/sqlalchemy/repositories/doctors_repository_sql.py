from typing import List, Optional
from sqlalchemy import update
from sqlmodel import Session, select

from .....db.models import Doctor
from .....enums import DoctorStatus
from .....application.ports.doctors_repo import DoctorsRepository, DoctorDto
from ..errors import storage_errors


class SqlDoctorsRepository(DoctorsRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, d: Doctor) -> DoctorDto:
        return DoctorDto(
            id=d.id,
            name=d.name,
            specialization=d.specialization,
            phone=d.phone,
            email=d.email,
            status=d.status,
        )

    def create(self, name: str, specialization: str, phone: str, email: Optional[str], status: str) -> int:
        doctor = Doctor(name=name, specialization=specialization, phone=phone, email=email, status=status)
        with storage_errors(self.session, "saving doctor"):
            self.session.add(doctor)
            self.session.commit()
            self.session.refresh(doctor)
        return doctor.id

    def list(self, active_only: bool = False) -> List[DoctorDto]:
        query = select(Doctor)
        if active_only:
            query = query.where(Doctor.status == DoctorStatus.ACTIVE.value)
        with storage_errors(self.session, "loading doctors"):
            rows = self.session.exec(query.order_by(Doctor.name, Doctor.id)).all()
        return [self._to_dto(r) for r in rows]

    def get_by_id(self, doctor_id: int) -> Optional[DoctorDto]:
        with storage_errors(self.session, "loading doctor details"):
            d = self.session.get(Doctor, doctor_id)
        return self._to_dto(d) if d else None

    def update(self, doctor_id: int, name: str, specialization: str, phone: str, email: Optional[str], status: str) -> bool:
        statement = (
            update(Doctor)
            .where(Doctor.id == doctor_id)
            .values(name=name, specialization=specialization, phone=phone, email=email, status=status)
        )
        with storage_errors(self.session, "updating doctor"):
            result = self.session.exec(statement)
            self.session.commit()
        return result.rowcount > 0
