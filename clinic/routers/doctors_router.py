from dataclasses import asdict
from typing import List
from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..db.session import get_session
from ..application.services.doctors_service import DoctorsService
from ..infrastructure.persistence.sqlalchemy.repositories.doctors_repository_sql import SqlDoctorsRepository
from ..schemas import CreatedResponse, DoctorIn, DoctorResponse, OptionItem

router = APIRouter(prefix="/doctors", tags=["Doctors"])


def get_doctors_service(session: Session = Depends(get_session)) -> DoctorsService:
    return DoctorsService(repo=SqlDoctorsRepository(session))


@router.post("", response_model=CreatedResponse, status_code=201)
def create_doctor(data: DoctorIn, svc: DoctorsService = Depends(get_doctors_service)):
    return CreatedResponse(id=svc.create_doctor(**data.model_dump()))


@router.get("", response_model=List[DoctorResponse])
def list_doctors(active_only: bool = False, svc: DoctorsService = Depends(get_doctors_service)):
    return [DoctorResponse(**asdict(d)) for d in svc.list_doctors(active_only=active_only)]


@router.get("/options", response_model=List[OptionItem])
def doctor_options(svc: DoctorsService = Depends(get_doctors_service)):
    """Active doctors for appointment pickers."""
    return [OptionItem(id=d.id, label=d.name) for d in svc.list_doctors(active_only=True)]


@router.get("/{doctor_id}", response_model=DoctorResponse)
def get_doctor(doctor_id: int, svc: DoctorsService = Depends(get_doctors_service)):
    return DoctorResponse(**asdict(svc.get_doctor(doctor_id)))


@router.put("/{doctor_id}", response_model=DoctorResponse)
def update_doctor(doctor_id: int, data: DoctorIn, svc: DoctorsService = Depends(get_doctors_service)):
    svc.update_doctor(doctor_id, **data.model_dump())
    return DoctorResponse(**asdict(svc.get_doctor(doctor_id)))
