from dataclasses import asdict
from typing import List
from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..db.session import get_session
from ..application.services.patients_service import PatientsService
from ..infrastructure.persistence.sqlalchemy.repositories.patients_repository_sql import SqlPatientsRepository
from ..schemas import CreatedResponse, OptionItem, PatientIn, PatientResponse

router = APIRouter(prefix="/patients", tags=["Patients"])


def get_patients_service(session: Session = Depends(get_session)) -> PatientsService:
    return PatientsService(repo=SqlPatientsRepository(session))


@router.post("", response_model=CreatedResponse, status_code=201)
def create_patient(data: PatientIn, svc: PatientsService = Depends(get_patients_service)):
    return CreatedResponse(id=svc.create_patient(**data.model_dump()))


@router.get("", response_model=List[PatientResponse])
def list_patients(svc: PatientsService = Depends(get_patients_service)):
    return [PatientResponse(**asdict(p)) for p in svc.list_patients()]


@router.get("/options", response_model=List[OptionItem])
def patient_options(svc: PatientsService = Depends(get_patients_service)):
    return [OptionItem(id=p.id, label=p.full_name) for p in svc.list_patients()]


@router.get("/{patient_id}", response_model=PatientResponse)
def get_patient(patient_id: int, svc: PatientsService = Depends(get_patients_service)):
    return PatientResponse(**asdict(svc.get_patient(patient_id)))


@router.put("/{patient_id}", response_model=PatientResponse)
def update_patient(patient_id: int, data: PatientIn, svc: PatientsService = Depends(get_patients_service)):
    svc.update_patient(patient_id, **data.model_dump())
    return PatientResponse(**asdict(svc.get_patient(patient_id)))
