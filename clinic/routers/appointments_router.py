from dataclasses import asdict
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from ..db.session import get_session
from ..application.services.appointments_service import AppointmentsService
from ..infrastructure.persistence.sqlalchemy.repositories.appointments_repository_sql import SqlAppointmentsRepository
from ..schemas import AppointmentCreate, AppointmentResponse, CreatedResponse, StatusUpdate

router = APIRouter(prefix="/appointments", tags=["Appointments"])


def get_appointments_service(session: Session = Depends(get_session)) -> AppointmentsService:
    return AppointmentsService(repo=SqlAppointmentsRepository(session))


@router.post("", response_model=CreatedResponse, status_code=201)
def book_appointment(data: AppointmentCreate, svc: AppointmentsService = Depends(get_appointments_service)):
    appointment_id = svc.book(data.patient_id, data.doctor_id, data.appointment_datetime, data.reason)
    return CreatedResponse(id=appointment_id)


@router.get("", response_model=List[AppointmentResponse])
def list_appointments(
    date: Optional[str] = Query(default=None, description="YYYY-MM-DD; omit for all"),
    svc: AppointmentsService = Depends(get_appointments_service),
):
    return [AppointmentResponse(**asdict(a)) for a in svc.list_appointments(date)]


@router.patch("/{appointment_id}/status")
def update_appointment_status(appointment_id: int, data: StatusUpdate, svc: AppointmentsService = Depends(get_appointments_service)):
    svc.change_status(appointment_id, data.status)
    return {"id": appointment_id, "status": data.status.strip()}
