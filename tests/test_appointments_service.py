from datetime import datetime

import pytest

from clinic.application.ports.appointments_repo import AppointmentDto
from clinic.application.services.appointments_service import AppointmentsService
from clinic.exceptions import DoubleBookingError, NotFoundError, ValidationError


class FakeApptRepo:
    def __init__(self):
        self._id = 1
        self.appts = []

    def create(self, patient_id, doctor_id, appointment_datetime, reason):
        for a in self.appts:
            if a.doctor_id == doctor_id and a.appointment_datetime == appointment_datetime and a.status == "BOOKED":
                raise DoubleBookingError("taken")
        a = AppointmentDto(self._id, appointment_datetime, patient_id, "P", doctor_id, "D", reason, "BOOKED")
        self.appts.append(a)
        self._id += 1
        return a.id

    def list(self, date_filter=None):
        rows = sorted(self.appts, key=lambda a: a.appointment_datetime)
        if date_filter:
            rows = [a for a in rows if a.appointment_datetime[:10] == date_filter]
        return rows

    def get_status(self, appointment_id):
        a = next((a for a in self.appts if a.id == appointment_id), None)
        return a.status if a else None

    def update_status(self, appointment_id, status):
        a = next((a for a in self.appts if a.id == appointment_id), None)
        if not a:
            return False
        a.status = status
        return True


NOW = datetime(2026, 1, 1, 8, 0)


def test_book_normalizes_and_stores_booked():
    repo = FakeApptRepo()
    svc = AppointmentsService(repo=repo, now=NOW)
    appt_id = svc.book(1, 2, " 2026-01-10 14:30 ", reason="  ")
    a = repo.appts[0]
    assert appt_id == a.id
    assert a.appointment_datetime == "2026-01-10 14:30"
    assert a.reason is None
    assert a.status == "BOOKED"


def test_book_rejects_invalid_datetime_before_touching_store():
    repo = FakeApptRepo()
    svc = AppointmentsService(repo=repo, now=NOW)
    with pytest.raises(ValidationError):
        svc.book(1, 2, "2026-02-30 10:00")
    with pytest.raises(ValidationError, match="past"):
        svc.book(1, 2, "2025-12-31 23:59")
    assert repo.appts == []


def test_double_booking_propagates():
    svc = AppointmentsService(repo=FakeApptRepo(), now=NOW)
    svc.book(1, 2, "2026-01-10 14:30")
    with pytest.raises(DoubleBookingError):
        svc.book(3, 2, "2026-01-10 14:30")


def test_list_appointments_filters_by_day():
    svc = AppointmentsService(repo=FakeApptRepo(), now=NOW)
    svc.book(1, 2, "2026-01-11 09:00")
    svc.book(1, 2, "2026-01-10 14:30")
    svc.book(1, 3, "2026-01-10 08:00")
    assert [a.appointment_datetime for a in svc.list_appointments("2026-01-10")] == [
        "2026-01-10 08:00",
        "2026-01-10 14:30",
    ]
    assert len(svc.list_appointments("")) == 3
    with pytest.raises(ValidationError):
        svc.list_appointments("10/01/2026")


def test_update_status_allows_any_transition():
    repo = FakeApptRepo()
    svc = AppointmentsService(repo=repo, now=NOW)
    appt_id = svc.book(1, 2, "2026-01-10 14:30")
    svc.update_status(appt_id, "COMPLETED")
    svc.update_status(appt_id, "BOOKED")
    svc.update_status(appt_id, "BOOKED")
    assert repo.appts[0].status == "BOOKED"


def test_update_status_validates_and_reports_missing():
    svc = AppointmentsService(repo=FakeApptRepo(), now=NOW)
    with pytest.raises(ValidationError):
        svc.update_status(1, "NO_SHOW")
    with pytest.raises(NotFoundError):
        svc.update_status(99, "CANCELLED")


def test_change_status_skips_no_op_updates():
    repo = FakeApptRepo()
    svc = AppointmentsService(repo=repo, now=NOW)
    appt_id = svc.book(1, 2, "2026-01-10 14:30")
    with pytest.raises(ValidationError, match="^This appointment is already BOOKED.$"):
        svc.change_status(appt_id, "BOOKED")
    svc.change_status(appt_id, "COMPLETED")
    assert repo.appts[0].status == "COMPLETED"
    with pytest.raises(ValidationError, match="Status"):
        svc.change_status(appt_id, "NO_SHOW")
    with pytest.raises(NotFoundError):
        svc.change_status(99, "CANCELLED")
