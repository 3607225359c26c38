from datetime import datetime, timedelta

import pytest

from clinic.application.services.appointments_service import AppointmentsService
from clinic.application.services.auth_service import AuthService
from clinic.application.services.doctors_service import DoctorsService
from clinic.application.services.patients_service import PatientsService
from clinic.exceptions import DoubleBookingError, NotFoundError, StorageError, ValidationError
from clinic.infrastructure.persistence.sqlalchemy.repositories.appointments_repository_sql import SqlAppointmentsRepository
from clinic.infrastructure.persistence.sqlalchemy.repositories.doctors_repository_sql import SqlDoctorsRepository
from clinic.infrastructure.persistence.sqlalchemy.repositories.patients_repository_sql import SqlPatientsRepository
from clinic.infrastructure.persistence.sqlalchemy.repositories.user_repository_sql import SqlUserRepository

SLOT = (datetime.now() + timedelta(days=30)).strftime("%Y-%m-%d 10:00")


def doctors(session):
    return DoctorsService(repo=SqlDoctorsRepository(session))


def patients(session):
    return PatientsService(repo=SqlPatientsRepository(session))


def appointments(session):
    return AppointmentsService(repo=SqlAppointmentsRepository(session))


@pytest.fixture
def seeded(database):
    with database.session() as s:
        doctor_id = doctors(s).create_doctor("Gregory House", "Diagnostics", "555 123 4567", email="house@ppth.org")
        other_id = doctors(s).create_doctor("Allison Cameron", "Immunology", "5559876543", status="INACTIVE")
        patient_id = patients(s).create_patient("Ada", "Lovelace", "1990-12-10", "F", "5550001111")
    return {"doctor": doctor_id, "other": other_id, "patient": patient_id}


def test_foreign_keys_enabled_on_every_connection(database):
    for _ in range(2):
        with database.session() as s:
            assert s.connection().exec_driver_sql("PRAGMA foreign_keys").scalar() == 1


def test_doctor_round_trip(database, seeded):
    with database.session() as s:
        d = doctors(s).get_doctor(seeded["doctor"])
    assert d.phone == "5551234567"
    assert d.email == "house@ppth.org"
    assert d.status == "ACTIVE"


def test_list_doctors_ordered_and_filtered(database, seeded):
    with database.session() as s:
        assert [d.name for d in doctors(s).list_doctors()] == ["Allison Cameron", "Gregory House"]
        assert [d.name for d in doctors(s).list_doctors(active_only=True)] == ["Gregory House"]


def test_update_doctor_overwrites_all_fields(database, seeded):
    with database.session() as s:
        doctors(s).update_doctor(seeded["doctor"], "G. House", "Nephrology", "5550000000", email="", status="INACTIVE")
    with database.session() as s:
        d = doctors(s).get_doctor(seeded["doctor"])
    assert (d.name, d.specialization, d.phone, d.email, d.status) == ("G. House", "Nephrology", "5550000000", None, "INACTIVE")


def test_update_missing_rows_leaves_store_unchanged(database, seeded):
    with database.session() as s:
        before = (doctors(s).list_doctors(), patients(s).list_patients())
        with pytest.raises(NotFoundError):
            doctors(s).update_doctor(999, "X", "Y", "5551234567")
        with pytest.raises(NotFoundError):
            patients(s).update_patient(999, "A", "B", "1990-01-01", "M", "5551234567")
        with pytest.raises(NotFoundError):
            appointments(s).update_status(999, "CANCELLED")
    with database.session() as s:
        assert (doctors(s).list_doctors(), patients(s).list_patients()) == before


def test_patient_update_and_ordering(database, seeded):
    with database.session() as s:
        patients(s).create_patient("Charles", "Babbage", "1971-12-26", "M", "5552223333", address=" London ")
        patients(s).update_patient(seeded["patient"], "Ada", "King", "1990-12-10", "N/A", "5550001111", email="ada@example.org")
    with database.session() as s:
        listed = patients(s).list_patients()
        ada = patients(s).get_patient(seeded["patient"])
    assert [p.last_name for p in listed] == ["Babbage", "King"]
    assert listed[0].address == "London"
    assert (ada.gender, ada.email) == ("N/A", "ada@example.org")


def test_book_and_list_with_display_names(database, seeded):
    with database.session() as s:
        appt_id = appointments(s).book(seeded["patient"], seeded["doctor"], SLOT, reason="Cough")
    with database.session() as s:
        rows = appointments(s).list_appointments()
    assert len(rows) == 1
    row = rows[0]
    assert row.id == appt_id
    assert row.patient_name == "Ada Lovelace"
    assert row.doctor_name == "Gregory House"
    assert row.status == "BOOKED"
    assert row.reason == "Cough"


def test_second_booking_for_same_doctor_and_time_fails(database, seeded):
    # Two independent units of work; no read happens before either insert
    with database.session() as first, database.session() as second:
        appointments(first).book(seeded["patient"], seeded["doctor"], SLOT)
        with pytest.raises(DoubleBookingError, match="already has an appointment"):
            appointments(second).book(seeded["patient"], seeded["doctor"], SLOT)
    with database.session() as s:
        assert len(appointments(s).list_appointments()) == 1


def test_same_time_with_other_doctor_is_fine(database, seeded):
    with database.session() as s:
        appointments(s).book(seeded["patient"], seeded["doctor"], SLOT)
        appointments(s).book(seeded["patient"], seeded["other"], SLOT)
        assert len(appointments(s).list_appointments()) == 2


def test_cancelled_slot_can_be_rebooked_but_not_revived(database, seeded):
    with database.session() as s:
        svc = appointments(s)
        first = svc.book(seeded["patient"], seeded["doctor"], SLOT)
        svc.update_status(first, "CANCELLED")
        svc.book(seeded["patient"], seeded["doctor"], SLOT)
        with pytest.raises(DoubleBookingError):
            svc.update_status(first, "BOOKED")
        statuses = sorted(a.status for a in svc.list_appointments())
    assert statuses == ["BOOKED", "CANCELLED"]


def test_booking_unknown_patient_or_doctor_is_not_found(database, seeded):
    with database.session() as s:
        with pytest.raises(NotFoundError):
            appointments(s).book(999, seeded["doctor"], SLOT)
        with pytest.raises(NotFoundError):
            appointments(s).book(seeded["patient"], 999, SLOT)
        assert appointments(s).list_appointments() == []


def test_list_appointments_date_filter(database, seeded):
    day = SLOT[:10]
    next_day = (datetime.strptime(day, "%Y-%m-%d") + timedelta(days=1)).strftime("%Y-%m-%d")
    with database.session() as s:
        svc = appointments(s)
        svc.book(seeded["patient"], seeded["doctor"], f"{next_day} 08:00")
        svc.book(seeded["patient"], seeded["doctor"], f"{day} 15:45")
        svc.book(seeded["patient"], seeded["doctor"], f"{day} 09:15")
        assert [a.appointment_datetime for a in svc.list_appointments(day)] == [f"{day} 09:15", f"{day} 15:45"]
        assert [a.appointment_datetime[:10] for a in svc.list_appointments()] == [day, day, next_day]


def test_user_repository_credentials(database):
    with database.session() as s:
        svc = AuthService(user_repo=SqlUserRepository(s))
        svc.provision_user("admin", "admin123")
        with pytest.raises(ValidationError):
            svc.provision_user("admin", "other")
    with database.session() as s:
        svc = AuthService(user_repo=SqlUserRepository(s))
        assert svc.check_credentials("admin", "admin123") is True
        assert svc.check_credentials("admin", "admin") is False
        assert svc.check_credentials("ghost", "admin123") is False


def test_check_constraint_violation_is_storage_error_and_rolls_back(database):
    # Bypasses service validation so the table CHECK rejects the status
    with database.session() as s:
        repo = SqlDoctorsRepository(s)
        with pytest.raises(StorageError, match="ck_doctors_status") as exc_info:
            repo.create("A", "B", "5551234567", None, "RETIRED")
        assert not isinstance(exc_info.value, (NotFoundError, DoubleBookingError))
        assert repo.list() == []


def test_missing_table_is_storage_error_without_sql_text(database):
    with database.session() as s:
        s.connection().exec_driver_sql("DROP TABLE users")
        s.commit()
    with database.session() as s:
        with pytest.raises(StorageError) as exc_info:
            SqlUserRepository(s).get_password_hash("admin")
    message = exc_info.value.message
    assert "no such table" in message
    assert "SELECT" not in message
    assert "sqlalche.me" not in message


def test_change_status_refuses_same_status(database, seeded):
    with database.session() as s:
        svc = appointments(s)
        appt_id = svc.book(seeded["patient"], seeded["doctor"], SLOT)
        with pytest.raises(ValidationError, match="^This appointment is already BOOKED.$"):
            svc.change_status(appt_id, "BOOKED")
        svc.change_status(appt_id, "CANCELLED")
        with pytest.raises(NotFoundError):
            svc.change_status(999, "CANCELLED")
        assert [a.status for a in svc.list_appointments()] == ["CANCELLED"]
