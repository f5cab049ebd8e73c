import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from repairdesk import seed
from repairdesk.auth import verify_password
from repairdesk.main import create_app
from repairdesk.models import Technician, User
from repairdesk.seed import PREDEFINED_TECHNICIANS, seed_technicians

from conftest import make_user


def test_seed_creates_three_technicians(session):
    assert seed_technicians(session, "Lahore") == 3

    technicians = session.exec(select(Technician)).all()
    assert len(technicians) == 3
    assert {t.location for t in technicians} == {"Lahore"}
    assert all(t.available_slots == ["Monday 10AM", "Tuesday 2PM"] for t in technicians)
    assert all(t.service_fee == 500 for t in technicians)

    users = session.exec(select(User).where(User.role == "technician")).all()
    assert sorted(u.email for u in users) == ["tech1@example.com", "tech2@example.com", "tech3@example.com"]
    assert verify_password("password", users[0].password_hash)


def test_seed_is_idempotent(session):
    seed_technicians(session, "Lahore")

    assert seed_technicians(session, "Lahore") == 0
    assert len(session.exec(select(Technician)).all()) == 3
    assert len(session.exec(select(User)).all()) == 3


def test_seed_fills_in_missing_technician_rows(session):
    seed_technicians(session, "Lahore")
    orphan = session.exec(select(Technician)).first()
    session.delete(orphan)
    session.commit()

    assert seed_technicians(session, "Lahore") == 1
    assert len(session.exec(select(Technician)).all()) == 3


def test_seed_on_startup_enables_booking(engine, booking_payload):
    app = create_app(engine=engine, service_location="Lahore", seed_on_startup=True)

    with TestClient(app) as c:
        resp = c.post("/book", json=booking_payload)

    assert resp.status_code == 201, resp.text
    with Session(engine) as s:
        ids = [t.id for t in s.exec(select(Technician)).all()]
    assert resp.json()["booking"]["technicianId"] in ids


def test_startup_without_seed_leaves_database_empty(client, engine):
    assert client.get("/health").json() == {"status": "ok"}
    with Session(engine) as s:
        assert s.exec(select(Technician)).all() == []


def test_second_technician_for_same_user_is_rejected(session):
    seed_technicians(session, "Lahore")
    existing = session.exec(select(Technician)).first()

    session.add(Technician(user_id=existing.user_id, location="Lahore", available_slots=[], service_fee=1))
    with pytest.raises(IntegrityError):
        session.commit()
    session.rollback()


def test_seed_reuses_pre_existing_users(session):
    for tech in PREDEFINED_TECHNICIANS:
        make_user(session, tech["email"], role="technician")

    assert seed_technicians(session, "Lahore") == 3
    assert seed_technicians(session, "Lahore") == 0

    assert len(session.exec(select(User)).all()) == 3
    technicians = session.exec(select(Technician)).all()
    assert len({t.user_id for t in technicians}) == 3


def test_seed_recovers_when_user_was_inserted_concurrently(session, monkeypatch):
    seed_technicians(session, "Lahore")
    real_find_user = seed._find_user
    missed = []

    # the first lookup misses, as if another process inserted the row meanwhile
    def find_user(s, email):
        if not missed:
            missed.append(email)
            return None
        return real_find_user(s, email)

    monkeypatch.setattr(seed, "_find_user", find_user)

    assert seed_technicians(session, "Lahore") == 0
    assert missed == ["tech1@example.com"]
    assert len(session.exec(select(User)).all()) == 3
    assert len(session.exec(select(Technician)).all()) == 3


def test_seed_recovers_when_technician_was_inserted_concurrently(session, monkeypatch):
    seed_technicians(session, "Lahore")
    real_find_technician = seed._find_technician
    missed = []

    def find_technician(s, user_id):
        if not missed:
            missed.append(user_id)
            return None
        return real_find_technician(s, user_id)

    monkeypatch.setattr(seed, "_find_technician", find_technician)

    assert seed_technicians(session, "Lahore") == 0
    assert len(missed) == 1
    assert len(session.exec(select(Technician)).all()) == 3
