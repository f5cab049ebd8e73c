import os
from typing import Generator

os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from repairdesk.auth import hash_password, token_for_user
from repairdesk.db import init_db
from repairdesk.main import create_app
from repairdesk.models import Technician, User

TEST_LOCATION = "Lahore"


@pytest.fixture
def engine():
    """
    Fresh in-memory SQLite database per test.

    StaticPool keeps a single connection so every session sees the same
    in-memory database.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine) -> Generator[TestClient, None, None]:
    app = create_app(engine=engine, service_location=TEST_LOCATION, seed_on_startup=False)
    with TestClient(app) as c:
        yield c


# ---------------------------------------------------------------------------
# Data helpers
# ---------------------------------------------------------------------------

def make_user(session: Session, email: str, role: str = "user", password: str = "secret123") -> User:
    user = User(name=email.split("@")[0], email=email, password_hash=hash_password(password), role=role)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def make_technician(session: Session, email: str, location: str = TEST_LOCATION) -> Technician:
    user = make_user(session, email, role="technician")
    technician = Technician(
        user_id=user.id,
        location=location,
        available_slots=["Monday 10AM", "Tuesday 2PM"],
        service_fee=500,
    )
    session.add(technician)
    session.commit()
    session.refresh(technician)
    return technician


def auth_header(user: User) -> dict:
    return {"Authorization": f"Bearer {token_for_user(user)}"}


@pytest.fixture
def technician(session) -> Technician:
    return make_technician(session, "tech@example.com")


@pytest.fixture
def booking_payload() -> dict:
    return {
        "requesterId": "u1",
        "problem": "cracked screen",
        "deviceType": "phone",
        "brand": "Acme",
        "model": "X1",
        "timeSlot": "Monday 10AM",
    }
