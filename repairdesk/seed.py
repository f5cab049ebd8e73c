# repairdesk/seed.py

import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .auth import hash_password
from .models import Technician, User

logger = logging.getLogger(__name__)

PREDEFINED_TECHNICIANS = [
    {"email": "tech1@example.com", "name": "Technician 1", "password": "password"},
    {"email": "tech2@example.com", "name": "Technician 2", "password": "password"},
    {"email": "tech3@example.com", "name": "Technician 3", "password": "password"},
]

DEFAULT_SLOTS = ["Monday 10AM", "Tuesday 2PM"]
DEFAULT_SERVICE_FEE = 500.0


def _find_user(session: Session, email: str):
    return session.exec(select(User).where(User.email == email)).first()


def _find_technician(session: Session, user_id: int):
    return session.exec(select(Technician).where(Technician.user_id == user_id)).first()


def _ensure_technician(session: Session, tech: dict, location: str) -> bool:
    user = _find_user(session, tech["email"])
    if user is None:
        user = User(
            name=tech["name"],
            email=tech["email"],
            password_hash=hash_password(tech["password"]),
            role="technician",
        )
        session.add(user)
        session.flush()  # fills user.id

    if _find_technician(session, user.id) is not None:
        return False

    session.add(
        Technician(
            user_id=user.id,
            location=location,
            available_slots=list(DEFAULT_SLOTS),
            service_fee=DEFAULT_SERVICE_FEE,
        )
    )
    session.commit()
    return True


def seed_technicians(session: Session, location: str) -> int:
    """Create the predefined technician users and their Technician rows.

    Safe to run repeatedly and from several processes at once: existing users
    are reused, and the unique email and user_id columns turn a lost race into
    an IntegrityError, after which the rows the other process wrote are picked
    up on a second pass. Returns how many Technician rows were created.
    """
    created = 0
    for tech in PREDEFINED_TECHNICIANS:
        try:
            added = _ensure_technician(session, tech, location)
        except IntegrityError:
            session.rollback()
            logger.info("%s was seeded concurrently, re-reading", tech["email"])
            added = _ensure_technician(session, tech, location)
        created += int(added)

    session.commit()

    if created:
        logger.info("Predefined technicians have been added (%d at %s)", created, location)
    else:
        logger.info("Technicians already exist.")
    return created


def main() -> None:
    from .config import DATABASE_URL, LOG_LEVEL, SERVICE_LOCATION
    from .db import init_db, make_engine

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    engine = make_engine(DATABASE_URL)
    try:
        init_db(engine)
        with Session(engine) as session:
            seed_technicians(session, SERVICE_LOCATION)
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
