# repairdesk/routers/auth_routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from repairdesk.db import get_session
from repairdesk.models import User
from repairdesk.schemas import UserCreate, LoginRequest, LoginResponse, MessageResponse
from repairdesk.auth import hash_password, verify_password, token_for_user

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["auth"],
)


@router.post("/register", response_model=MessageResponse, status_code=201)
def register(
    user: UserCreate,
    session: Session = Depends(get_session),
):
    existing = session.exec(
        select(User).where(User.email == user.email)
    ).first()
    if existing is not None:
        raise HTTPException(status_code=409, detail="Email already registered")

    db_user = User(
        name=user.name,
        email=user.email,
        password_hash=hash_password(user.password),
        role=user.role.value,
    )

    session.add(db_user)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise HTTPException(status_code=409, detail="Email already registered")

    logger.info("Registered %s as %s", db_user.email, db_user.role)
    return {"message": "User registered successfully"}


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    session: Session = Depends(get_session),
):
    user = session.exec(
        select(User).where(User.email == credentials.email)
    ).first()

    if user is None:
        raise HTTPException(status_code=404, detail="User not found")

    if not verify_password(credentials.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid password")

    return {
        "message": "Login successful",
        "token": token_for_user(user),
        "user": user,
    }
