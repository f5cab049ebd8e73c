# repairdesk/routers/technicians_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session, select

from repairdesk.db import get_session
from repairdesk.models import Technician
from repairdesk.schemas import TechnicianPublic

router = APIRouter(
    prefix="/technicians",
    tags=["technicians"],
)


@router.get("", response_model=List[TechnicianPublic])
def list_technicians(
    request: Request,
    location: Optional[str] = None,
    session: Session = Depends(get_session),
):
    if location is None:
        location = request.app.state.service_location

    stmt = (
        select(Technician)
        .where(Technician.location == location)
        .order_by(Technician.id)
    )
    return session.exec(stmt).all()
