# repairdesk/services/booking.py

import logging
from typing import List, Optional

from sqlmodel import Session, select

from ..models import Booking, Technician
from ..schemas import BookingCreate, PaymentStatus
from ..errors import NotFoundError

logger = logging.getLogger(__name__)


def find_technician(session: Session, location: str) -> Optional[Technician]:
    # first match wins, no load balancing and no slot check
    return session.exec(
        select(Technician)
        .where(Technician.location == location)
        .order_by(Technician.id)
    ).first()


def create_booking(session: Session, request: BookingCreate, location: str) -> Booking:
    """Assign the first technician at ``location`` and record a pending booking.

    ``request.location`` takes precedence over ``location`` when set.
    Raises NotFoundError without writing anything if no technician works there.
    """
    location = request.location or location
    technician = find_technician(session, location)
    if technician is None:
        logger.warning("No technician found at %s", location)
        raise NotFoundError("Technician not found")

    booking = Booking(
        user_id=request.requester_id,
        problem=request.problem,
        device_type=request.device_type,
        brand=request.brand,
        model=request.model,
        technician_id=technician.id,
        time_slot=request.time_slot,
        payment_status=PaymentStatus.pending.value,
    )
    session.add(booking)
    session.commit()
    session.refresh(booking)

    logger.info(
        "Booking %s created for %s with technician %s (%s)",
        booking.id, booking.user_id, technician.id, booking.time_slot,
    )
    return booking


def get_booking(session: Session, booking_id: int) -> Booking:
    booking = session.get(Booking, booking_id)
    if booking is None:
        raise NotFoundError("Booking not found")
    return booking


def list_bookings_for_user(session: Session, user_id: str) -> List[Booking]:
    return list(
        session.exec(
            select(Booking).where(Booking.user_id == user_id).order_by(Booking.id)
        ).all()
    )
