# repairdesk/services/payment.py

import logging
from typing import Protocol

from sqlmodel import Session

from ..models import Booking
from ..schemas import PaymentStatus
from ..errors import PaymentError
from .booking import get_booking

logger = logging.getLogger(__name__)


class PaymentGateway(Protocol):
    """Settles a payment reference for a booking with a payment provider."""

    def charge(self, booking: Booking, payment_ref: str) -> bool:
        ...


class StubPaymentGateway:
    """Accepts every payment reference. Stands in for a real provider."""

    def charge(self, booking: Booking, payment_ref: str) -> bool:
        logger.info("Stub gateway accepted %r for booking %s", payment_ref, booking.id)
        return True


def confirm_payment(
    session: Session,
    booking_id: int,
    payment_ref: str,
    gateway: PaymentGateway,
) -> Booking:
    # NotFoundError propagates before the gateway is touched
    booking = get_booking(session, booking_id)

    if not gateway.charge(booking, payment_ref):
        logger.warning("Payment %r declined for booking %s", payment_ref, booking.id)
        raise PaymentError("Payment declined")

    # unconditional write, so repeated payments are harmless
    booking.payment_status = PaymentStatus.paid.value
    session.add(booking)
    session.commit()
    session.refresh(booking)

    logger.info("Booking %s marked as paid (ref %s)", booking.id, payment_ref)
    return booking
