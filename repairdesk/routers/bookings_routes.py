# repairdesk/routers/bookings_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlmodel import Session

from repairdesk.db import get_session
from repairdesk.models import Booking, User
from repairdesk.schemas import BookingCreate, BookingPublic, BookingResult, PaymentRequest
from repairdesk.auth import get_current_user
from repairdesk.errors import NotFoundError, PaymentError
from repairdesk.services.booking import create_booking, get_booking, list_bookings_for_user
from repairdesk.services.payment import PaymentGateway, confirm_payment

router = APIRouter(
    tags=["bookings"],
)


def get_payment_gateway(request: Request) -> PaymentGateway:
    return request.app.state.payment_gateway


def get_service_location(request: Request) -> str:
    return request.app.state.service_location


def booking_public(booking: Booking) -> BookingPublic:
    return BookingPublic(
        id=booking.id,
        requester_id=booking.user_id,
        problem=booking.problem,
        device_type=booking.device_type,
        brand=booking.brand,
        model=booking.model,
        technician_id=booking.technician_id,
        time_slot=booking.time_slot,
        status=booking.status,
        payment_status=booking.payment_status,
    )


@router.post("/book", response_model=BookingResult, status_code=201)
def book(
    data: BookingCreate,
    session: Session = Depends(get_session),
    location: str = Depends(get_service_location),
):
    try:
        booking = create_booking(session, data, location)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {"message": "Booking created successfully", "booking": booking_public(booking)}


@router.post("/pay", response_model=BookingResult)
def pay(
    payment: PaymentRequest,
    session: Session = Depends(get_session),
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    try:
        booking = confirm_payment(session, payment.booking_id, payment.payment_ref, gateway)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PaymentError as e:
        raise HTTPException(status_code=402, detail=str(e))

    return {"message": "Payment successful", "booking": booking_public(booking)}


# declared before /bookings/{booking_id} so "me" isn't parsed as an id
@router.get("/bookings/me", response_model=List[BookingPublic])
def list_my_bookings(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    bookings = list_bookings_for_user(session, str(current_user.id))
    return [booking_public(b) for b in bookings]


@router.get("/bookings/{booking_id}", response_model=BookingPublic)
def read_booking(
    booking_id: int,
    session: Session = Depends(get_session),
):
    try:
        booking = get_booking(session, booking_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return booking_public(booking)
