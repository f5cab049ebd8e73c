# repairdesk/schemas.py

from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # wire format is camelCase, python side stays snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class UserRole(str, Enum):
    user = "user"
    technician = "technician"
    admin = "admin"


class PaymentStatus(str, Enum):
    unpaid = "Unpaid"
    pending = "Pending"
    paid = "Paid"


class UserCreate(BaseModel):
    name: str
    email: str
    password: str = Field(min_length=1, max_length=72)
    role: UserRole = UserRole.user


class LoginRequest(BaseModel):
    email: str
    password: str


class UserPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: UserRole


class LoginResponse(BaseModel):
    message: str
    token: str
    user: UserPublic


class MessageResponse(BaseModel):
    message: str


class BookingCreate(CamelModel):
    # numeric requester ids are stored as strings
    model_config = ConfigDict(coerce_numbers_to_str=True)

    requester_id: str = Field(validation_alias=AliasChoices("requesterId", "userId", "requester_id"))
    problem: str
    device_type: str
    brand: str
    model: str
    time_slot: str
    location: Optional[str] = None


class BookingPublic(CamelModel):
    id: int
    requester_id: str
    problem: str
    device_type: str
    brand: str
    model: str
    technician_id: int
    time_slot: str
    status: str
    payment_status: str


class BookingResult(BaseModel):
    message: str
    booking: BookingPublic


class PaymentRequest(CamelModel):
    booking_id: int
    payment_ref: str


class TechnicianPublic(CamelModel):
    id: int
    user_id: int
    location: str
    available_slots: List[str]
    service_fee: float


class CatalogItemCreate(BaseModel):
    name: str
    image: Optional[str] = None


class CatalogItemPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    image: Optional[str] = None


class DeviceModelCreate(BaseModel):
    name: str
    image: Optional[str] = None


class DeviceModelPublic(CamelModel):
    id: int
    name: str
    brand_id: int
    image: Optional[str] = None
