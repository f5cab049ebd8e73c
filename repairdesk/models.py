# repairdesk/models.py

from typing import Optional, List

from sqlalchemy.types import JSON
from sqlmodel import SQLModel, Field, Column


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str = Field(index=True, unique=True)
    password_hash: str
    role: str = "user"  # user, technician or admin


class Technician(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", unique=True, index=True)  # one per user
    location: str = Field(index=True)
    available_slots: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    service_fee: float


class Problem(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str


class DeviceType(SQLModel, table=True):
    __tablename__ = "device_type"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    image: Optional[str] = None


class Brand(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    image: Optional[str] = None


class DeviceModel(SQLModel, table=True):
    __tablename__ = "device_model"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    brand_id: int = Field(foreign_key="brand.id", index=True)
    image: Optional[str] = None


class Booking(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    user_id: str = Field(index=True)  # requester
    problem: str
    device_type: str
    brand: str
    model: str
    technician_id: int = Field(index=True)
    time_slot: str
    status: str = "Pending"  # never transitioned here
    payment_status: str = "Pending"
