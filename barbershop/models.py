# barbershop/models.py

from typing import Optional
from uuid import uuid4

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


def new_id() -> str:
    return uuid4().hex


class Barber(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("first_name", "last_name", name="uq_barber_name"),
    )

    id: str = Field(default_factory=new_id, primary_key=True)
    first_name: str
    last_name: str
    email: str = Field(index=True)  # lowercased, login key
    password: str  # bcrypt hash
    image_url: str
    role: str = "Barber"

    # schedule configuration, optional
    work_weekends: Optional[bool] = None
    opening_hour: Optional[int] = None
    closing_hour: Optional[int] = None


class Service(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("barber_id", "title", name="uq_service_barber_title"),
    )

    id: str = Field(default_factory=new_id, primary_key=True)
    barber_id: str = Field(index=True)
    title: str
    length: Optional[str] = None
    description: Optional[str] = None
    price: float


class Appointment(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("barber_id", "date", "time", name="uq_barber_slot"),
    )

    id: str = Field(default_factory=new_id, primary_key=True)
    barber_id: str = Field(index=True)

    customer_first_name: str
    customer_last_name: str
    customer_email: str
    customer_phone: str

    # snapshot of the service at booking time
    service_id: str
    service_title: str
    service_length: Optional[str] = None
    service_price: float

    date: str
    time: int
