# barbershop/schemas.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _length_to_str(value):
    # clients send durations as "30 min" or as a bare number
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class Message(BaseModel):
    message: str


# ---- barbers / auth ----

class LoginRequest(BaseModel):
    email: str
    password: str


class BarberCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="fName", min_length=1)
    last_name: str = Field(alias="lName", min_length=1)
    email: str
    password: str = Field(min_length=1)
    work_weekends: Optional[bool] = Field(default=None, alias="workWeekends")
    opening_hour: Optional[int] = Field(default=None, alias="openingHour", ge=0, le=23)
    closing_hour: Optional[int] = Field(default=None, alias="closingHour", ge=0, le=24)


class BarberDelete(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    barber_id: str = Field(alias="barberId")


class BarberPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(serialization_alias="_id")
    first_name: str = Field(serialization_alias="fName")
    last_name: str = Field(serialization_alias="lName")
    email: str
    image_url: str = Field(serialization_alias="imageURL")
    role: str
    work_weekends: Optional[bool] = Field(default=None, serialization_alias="workWeekends")
    opening_hour: Optional[int] = Field(default=None, serialization_alias="openingHour")
    closing_hour: Optional[int] = Field(default=None, serialization_alias="closingHour")


class AuthResponse(BarberPublic):
    message: str
    access_token: str = Field(serialization_alias="accessToken")


# ---- services ----

class ServiceCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    barber_id: str = Field(alias="barberID")
    title: str = Field(min_length=1)
    description: Optional[str] = None
    price: float = Field(ge=0)
    length: Optional[str] = None

    @field_validator("length", mode="before")
    @classmethod
    def normalize_length(cls, value):
        return _length_to_str(value)


class ServiceDelete(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    service_id: str = Field(alias="serviceID")


class ServicePublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(serialization_alias="_id")
    barber_id: str = Field(serialization_alias="barberID")
    title: str
    length: Optional[str] = None
    description: Optional[str] = None
    price: float


class ServiceCreated(BaseModel):
    message: str
    id: str = Field(serialization_alias="_id")
    title: str


# ---- appointments ----

class AppointmentCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    barber_id: str = Field(alias="barberID")
    customer_first_name: str = Field(alias="customerFName")
    customer_last_name: str = Field(alias="customerLName")
    customer_email: str = Field(alias="customerEmail")
    customer_phone: str = Field(alias="customerPhone")
    service_id: str = Field(alias="serviceID")
    service_title: str = Field(alias="serviceTitle")
    service_length: Optional[str] = Field(default=None, alias="serviceLength")
    service_price: float = Field(alias="servicePrice")
    date: str
    time: int

    @field_validator("service_length", mode="before")
    @classmethod
    def normalize_length(cls, value):
        return _length_to_str(value)


class AppointmentDelete(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    appointment_id: str = Field(alias="appointmentId")


class AppointmentPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(serialization_alias="_id")
    barber_id: str = Field(serialization_alias="barberID")
    customer_first_name: str = Field(serialization_alias="customerFName")
    customer_last_name: str = Field(serialization_alias="customerLName")
    customer_email: str = Field(serialization_alias="customerEmail")
    customer_phone: str = Field(serialization_alias="customerPhone")
    service_id: str = Field(serialization_alias="serviceID")
    service_title: str = Field(serialization_alias="serviceTitle")
    service_length: Optional[str] = Field(default=None, serialization_alias="serviceLength")
    service_price: float = Field(serialization_alias="servicePrice")
    date: str
    time: int

