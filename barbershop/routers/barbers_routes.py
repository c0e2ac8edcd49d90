# barbershop/routers/barbers_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlmodel import Session

from barbershop.auth import create_access_token, set_access_cookie
from barbershop.config import Settings
from barbershop.deps import get_session, get_settings, get_storage
from barbershop.schemas import AuthResponse, BarberCreate, BarberDelete, BarberPublic, Message
from barbershop.storage import ImageStorage
from barbershop.stores import barbers as barber_store

router = APIRouter(
    prefix="/barbers",
    tags=["barbers"],
)


@router.get("", response_model=List[BarberPublic])
def list_barbers(session: Session = Depends(get_session)):
    return barber_store.list_barbers(session)


@router.post("", response_model=AuthResponse, status_code=201)
def create_barber(
    response: Response,
    f_name: str = Form(..., alias="fName"),
    l_name: str = Form(..., alias="lName"),
    email: str = Form(...),
    password: str = Form(...),
    image: UploadFile = File(...),
    work_weekends: Optional[bool] = Form(None, alias="workWeekends"),
    opening_hour: Optional[int] = Form(None, alias="openingHour"),
    closing_hour: Optional[int] = Form(None, alias="closingHour"),
    session: Session = Depends(get_session),
    storage: ImageStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    # 1) Validate the form the same way a JSON body would be
    try:
        registration = BarberCreate(
            first_name=f_name,
            last_name=l_name,
            email=email,
            password=password,
            work_weekends=work_weekends,
            opening_hour=opening_hour,
            closing_hour=closing_hour,
        )
    except ValidationError as exc:
        raise RequestValidationError(exc.errors())

    # 2) Persist (upload first, then insert)
    content_type = image.content_type or "application/octet-stream"
    barber = barber_store.register_barber(session, storage, registration, image.file.read(), content_type)

    # 3) Sign in the new barber
    token = create_access_token(barber.id, settings)
    set_access_cookie(response, token, settings)

    public = BarberPublic.model_validate(barber)
    return AuthResponse(message="Barber added successfully", access_token=token, **public.model_dump())


@router.delete("", response_model=Message)
def delete_barber(
    body: BarberDelete,
    session: Session = Depends(get_session),
    storage: ImageStorage = Depends(get_storage),
):
    barber_store.delete_barber(session, storage, body.barber_id)
    return {"message": "Barber deleted successfully."}
