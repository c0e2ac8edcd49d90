# barbershop/routers/auth_routes.py

from fastapi import APIRouter, Depends, Response
from sqlmodel import Session

from barbershop.auth import create_access_token, set_access_cookie
from barbershop.config import Settings
from barbershop.deps import get_current_barber, get_session, get_settings
from barbershop.models import Barber
from barbershop.schemas import AuthResponse, BarberPublic, LoginRequest
from barbershop.stores.barbers import authenticate

router = APIRouter(
    tags=["auth"],
)


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    response: Response,
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    barber = authenticate(session, credentials.email, credentials.password)

    token = create_access_token(barber.id, settings)
    set_access_cookie(response, token, settings)

    public = BarberPublic.model_validate(barber)
    return AuthResponse(message="Login successful", access_token=token, **public.model_dump())


@router.get("/me", response_model=BarberPublic)
def me(current_barber: Barber = Depends(get_current_barber)):
    return current_barber
