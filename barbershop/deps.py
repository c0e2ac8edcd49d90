# barbershop/deps.py

from typing import Optional

from fastapi import Cookie, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from barbershop.auth import decode_access_token, token_from_request
from barbershop.config import Settings
from barbershop.context import AppContext
from barbershop.models import Barber
from barbershop.storage import ImageStorage
from barbershop.stores.barbers import get_barber


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_settings(context: AppContext = Depends(get_context)) -> Settings:
    return context.settings


def get_storage(context: AppContext = Depends(get_context)) -> ImageStorage:
    return context.storage


# one session per request
def get_session(context: AppContext = Depends(get_context)):
    with Session(context.engine) as session:
        yield session


bearer_scheme = HTTPBearer(auto_error=False)


def get_current_barber(
    access_token: Optional[str] = Cookie(default=None),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
    session: Session = Depends(get_session),
) -> Barber:
    # header wins over the cookie when both are present
    bearer_token = credentials.credentials if credentials else None
    token = token_from_request(access_token, bearer_token)
    barber_id = decode_access_token(token, settings)
    return get_barber(session, barber_id)
