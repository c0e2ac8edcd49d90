# barbershop/auth.py

from typing import Optional

from fastapi import Response
from jose import jwt, JWTError
from passlib.context import CryptContext

from barbershop.config import Settings
from barbershop.errors import InvalidToken

BCRYPT_ROUNDS = 10
ACCESS_TOKEN_COOKIE = "access_token"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def create_access_token(barber_id: str, settings: Settings) -> str:
    # only the barber id; no exp claim, the cookie max-age is the only expiry
    return jwt.encode({"sub": barber_id}, settings.access_token_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> str:
    try:
        payload = jwt.decode(token, settings.access_token_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        raise InvalidToken()
    barber_id = payload.get("sub")
    if not barber_id:
        raise InvalidToken()
    return barber_id


def set_access_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        token,
        httponly=True,
        secure=True,
        max_age=settings.cookie_max_age_minutes * 60,
    )


def token_from_request(cookie_token: Optional[str], bearer_token: Optional[str]) -> str:
    token = bearer_token or cookie_token
    if not token:
        raise InvalidToken("Not authenticated.")
    return token
