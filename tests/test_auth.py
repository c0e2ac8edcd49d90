"""Tests for password hashing and access tokens."""
import pytest
from jose import jwt

from barbershop.auth import (
    create_access_token,
    decode_access_token,
    hash_password,
    token_from_request,
    verify_password,
)
from barbershop.errors import InvalidToken


def test_hash_is_salted_and_verifies():
    first = hash_password("hunter22")
    second = hash_password("hunter22")

    assert first != "hunter22"
    assert first != second
    assert verify_password("hunter22", first)
    assert not verify_password("wrong", first)


def test_hash_uses_ten_rounds():
    # bcrypt format: $2b$<rounds>$...
    assert hash_password("hunter22").split("$")[2] == "10"


def test_token_carries_only_the_barber_id(settings):
    token = create_access_token("abc123", settings)

    claims = jwt.get_unverified_claims(token)
    assert claims == {"sub": "abc123"}
    assert decode_access_token(token, settings) == "abc123"


def test_token_signed_with_other_secret_is_rejected(settings):
    other = settings.model_copy(update={"access_token_secret": "someone-else"})
    token = create_access_token("abc123", other)

    with pytest.raises(InvalidToken):
        decode_access_token(token, settings)


def test_malformed_token_is_rejected(settings):
    with pytest.raises(InvalidToken):
        decode_access_token("not-a-jwt", settings)


def test_token_without_subject_is_rejected(settings):
    token = jwt.encode({"foo": "bar"}, settings.access_token_secret, algorithm=settings.jwt_algorithm)

    with pytest.raises(InvalidToken):
        decode_access_token(token, settings)


def test_bearer_header_wins_over_cookie():
    assert token_from_request("from-cookie", "from-header") == "from-header"
    assert token_from_request("from-cookie", None) == "from-cookie"


def test_missing_token():
    with pytest.raises(InvalidToken):
        token_from_request(None, None)
