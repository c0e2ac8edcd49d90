"""Shared fixtures: an in-memory database and a mocked S3 client per test."""
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from barbershop.config import Settings
from barbershop.context import AppContext
from barbershop.db import init_db
from barbershop.main import create_app
from barbershop.storage import ImageStorage

PNG_BYTES = b"\x89PNG\r\n\x1a\n fake image"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        access_token_secret="test-secret",
        bucket_name="test-bucket",
        bucket_region="us-east-1",
    )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def s3_client():
    return MagicMock()


@pytest.fixture
def storage(s3_client, settings):
    return ImageStorage(s3_client, settings.bucket_name, settings.bucket_region)


@pytest.fixture
def context(settings, engine, storage):
    return AppContext(settings=settings, engine=engine, storage=storage)


@pytest.fixture
def client(context):
    with TestClient(create_app(context)) as client:
        yield client


@pytest.fixture
def register(client):
    """POST /barbers with sensible defaults; keyword arguments override form fields."""

    def _register(**fields):
        form = {
            "fName": "john",
            "lName": "doe",
            "email": "John.Doe@Example.com",
            "password": "s3cret-pass",
        }
        form.update(fields)
        return client.post(
            "/barbers",
            data=form,
            files={"image": ("me.png", PNG_BYTES, "image/png")},
        )

    return _register
