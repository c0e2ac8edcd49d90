# barbershop/config.py

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration, read from the environment and an optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite:///./barbershop.db",
        description="SQLAlchemy connection string",
    )

    # Tokens
    access_token_secret: str = Field(default="change-me-later", description="JWT signing secret")
    jwt_algorithm: str = Field(default="HS256")
    cookie_max_age_minutes: int = Field(default=15, description="Client-side lifetime of the access_token cookie")

    # Object storage
    bucket_name: str = Field(default="", description="S3 bucket holding profile images")
    bucket_region: str = Field(default="us-east-1")
    access_key: str = Field(default="")
    secret_access_key: str = Field(default="")

    # Application
    cors_origins: List[str] = Field(default=["http://localhost:3000"])
    report_conflicts: bool = Field(
        default=False,
        description="Answer duplicate barbers and booking conflicts with 409 instead of an empty 204",
    )
    debug: bool = False
    log_level: str = "INFO"
    port: int = 9000


@lru_cache
def get_settings() -> Settings:
    return Settings()
