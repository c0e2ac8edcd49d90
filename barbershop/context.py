# barbershop/context.py

from dataclasses import dataclass

from sqlalchemy.engine import Engine

from barbershop.config import Settings
from barbershop.db import make_engine
from barbershop.storage import ImageStorage


@dataclass
class AppContext:
    """Everything a request handler needs; built once per application."""

    settings: Settings
    engine: Engine
    storage: ImageStorage

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        return cls(
            settings=settings,
            engine=make_engine(settings.database_url, echo=settings.debug),
            storage=ImageStorage.from_settings(settings),
        )
