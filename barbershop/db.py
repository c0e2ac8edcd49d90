# barbershop/db.py

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from barbershop import models  # noqa: F401  registers the tables on SQLModel.metadata


def make_engine(database_url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # required for SQLite + FastAPI
    return create_engine(
        database_url,
        echo=echo,  # set to True to see SQL
        connect_args=connect_args,
        pool_pre_ping=True,
    )


def init_db(engine: Engine) -> None:
    # creates the tables and their unique constraints
    SQLModel.metadata.create_all(engine)
