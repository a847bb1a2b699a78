"""Generate database session"""

from functools import lru_cache
from typing import Generator

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base


@lru_cache
def get_engine(database_url: str, echo: bool = False) -> Engine:
    """One engine (and connection pool) per database URL and echo flag."""
    connect_args = (
        {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    )
    return create_engine(database_url, echo=echo, connect_args=connect_args)


@lru_cache
def get_session_factory(database_url: str, echo: bool = False) -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(database_url, echo))


def init_db(settings: Settings) -> None:
    """Ensure all tables are created"""
    Base.metadata.create_all(bind=get_engine(settings.database_url, settings.sql_echo))


def get_db(request: Request) -> Generator[Session, None, None]:
    """Session per request, bound to the database configured on the running app."""
    settings: Settings = request.app.state.settings
    db = get_session_factory(settings.database_url, settings.sql_echo)()
    try:
        yield db
    finally:
        db.close()
