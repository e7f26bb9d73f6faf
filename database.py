import os
import logging
from functools import lru_cache
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

CONNECTION_STRING_ENV = "CARS_DB_CONNECTION_STRING"

Base = declarative_base()


class MissingConnectionStringError(RuntimeError):
    """Raised when CARS_DB_CONNECTION_STRING is not set."""


def get_connection_string() -> Optional[str]:
    value = os.getenv(CONNECTION_STRING_ENV, "").strip()
    return value or None


def normalize_db_url(raw_url: str) -> str:
    # Render/Heroku style URLs carry no driver; we talk to Postgres through pg8000
    if raw_url.startswith("postgresql://"):
        return raw_url.replace("postgresql://", "postgresql+pg8000://", 1)
    if raw_url.startswith("postgres://"):
        return raw_url.replace("postgres://", "postgresql+pg8000://", 1)
    return raw_url


def create_db_engine(raw_url: str) -> Engine:
    return create_engine(normalize_db_url(raw_url), pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Engine built from the environment, created on first use."""
    raw_url = get_connection_string()
    if raw_url is None:
        raise MissingConnectionStringError(
            f"{CONNECTION_STRING_ENV} environment variable is not set"
        )
    logger.info("Creating database engine from %s", CONNECTION_STRING_ENV)
    return create_db_engine(raw_url)



def get_db():
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
