"""Database engine, session factory and the user store bootstrap."""

import logging
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from src.config import get_settings

logger = logging.getLogger(__name__)

Base: Any = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``.

    SQLite connections are shared across FastAPI's threadpool workers, so the
    same-thread check is turned off for them.
    """
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


engine = create_db_engine(get_settings().database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create the users table when it does not exist yet."""
    # Registers the models on Base.metadata
    from src import models  # noqa: F401

    bind = bind or engine
    if not inspect(bind).has_table("users"):
        logger.info("Creating users table")
    Base.metadata.create_all(bind=bind)
