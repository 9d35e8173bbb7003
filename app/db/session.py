"""
SQLAlchemy engine and session factory for the usage store.

The engine and the session factory are created once by the application
lifespan and handed to the repositories; nothing here keeps module state.
"""

from __future__ import annotations

import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings
from app.db.models import Base

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    """Create the engine for ``settings.database_url``.

    SQLite connections are shared across FastAPI's threadpool workers, so
    the same-thread check is disabled for that dialect.
    """
    connect_args: dict = {}
    if settings.database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        settings.database_url,
        echo=settings.database_echo,
        connect_args=connect_args,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_schema(engine: Engine) -> None:
    """Create the ``user``, ``days`` and ``months`` tables if they are missing."""
    logger.info("Ensuring database schema")
    Base.metadata.create_all(bind=engine)
