"""Database configuration and session management."""

from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base: Any = declarative_base()


class Database:
    """Owns the engine and session factory for one application instance.

    Created when the application starts and disposed when it shuts down.
    """

    def __init__(self, database_url: str) -> None:
        self.engine: Engine = create_engine(database_url, **_engine_options(database_url))
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self) -> Session:
        """Open a new session bound to this database."""
        return self.session_factory()

    def create_all(self) -> None:
        """Create all tables that do not exist yet."""
        # Import all models here so they are registered with Base.metadata
        from pokemon_logger import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        """Close every pooled connection."""
        self.engine.dispose()


def _engine_options(database_url: str) -> dict[str, Any]:
    if database_url.startswith("sqlite"):
        # Sessions are used from FastAPI's worker threads
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
