"""
Database configuration and base model.

Uses SQLAlchemy 2.0 declarative style with SQLite.
"""

from pathlib import Path
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from config import PATHS, init_config


def get_database_path() -> Path:
    """Get the path to the SQLite database file."""
    return PATHS.database


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def create_db_engine(url: Optional[str] = None) -> Engine:
    """
    Create a database engine.

    Args:
        url: SQLAlchemy URL (default: SQLite file in the user data dir)
    """
    if url is None:
        init_config()
        url = f"sqlite:///{get_database_path()}"
    return create_engine(
        url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


def create_session_factory(bind: Engine) -> sessionmaker:
    """Session factory bound to an engine."""
    return sessionmaker(bind=bind, autocommit=False, autoflush=False)


@contextmanager
def get_session(factory: sessionmaker) -> Generator[Session, None, None]:
    """Context manager for database sessions."""
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(bind: Engine) -> None:
    """Initialize the database, creating all tables."""
    # Register table metadata
    import models.setting  # noqa: F401
    Base.metadata.create_all(bind=bind)
