"""
Database engine and session factory.

The engine owns the connection pool. It is created once at import time and
shared by every request; handlers receive the session factory through
`get_session_factory` instead of importing it directly.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from shortlink_app.config import settings


def build_engine(database_url: str):
    """Create an engine for the given URL with pool settings from config"""
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        # Sessions are used from worker threads (see database.bounded)
        return create_engine(database_url, connect_args={"check_same_thread": False})

    return create_engine(
        database_url,
        pool_size=settings.database_pool_size,
        pool_pre_ping=True,
    )


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_session_factory() -> sessionmaker:
    """FastAPI dependency: the process-wide session factory"""
    return SessionLocal
