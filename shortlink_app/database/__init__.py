"""
Database access: connection pool, declarative base and time-bounded calls.
"""

from .connection import Base, SessionLocal, engine, get_session_factory
from .bounded import record_best_effort, run_bounded

__all__ = [
    "Base",
    "SessionLocal",
    "engine",
    "get_session_factory",
    "record_best_effort",
    "run_bounded",
]
