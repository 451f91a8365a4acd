"""
FastAPI dependencies for dependency injection.

The session factory (and the connection pool behind it) is created once at
startup and handed to every request through `get_session_factory`. Tests
override that one dependency to point the whole app at a test database.
"""

from fastapi import Depends
from sqlalchemy.orm import sessionmaker

from shortlink_app.database.connection import get_session_factory
from shortlink_app.services.id_generator_factory import IdGeneratorFactory
from shortlink_app.services.id_generators import IdGenerator
from shortlink_app.services.link_service import LinkService


def get_id_generator() -> IdGenerator:
    """Configured id generator (cached by the factory)"""
    return IdGeneratorFactory.create_generator()


def get_link_service(
    session_factory: sessionmaker = Depends(get_session_factory),
    id_generator: IdGenerator = Depends(get_id_generator)
) -> LinkService:
    """
    Get LinkService with all dependencies injected.

    Controllers depend on the service; the service depends on the pool and
    the id generator.
    """
    return LinkService(session_factory=session_factory, id_generator=id_generator)
