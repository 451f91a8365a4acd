"""
Test configuration and fixtures for the FastAPI link shortener.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from main import app
from shortlink_app.database.connection import Base, get_session_factory
from shortlink_app.services.id_generator_factory import IdGeneratorFactory

# Test database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_engine():
    return engine


@pytest.fixture(scope="function")
def db_session_factory():
    """
    Create fresh tables for each test and hand out the session factory.
    This ensures tests are isolated and don't affect each other.
    """
    Base.metadata.create_all(bind=engine)

    try:
        yield TestingSessionLocal
    finally:
        Base.metadata.drop_all(bind=engine)
        IdGeneratorFactory.clear_instances()


@pytest.fixture(scope="function")
def client(db_session_factory):
    """
    Create a test client with the session factory overridden.
    This is the main fixture that tests will use.
    """
    app.dependency_overrides[get_session_factory] = lambda: db_session_factory

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
