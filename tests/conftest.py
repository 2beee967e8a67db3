"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
application at a throwaway in-memory database before anything imports it.
"""

import os
import sys
from pathlib import Path

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from domain.models import Base, engine, SessionLocal
from main import app


@pytest.fixture(autouse=True)
def reset_database():
    """Fresh schema for every test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """HTTP client with its own cookie jar (one browser, one session)"""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def other_client() -> Generator[TestClient, None, None]:
    """A second, independent browser"""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """
    Database session for repository and service tests.

    Shares the in-memory database with the application, so rows written
    over HTTP are visible here and vice versa.
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
