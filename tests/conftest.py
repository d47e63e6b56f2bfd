"""Pytest configuration and shared fixtures."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lar.api.deps import get_db
from lar.db.base import Base
from lar.main import app
from lar.services.security import create_access_token
from lar.services.user_service import upsert_user


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def db(engine) -> Generator[Session, None, None]:
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db) -> Generator[TestClient, None, None]:
    """Test client whose requests share the test's database session."""

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Factory creating users directly in the database."""

    def _make(user_id: str, **fields):
        fields.setdefault("email", f"{user_id}@example.com")
        return upsert_user(db, id=user_id, **fields)

    return _make


def auth_headers(user_id: str, **claims) -> dict[str, str]:
    """Bearer header for a token issued to ``user_id``."""
    return {"Authorization": f"Bearer {create_access_token(user_id, claims)}"}
