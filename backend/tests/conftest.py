"""Pytest configuration and fixtures for backend tests."""

from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.db.base import Base
from app.main import app
from app.models import User, Post


def make_engine():
    """Create an in-memory SQLite database engine with all tables."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine


def seed_users(session, count: int, posts_per_user: Optional[Dict[int, int]] = None) -> List[User]:
    """
    Insert users U1..U<count> with ids 1..count and the requested posts.

    ``posts_per_user`` maps a 1-based user index to how many posts it owns.
    """
    posts_per_user = posts_per_user or {}
    users = [User(id=i, name=f"U{i}", email=f"u{i}@example.com") for i in range(1, count + 1)]
    session.add_all(users)
    session.flush()
    for index, post_count in posts_per_user.items():
        for n in range(post_count):
            session.add(Post(user_id=index, title=f"Post {n} by U{index}"))
    session.commit()
    return users


@pytest.fixture
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    return make_engine()


@pytest.fixture
def db_session(db_engine):
    """Create a database session for testing."""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_session):
    """TestClient whose requests run against the in-memory test session."""

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
