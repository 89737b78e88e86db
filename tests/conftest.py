"""
Pytest configuration and fixtures for GOSHALA forum tests.
"""
import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token
from app.database import Base, get_db, install_sqlite_functions
from app.main import app
from app.models import Comment, Post, PostCategory, PostStatus, User, UserRole

# Use in-memory SQLite for tests with shared connection
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
install_sqlite_functions(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
# Fixture-side session: objects built by the factories stay readable after the
# rows they map are deleted through the API.
FixtureSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
)

# Global session for sharing across requests
_test_session = None


def get_test_db():
    """Get a request-scoped session on the shared test connection."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    global _test_session

    Base.metadata.create_all(bind=engine)
    _test_session = FixtureSessionLocal()
    app.dependency_overrides[get_db] = get_test_db

    yield _test_session

    app.dependency_overrides.clear()
    _test_session.close()
    _test_session = None
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Create a test client."""
    with TestClient(app) as c:
        yield c


def _make_user(db, name, email, role, is_active=True):
    user = User(name=name, email=email, role=role, is_active=is_active)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def author(db):
    return _make_user(db, "Asha Devi", "asha@example.com", UserRole.PRODUCER.value)


@pytest.fixture
def other_user(db):
    return _make_user(db, "Ravi Kumar", "ravi@example.com", UserRole.CONSUMER.value)


@pytest.fixture
def admin_user(db):
    return _make_user(db, "Forum Admin", "admin@example.com", UserRole.ADMIN.value)


@pytest.fixture
def inactive_user(db):
    return _make_user(db, "Dormant", "dormant@example.com", UserRole.EXPERT.value, is_active=False)


def _bearer_headers(user):
    """Bearer headers for a user, as the identity service would issue them."""
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers_for():
    return _bearer_headers


@pytest.fixture
def auth_headers(author):
    return _bearer_headers(author)


@pytest.fixture
def make_post(db, author):
    """Insert a post directly. `age_minutes` pushes created_at into the past."""
    def _make(
        title=None,
        content=None,
        user=None,
        category=PostCategory.GENERAL,
        tags=(),
        is_sticky=False,
        status=PostStatus.PUBLISHED,
        views=0,
        age_minutes=0,
    ):
        post = Post(
            author_id=(user or author).id,
            title=title or {"en": "Hello"},
            content=content or {"en": "Body"},
            category=category,
            tags=list(tags),
            attachments=[],
            is_sticky=is_sticky,
            status=status,
            views=views,
            created_at=datetime.utcnow() - timedelta(minutes=age_minutes),
        )
        db.add(post)
        db.commit()
        db.refresh(post)
        return post

    return _make


@pytest.fixture
def make_comment(db, author):
    def _make(post, content=None, user=None, parent=None):
        comment = Comment(
            post_id=post.id,
            author_id=(user or author).id,
            content=content or {"en": "Nice"},
            parent_comment_id=parent.id if parent is not None else None,
        )
        db.add(comment)
        db.commit()
        db.refresh(comment)
        return comment

    return _make
