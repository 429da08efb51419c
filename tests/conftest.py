# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator

os.environ.setdefault("SUPABASE_JWT_SECRET", "test-supabase-jwt-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from dubhub.db.session import create_tables, drop_tables
from dubhub.db.session import get_db as app_get_session
from dubhub.main import app as fastapi_app
from dubhub.models import Comment, Post, Profile
from tests.factories import make_comment, make_post, make_profile

TEST_DB_URL = "sqlite://"


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    try:
        yield engine
    finally:
        drop_tables(engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def owner(db_session: Session) -> Profile:
    """Uploader of the test post."""
    return make_profile(db_session, "owner")


@pytest.fixture()
def commenter(db_session: Session) -> Profile:
    """User who posts the candidate identification."""
    return make_profile(db_session, "digger")


@pytest.fixture()
def other_user(db_session: Session) -> Profile:
    """Unrelated regular user."""
    return make_profile(db_session, "lurker")


@pytest.fixture()
def moderator(db_session: Session) -> Profile:
    return make_profile(db_session, "mod", moderator=True)


@pytest.fixture()
def artist(db_session: Session) -> Profile:
    return make_profile(db_session, "artist", account_type="artist", verified_artist=True)


@pytest.fixture()
def post(db_session: Session, owner: Profile) -> Post:
    """An unverified clip owned by ``owner``."""
    return make_post(db_session, owner, genre="Techno")


@pytest.fixture()
def comment(db_session: Session, post: Post, commenter: Profile) -> Comment:
    """The commenter's identification on ``post``."""
    return make_comment(db_session, post, commenter, body="This is Surgeon - Magneze")
