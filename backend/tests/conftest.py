"""Shared pytest fixtures configured to use SQLite in-memory databases."""

import logging
import os
from datetime import timedelta

# Tell app lifespan to skip real DB init; must be set before the app is imported
os.environ.setdefault("NOTEKEEP_SKIP_LIFESPAN_DB", "1")
os.environ.setdefault("LOG_DIR", os.path.join(os.path.dirname(__file__), ".logs"))

import pytest
from httpx import ASGITransport, AsyncClient
from passlib.context import CryptContext
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from notekeep.config import Settings, get_settings
from notekeep.core.models import ROLE_ADMIN, ROLE_USER, BaseModel, Role, User
from notekeep.database import get_db_session
from notekeep.main import app
from notekeep.security import password as password_module
from notekeep.security.jwt import TokenConfig, TokenService, get_token_service

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_SECRET = "test-secret-key"


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    """Minimum bcrypt cost so hashing does not dominate test time."""
    monkeypatch.setattr(
        password_module,
        "pwd_context",
        CryptContext(
            schemes=["bcrypt_sha256", "bcrypt"],
            deprecated="auto",
            bcrypt_sha256__rounds=4,
            bcrypt__rounds=4,
        ),
    )


@pytest.fixture
def test_settings():
    """Settings pointing at an in-memory SQLite database."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key=TEST_SECRET,
        debug=True,
    )


@pytest.fixture
def token_service():
    return TokenService(TokenConfig(secret_key=TEST_SECRET, expires_in=timedelta(hours=24)))


@pytest.fixture
async def test_engine(test_settings):
    """Fresh in-memory engine with the schema created."""
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
        hide_parameters=True,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite only enforces foreign keys when asked to
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_maker(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_session(session_maker):
    """Session for arranging and asserting database state directly."""
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
async def roles(test_session):
    """Seeded ROLE_USER and ROLE_ADMIN rows, keyed by name."""
    seeded = {name: Role(name=name) for name in (ROLE_USER, ROLE_ADMIN)}
    test_session.add_all(seeded.values())
    await test_session.commit()
    return seeded


@pytest.fixture
def make_user(test_session, roles):
    """Factory creating a user with the given role names."""

    async def _make_user(username: str, password: str = "password", role_names=(ROLE_USER,)):
        user = User(
            username=username,
            password_hash=password_module.hash_password(password),
            roles=[roles[name] for name in role_names],
        )
        test_session.add(user)
        await test_session.commit()
        await test_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
async def user1(make_user):
    return await make_user("user1")


@pytest.fixture
async def user2(make_user):
    return await make_user("user2")


@pytest.fixture
async def admin(make_user):
    return await make_user("admin", "adminpass", role_names=(ROLE_ADMIN, ROLE_USER))


@pytest.fixture
def auth_headers(token_service):
    """Build an Authorization header for a username."""

    def _headers(username: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token_service.issue(username)}"}

    return _headers


@pytest.fixture
def test_app(session_maker, test_settings, token_service):
    """App with DB, settings and token service overridden for tests."""

    async def _override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_token_service] = lambda: token_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """Async HTTP client bound to the app in the test's event loop."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac
