"""Unit tests for middleware auth (notekeep/middleware/auth.py)."""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from notekeep.core.exceptions import AppError
from notekeep.core.models import ROLE_ADMIN, ROLE_USER
from notekeep.database import get_db_session
from notekeep.middleware import auth as auth_module
from notekeep.middleware.auth import get_current_identity, require_admin, require_authenticated
from notekeep.security.jwt import TokenConfig, TokenService, get_token_service

SECRET = "middleware-secret"


class Dummy:
    def __init__(self, **kw):
        self.__dict__.update(kw)


def make_user(username, *role_names):
    return Dummy(
        id=uuid.uuid4(),
        username=username,
        roles=[Dummy(name=name) for name in role_names],
    )


class FakeUserRepo:
    users = {}

    def __init__(self, session):
        self.session = session

    async def get_by_username(self, username):
        return self.users.get(username)


@pytest.fixture
def token_service():
    return TokenService(TokenConfig(secret_key=SECRET, expires_in=timedelta(minutes=5)))


@pytest.fixture
def client(monkeypatch, token_service):
    FakeUserRepo.users = {
        "user1": make_user("user1", ROLE_USER),
        "admin": make_user("admin", ROLE_ADMIN, ROLE_USER),
    }
    monkeypatch.setattr(auth_module, "UserRepository", FakeUserRepo, raising=True)

    app = FastAPI()

    @app.exception_handler(AppError)
    async def _app_error(request, exc):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.get("/whoami")
    async def whoami(request: Request, identity=Depends(get_current_identity)):
        state = getattr(request.state, "identity", None)
        return {
            "username": identity.username if identity else None,
            "state": state.username if state else None,
        }

    @app.get("/notes")
    async def notes(identity=Depends(require_authenticated)):
        return {"username": identity.username}

    @app.get("/admin")
    async def admin(identity=Depends(require_admin)):
        return {"username": identity.username}

    async def _no_db():
        yield None

    app.dependency_overrides[get_db_session] = _no_db
    app.dependency_overrides[get_token_service] = lambda: token_service
    return TestClient(app)


def _bearer(token: Optional[str]) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"} if token is not None else {}


def test_valid_token_resolves_identity(client, token_service):
    resp = client.get("/whoami", headers=_bearer(token_service.issue("user1")))
    assert resp.status_code == 200
    assert resp.json() == {"username": "user1", "state": "user1"}


def test_missing_header_resolves_to_no_identity(client):
    resp = client.get("/whoami")
    assert resp.status_code == 200
    assert resp.json() == {"username": None, "state": None}


@pytest.mark.parametrize("header", ["Basic abc", "bearer abc", "Bearer", "Token abc"])
def test_malformed_header_resolves_to_no_identity(client, header):
    resp = client.get("/whoami", headers={"Authorization": header})
    assert resp.status_code == 200
    assert resp.json()["username"] is None


def test_forged_token_resolves_to_no_identity(client):
    forged = TokenService(TokenConfig(secret_key="attacker")).issue("admin")
    resp = client.get("/whoami", headers=_bearer(forged))
    assert resp.json()["username"] is None


def test_expired_token_resolves_to_no_identity(client):
    past = datetime.now(timezone.utc) - timedelta(hours=1)
    stale = TokenService(
        TokenConfig(secret_key=SECRET, expires_in=timedelta(minutes=5)), clock=lambda: past
    ).issue("user1")
    resp = client.get("/whoami", headers=_bearer(stale))
    assert resp.json()["username"] is None


def test_deleted_user_resolves_to_no_identity(client, token_service):
    resp = client.get("/whoami", headers=_bearer(token_service.issue("ghost")))
    assert resp.json()["username"] is None


def test_require_authenticated_answers_401_without_identity(client):
    assert client.get("/notes").status_code == 401
    assert client.get("/notes", headers=_bearer("garbage")).status_code == 401


def test_require_authenticated_accepts_identity(client, token_service):
    resp = client.get("/notes", headers=_bearer(token_service.issue("user1")))
    assert resp.status_code == 200
    assert resp.json() == {"username": "user1"}


def test_require_admin_forbids_plain_user(client, token_service):
    resp = client.get("/admin", headers=_bearer(token_service.issue("user1")))
    assert resp.status_code == 403


def test_require_admin_accepts_admin(client, token_service):
    resp = client.get("/admin", headers=_bearer(token_service.issue("admin")))
    assert resp.status_code == 200
    assert resp.json() == {"username": "admin"}


def test_require_admin_without_identity_is_401(client):
    assert client.get("/admin").status_code == 401
