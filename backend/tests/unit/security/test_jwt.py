"""Unit tests for security/jwt.py"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from notekeep.config import Settings
from notekeep.core.exceptions import InvalidSignatureError, TokenExpiredError
from notekeep.security.jwt import TokenConfig, TokenService

SECRET = "unit-secret"


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def service(clock):
    return TokenService(TokenConfig(secret_key=SECRET, expires_in=timedelta(hours=1)), clock=clock)


def test_issue_then_verify_returns_subject(service):
    token = service.issue("user1")
    assert isinstance(token, str)
    assert service.verify(token) == "user1"


def test_claims_use_whole_epoch_seconds(service, clock):
    token = service.issue("user1")
    claims = jwt.get_unverified_claims(token)
    issued = int(clock.now.timestamp())
    assert claims == {"sub": "user1", "iat": issued, "exp": issued + 3600}


def test_token_valid_until_just_before_expiry(service, clock):
    token = service.issue("user1")
    clock.advance(timedelta(minutes=59, seconds=59))
    assert service.verify(token) == "user1"


def test_token_expired_exactly_at_expiry(service, clock):
    token = service.issue("user1")
    clock.advance(timedelta(hours=1))
    with pytest.raises(TokenExpiredError):
        service.verify(token)


def test_wrong_secret_is_invalid_signature(service, clock):
    other = TokenService(TokenConfig(secret_key="other-secret"), clock=clock)
    token = other.issue("user1")
    with pytest.raises(InvalidSignatureError):
        service.verify(token)


def test_malformed_token_is_invalid_signature(service):
    with pytest.raises(InvalidSignatureError):
        service.verify("not.a.jwt")


def test_algorithm_mismatch_is_rejected(service, clock):
    token = jwt.encode(
        {"sub": "user1", "exp": int(clock.now.timestamp()) + 60}, SECRET, algorithm="HS512"
    )
    with pytest.raises(InvalidSignatureError):
        service.verify(token)


def test_missing_subject_is_rejected(service, clock):
    token = jwt.encode({"exp": int(clock.now.timestamp()) + 60}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidSignatureError):
        service.verify(token)


def test_missing_expiry_is_rejected(service):
    token = jwt.encode({"sub": "user1"}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidSignatureError):
        service.verify(token)


def test_rotating_secret_invalidates_issued_tokens(clock):
    old = TokenService(TokenConfig(secret_key="first"), clock=clock)
    new = TokenService(TokenConfig(secret_key="second"), clock=clock)
    with pytest.raises(InvalidSignatureError):
        new.verify(old.issue("user1"))


def test_config_from_settings():
    settings = Settings(secret_key="s3cret", algorithm="HS256", access_token_expire_minutes=30)
    config = TokenConfig.from_settings(settings)
    assert config.secret_key == "s3cret"
    assert config.expires_in == timedelta(minutes=30)
    assert TokenService(config).expires_in_seconds == 1800


def test_default_clock_is_timezone_aware():
    service = TokenService(TokenConfig(secret_key=SECRET))
    token = service.issue("user1")
    claims = jwt.get_unverified_claims(token)
    now = datetime.now(timezone.utc).timestamp()
    assert abs(claims["iat"] - now) < 5
    assert claims["exp"] - claims["iat"] == 24 * 3600
