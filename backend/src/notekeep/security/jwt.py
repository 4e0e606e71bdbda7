"""JWT token service.

Tokens are stateless: the subject is the username, the expiry is a fixed
duration after issue. Nothing is stored server side, so rotating the secret
invalidates every token issued before the rotation.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Callable, Optional

from jose import JWTError, jwt

from ..config import Settings, get_settings
from ..core.exceptions import InvalidSignatureError, TokenExpiredError

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TokenConfig:
    """Signing secret and lifetime, loaded once at startup."""

    secret_key: str
    algorithm: str = "HS256"
    expires_in: timedelta = timedelta(hours=24)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenConfig":
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.algorithm,
            expires_in=timedelta(minutes=settings.access_token_expire_minutes),
        )


class TokenService:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(self, config: TokenConfig, clock: Optional[Clock] = None):
        self.config = config
        self._clock = clock or _utcnow

    @property
    def expires_in_seconds(self) -> int:
        return int(self.config.expires_in.total_seconds())

    def issue(self, subject: str) -> str:
        """Create a signed token for the given subject (username)."""
        issued_at = int(self._clock().timestamp())
        claims = {
            "sub": subject,
            "iat": issued_at,
            "exp": issued_at + self.expires_in_seconds,
        }
        return jwt.encode(claims, self.config.secret_key, algorithm=self.config.algorithm)

    def verify(self, token: str) -> str:
        """Verify a token and return its subject.

        Raises:
            InvalidSignatureError: malformed token, bad signature or missing subject
            TokenExpiredError: the current time has reached the embedded expiry
        """
        try:
            # expiry is checked below against our own clock
            payload = jwt.decode(
                token,
                self.config.secret_key,
                algorithms=[self.config.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as exc:
            raise InvalidSignatureError(f"Invalid token: {exc}") from exc

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)):
            raise InvalidSignatureError("Token has no expiry")
        if self._clock().timestamp() >= exp:
            raise TokenExpiredError()

        subject = payload.get("sub")
        if not subject:
            raise InvalidSignatureError("Token has no subject")
        return subject


@lru_cache
def get_token_service() -> TokenService:
    """Process-wide token service built from settings."""
    return TokenService(TokenConfig.from_settings(get_settings()))
