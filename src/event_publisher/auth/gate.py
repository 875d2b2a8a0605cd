"""Signed admin sessions and the authorization check for privileged operations."""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

import jwt

from event_publisher.core.exceptions import AuthorizationError

if TYPE_CHECKING:
    from event_publisher.core.config import Config

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=24)


@dataclass(frozen=True)
class Session:
    """Decoded admin session."""

    email: str
    issued_at: datetime
    expires_at: datetime

    @property
    def remaining(self) -> timedelta:
        return self.expires_at - datetime.now(timezone.utc)


@dataclass
class LoginResult:
    """Outcome of a login attempt."""

    success: bool
    token: str = ""
    error: str = ""


class CredentialGate:
    """Issues and checks signed session tokens for the single admin user.

    The signing key and admin identity are passed in explicitly; nothing is
    read from the environment here.

    Example:
        >>> gate = CredentialGate("x" * 32, "admin@example.com", "hunter2")
        >>> result = gate.login("admin@example.com", "hunter2")
        >>> gate.authorize(result.token)
        True
    """

    def __init__(
        self,
        secret_key: str,
        admin_email: str,
        admin_password: str = "",
        ttl: timedelta = DEFAULT_TTL,
    ) -> None:
        """Initialize the gate.

        Args:
            secret_key: HMAC key used to sign tokens
            admin_email: Identity of the only admin user
            admin_password: Admin password checked by ``login``
            ttl: Validity window of issued tokens
        """
        if not secret_key:
            raise ValueError("secret_key is required")
        self._secret_key = secret_key
        self.admin_email = admin_email
        self._admin_password = admin_password
        self.ttl = ttl

    @classmethod
    def from_config(cls, config: Config) -> CredentialGate:
        """Build a gate from validated configuration."""
        config.validate()
        return cls(
            secret_key=config.auth_secret,
            admin_email=config.auth_email,
            admin_password=config.auth_password,
            ttl=timedelta(hours=config.session_ttl_hours),
        )

    def issue_token(self, email: str) -> str:
        """Sign a session token for ``email``."""
        now = datetime.now(timezone.utc)
        payload = {
            "email": email,
            "authenticated": True,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(payload, self._secret_key, algorithm=ALGORITHM)

    def login(self, email: str, password: str) -> LoginResult:
        """Check admin credentials and issue a session token.

        Args:
            email: Submitted email
            password: Submitted password

        Returns:
            LoginResult with a token on success
        """
        email_ok = hmac.compare_digest(email.encode(), self.admin_email.encode())
        password_ok = bool(self._admin_password) and hmac.compare_digest(
            password.encode(), self._admin_password.encode()
        )
        if not (email_ok and password_ok):
            logger.warning("Rejected login attempt")
            return LoginResult(success=False, error="Invalid credentials")

        logger.info(f"Issued session for {email}")
        return LoginResult(success=True, token=self.issue_token(email))

    def get_session(self, token: str | None) -> Session | None:
        """Decode a session token.

        Args:
            token: Token from the session store

        Returns:
            Session if the token is well-formed, correctly signed, unexpired
            and issued to the admin; otherwise None
        """
        if not token:
            return None

        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Session token expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.debug(f"Invalid session token: {e}")
            return None

        if payload.get("authenticated") is not True or payload.get("email") != self.admin_email:
            return None

        return Session(
            email=payload["email"],
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )

    def authorize(self, token: str | None) -> bool:
        """Check whether ``token`` authorizes a privileged operation. Never raises."""
        return self.get_session(token) is not None

    def require(self, token: str | None) -> Session:
        """Get the session for ``token``.

        Raises:
            AuthorizationError: If the token does not authorize the caller
        """
        session = self.get_session(token)
        if session is None:
            raise AuthorizationError("Authentication required", details={"error": "Not authenticated"})
        return session
