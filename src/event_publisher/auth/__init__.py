"""Admin session handling."""

from event_publisher.auth.gate import CredentialGate, LoginResult, Session
from event_publisher.auth.store import SessionStore

__all__ = [
    "CredentialGate",
    "LoginResult",
    "Session",
    "SessionStore",
]
