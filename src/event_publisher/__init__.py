"""Event Publisher - publish one event to Meetup and Eventbrite.

This package provides both a library interface and CLI for:
- Signing in as the single admin user
- Testing the configured Meetup and Eventbrite credentials
- Publishing one event to every configured platform

Library Usage:
    >>> from datetime import datetime, timezone
    >>> from event_publisher import Config, CredentialGate, EventData, PublishOrchestrator
    >>>
    >>> config = Config()
    >>> gate = CredentialGate.from_config(config)
    >>> token = gate.login(config.auth_email, "password").token
    >>> event = EventData(
    ...     title="AI Workshop",
    ...     description="Learn AI basics with hands-on exercises.",
    ...     start=datetime(2025, 1, 25, 23, 0, tzinfo=timezone.utc),
    ...     end=datetime(2025, 1, 26, 1, 0, tzinfo=timezone.utc),
    ...     venue="The Station, Philadelphia",
    ... )
    >>>
    >>> result = PublishOrchestrator(config, gate=gate).publish(event, session_token=token)
    >>> print(result.summary)

CLI Usage:
    $ event-publisher login
    $ event-publisher test-connection
    $ event-publisher publish --title "AI Workshop" --start 2025-01-25T18:00 ...
"""

__version__ = "0.1.0"

# Core
from event_publisher.core.config import Config
from event_publisher.core.exceptions import (
    AuthorizationError,
    ConfigurationError,
    EventPublisherError,
    PlatformRejection,
    TransportError,
    ValidationError,
)

# Auth
from event_publisher.auth import CredentialGate, Session, SessionStore

# Models
from event_publisher.models import (
    CredentialsBundle,
    EventData,
    PlatformCredentials,
    PlatformResult,
    PublishResult,
    Status,
)

# Adapters
from event_publisher.adapters import (
    BasePlatformAdapter,
    EventbriteAdapter,
    MeetupAdapter,
)

# Workflows
from event_publisher.workflows import ConnectivityProbe, PublishOrchestrator

__all__ = [
    # Version
    "__version__",
    # Core
    "Config",
    "EventPublisherError",
    "AuthorizationError",
    "ConfigurationError",
    "PlatformRejection",
    "TransportError",
    "ValidationError",
    # Auth
    "CredentialGate",
    "Session",
    "SessionStore",
    # Models
    "CredentialsBundle",
    "EventData",
    "PlatformCredentials",
    "PlatformResult",
    "PublishResult",
    "Status",
    # Adapters
    "BasePlatformAdapter",
    "EventbriteAdapter",
    "MeetupAdapter",
    # Workflows
    "ConnectivityProbe",
    "PublishOrchestrator",
]
