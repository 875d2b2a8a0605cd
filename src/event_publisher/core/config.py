"""Configuration management for Event Publisher."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from event_publisher.core.exceptions import ConfigurationError
from event_publisher.models.credentials import CredentialsBundle, PlatformCredentials

load_dotenv()

MIN_SECRET_LENGTH = 32


def _default_session_file() -> Path:
    return Path(
        os.environ.get(
            "EVENTPUB_SESSION_FILE",
            str(Path.home() / ".config" / "event-publisher" / "session.json"),
        )
    )


@dataclass
class Config:
    """Global configuration for Event Publisher.

    Platform credentials and the admin identity are read from the environment
    (a local ``.env`` file is honoured). Tunables use the EVENTPUB_ prefix.
    Example: EVENTPUB_REQUEST_TIMEOUT=10
    """

    # Meetup
    meetup_api_key: str = field(default_factory=lambda: os.environ.get("MEETUP_API_KEY", ""))
    meetup_group_urlname: str = field(
        default_factory=lambda: os.environ.get("MEETUP_GROUP_URLNAME", "")
    )

    # Eventbrite
    eventbrite_api_key: str = field(
        default_factory=lambda: os.environ.get("EVENTBRITE_API_KEY", "")
    )
    eventbrite_org_id: str = field(default_factory=lambda: os.environ.get("EVENTBRITE_ORG_ID", ""))

    # Admin session
    auth_secret: str = field(default_factory=lambda: os.environ.get("AUTH_SECRET", ""))
    auth_email: str = field(
        default_factory=lambda: os.environ.get("AUTH_EMAIL", "admin@example.com")
    )
    auth_password: str = field(default_factory=lambda: os.environ.get("AUTH_PASSWORD", ""))
    session_ttl_hours: float = field(
        default_factory=lambda: float(os.environ.get("EVENTPUB_SESSION_TTL_HOURS", "24"))
    )
    session_file: Path = field(default_factory=_default_session_file)

    # Execution Settings
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("EVENTPUB_REQUEST_TIMEOUT", "30.0"))
    )
    max_workers: int = field(
        default_factory=lambda: int(os.environ.get("EVENTPUB_MAX_WORKERS", "2"))
    )

    # Timezone used for naive datetimes entered on the command line
    event_timezone: str = field(
        default_factory=lambda: os.environ.get("EVENTPUB_TIMEZONE", "America/Los_Angeles")
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.environ.get("EVENTPUB_LOG_LEVEL", "INFO")
    )
    redact_sensitive: bool = field(
        default_factory=lambda: os.environ.get("EVENTPUB_REDACT_SENSITIVE", "true").lower()
        == "true"
    )

    def validate(self) -> None:
        """Validate that the admin session settings are usable.

        Platform credentials are not checked here; a missing pair only
        disables that platform.

        Raises:
            ConfigurationError: If the signing secret or admin password is unusable.
        """
        if not self.auth_secret:
            raise ConfigurationError(
                "AUTH_SECRET not found. Set it as an environment variable "
                "or pass it to the Config constructor.",
                field="auth_secret",
            )
        if len(self.auth_secret) < MIN_SECRET_LENGTH:
            raise ConfigurationError(
                f"AUTH_SECRET must be at least {MIN_SECRET_LENGTH} characters long",
                field="auth_secret",
            )
        if not self.auth_password:
            raise ConfigurationError(
                "AUTH_PASSWORD not found. Set it as an environment variable.",
                field="auth_password",
            )

    def credentials(self) -> CredentialsBundle:
        """Build the credentials bundle held by this process.

        Returns:
            CredentialsBundle for Meetup and Eventbrite.
        """
        return CredentialsBundle(
            meetup=PlatformCredentials(self.meetup_api_key, self.meetup_group_urlname),
            eventbrite=PlatformCredentials(self.eventbrite_api_key, self.eventbrite_org_id),
        )

    @classmethod
    def from_env(cls) -> "Config":
        """Create a Config instance from environment variables.

        Returns:
            Config instance with values from environment.
        """
        return cls()
