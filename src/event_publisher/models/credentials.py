"""Platform credential models."""

from dataclasses import dataclass, field

PLATFORMS = ("meetup", "eventbrite")


@dataclass(frozen=True)
class PlatformCredentials:
    """API token plus the platform scope it acts on.

    Attributes:
        api_key: Bearer token for the platform API
        scope_id: Meetup group URL name or Eventbrite organization id
    """

    api_key: str = field(default="", repr=False)
    scope_id: str = ""

    def missing_fields(self) -> list[str]:
        """List the credential fields that are empty."""
        missing = []
        if not self.api_key:
            missing.append("api_key")
        if not self.scope_id:
            missing.append("scope_id")
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()


@dataclass(frozen=True)
class CredentialsBundle:
    """Credentials for every supported platform for a single request."""

    meetup: PlatformCredentials = field(default_factory=PlatformCredentials)
    eventbrite: PlatformCredentials = field(default_factory=PlatformCredentials)

    def for_platform(self, platform: str) -> PlatformCredentials:
        """Get the credentials for a platform.

        Raises:
            ValueError: If platform is not recognized.
        """
        platform_lower = platform.lower()
        if platform_lower not in PLATFORMS:
            raise ValueError(f"Unknown platform: {platform}")
        return getattr(self, platform_lower)

    def configured_platforms(self) -> list[str]:
        """Platforms whose credential pair is complete."""
        return [p for p in PLATFORMS if self.for_platform(p).is_complete]
