"""Connectivity probe for the configured platform credentials."""

import logging

from event_publisher.adapters import BasePlatformAdapter
from event_publisher.auth.gate import CredentialGate
from event_publisher.core.config import Config
from event_publisher.models.credentials import PLATFORMS, CredentialsBundle
from event_publisher.models.results import PlatformResult
from event_publisher.workflows.publish import build_adapters

logger = logging.getLogger(__name__)

# Environment variables behind each credential field
ENV_NAMES = {
    "meetup": {"api_key": "MEETUP_API_KEY", "scope_id": "MEETUP_GROUP_URLNAME"},
    "eventbrite": {"api_key": "EVENTBRITE_API_KEY", "scope_id": "EVENTBRITE_ORG_ID"},
}


class ConnectivityProbe:
    """Checks each platform's credentials with one authenticated read.

    Example:
        >>> probe = ConnectivityProbe(config, gate=gate)
        >>> for result in probe.test_all(session_token=token):
        ...     print(result.platform, result.message)
    """

    def __init__(
        self,
        config: Config | None = None,
        gate: CredentialGate | None = None,
        adapters: dict[str, BasePlatformAdapter] | None = None,
    ) -> None:
        """Initialize the probe.

        Args:
            config: Optional configuration (credentials source and tunables)
            gate: Credential gate checked before every probe. Leaving it out
                skips the session check and is meant for library and test
                use only.
            adapters: Optional adapter overrides keyed by platform name
        """
        self.config = config or Config.from_env()
        self.gate = gate
        self.adapters = adapters or build_adapters(self.config)

    def test(
        self,
        platform: str,
        credentials: CredentialsBundle | None = None,
        session_token: str | None = None,
    ) -> PlatformResult:
        """Test one platform's credentials.

        Args:
            platform: Platform name
            credentials: Credentials to test. Defaults to the configured ones.
            session_token: Admin session token checked by the gate

        Returns:
            PlatformResult for the platform

        Raises:
            AuthorizationError: If the gate rejects the session token
            ValueError: If platform is not recognized
        """
        if self.gate is not None:
            self.gate.require(session_token)
        return self._probe(platform.lower(), credentials or self.config.credentials())

    def test_all(
        self,
        credentials: CredentialsBundle | None = None,
        session_token: str | None = None,
    ) -> list[PlatformResult]:
        """Test every platform, one after the other.

        Raises:
            AuthorizationError: If the gate rejects the session token
        """
        if self.gate is not None:
            self.gate.require(session_token)
        credentials = credentials or self.config.credentials()
        return [self._probe(platform, credentials) for platform in PLATFORMS]

    def _probe(self, platform: str, credentials: CredentialsBundle) -> PlatformResult:
        adapter = self.adapters.get(platform)
        if adapter is None:
            raise ValueError(f"Unknown platform: {platform}")

        platform_credentials = credentials.for_platform(platform)
        missing = platform_credentials.missing_fields()
        if missing:
            env_name = ENV_NAMES[platform][missing[0]]
            label = adapter.api_key_label if missing[0] == "api_key" else adapter.scope_label
            result = adapter.not_configured_result(
                f"Missing {env_name} in environment variables"
            )
            result.message = f"{adapter.display_name} {label} not configured"
            return result

        logger.info(f"Testing {adapter.display_name} connection")
        return adapter.test_connection(platform_credentials)
