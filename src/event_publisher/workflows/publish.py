"""Publish orchestrator for sending one event to every configured platform."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

from event_publisher.adapters import BasePlatformAdapter, EventbriteAdapter, MeetupAdapter
from event_publisher.auth.gate import CredentialGate
from event_publisher.core.config import Config
from event_publisher.core.exceptions import ConfigurationError, ValidationError
from event_publisher.models.credentials import PLATFORMS, CredentialsBundle
from event_publisher.models.event import EventData
from event_publisher.models.results import PlatformResult, PublishResult, Status

logger = logging.getLogger(__name__)


def build_adapters(config: Config) -> dict[str, BasePlatformAdapter]:
    """Create one adapter per supported platform."""
    options = {"timeout": config.request_timeout, "redact": config.redact_sensitive}
    return {
        "meetup": MeetupAdapter(**options),
        "eventbrite": EventbriteAdapter(**options),
    }


class PublishOrchestrator:
    """Publishes one event to Meetup and Eventbrite.

    Handles:
    - Session authorization (when a gate is configured)
    - Event validation before any platform is contacted
    - Skipping platforms without complete credentials
    - Parallel execution, one worker per platform
    - Isolation of each platform's failure from the others

    Example:
        >>> orchestrator = PublishOrchestrator(config, gate=gate)
        >>> result = orchestrator.publish(event, session_token=token)
        >>> print(result.summary)
    """

    def __init__(
        self,
        config: Config | None = None,
        gate: CredentialGate | None = None,
        adapters: dict[str, BasePlatformAdapter] | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            config: Optional configuration (credentials source and tunables)
            gate: Credential gate checked before every publish. The CLI
                always passes one. Leaving it out skips the session check and
                is meant for library and test use only.
            adapters: Optional adapter overrides keyed by platform name
        """
        self.config = config or Config.from_env()
        self.gate = gate
        self.adapters = adapters or build_adapters(self.config)

    def publish(
        self,
        event: EventData,
        credentials: CredentialsBundle | None = None,
        session_token: str | None = None,
        platforms: list[str] | None = None,
    ) -> PublishResult:
        """Publish ``event`` to every platform with complete credentials.

        Args:
            event: Event to publish
            credentials: Credentials to use. Defaults to the configured ones.
            session_token: Admin session token checked by the gate
            platforms: Restrict publishing to these platforms

        Returns:
            PublishResult with one result per requested platform

        Raises:
            AuthorizationError: If the gate rejects the session token
            ValidationError: If the event is invalid
            ConfigurationError: If no requested platform has credentials
        """
        if self.gate is not None:
            self.gate.require(session_token)

        errors = event.validate()
        if errors:
            raise ValidationError("Event validation failed", errors=errors)

        credentials = credentials or self.config.credentials()
        selected = self._select_platforms(platforms)

        results: dict[str, PlatformResult] = {}
        runnable = []
        for platform in selected:
            adapter = self.adapters[platform]
            if credentials.for_platform(platform).is_complete:
                runnable.append(platform)
            else:
                logger.info(f"Skipping {adapter.display_name}: not configured")
                results[platform] = adapter.not_configured_result()

        if not runnable:
            raise ConfigurationError(
                "No platform credentials supplied",
                details={"platforms": selected},
            )

        logger.info(f"Publishing '{event.title}' to: {', '.join(runnable)}")

        max_workers = max(1, min(self.config.max_workers, len(runnable)))
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {
                executor.submit(
                    self.adapters[platform].create_event,
                    credentials.for_platform(platform),
                    event,
                ): platform
                for platform in runnable
            }

            for future in as_completed(futures):
                platform = futures[future]
                try:
                    results[platform] = future.result()
                except Exception as e:
                    logger.exception(f"Error publishing to {platform}")
                    results[platform] = PlatformResult(
                        platform=platform,
                        status=Status.FAILED,
                        message=f"Failed to publish to {platform.title()}",
                        error=str(e),
                    )

        result = PublishResult(results=[results[p] for p in selected])
        logger.info(result.summary)
        return result

    def _select_platforms(self, platforms: list[str] | None) -> list[str]:
        """Normalize the requested platform list, keeping platform order."""
        if not platforms:
            return [p for p in PLATFORMS if p in self.adapters]

        requested = {p.strip().lower() for p in platforms if p.strip()}
        unknown = requested - set(self.adapters)
        if unknown:
            raise ConfigurationError(f"Unknown platform: {', '.join(sorted(unknown))}")
        return [p for p in PLATFORMS if p in requested]
