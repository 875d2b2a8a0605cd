"""Base platform adapter for event publishing."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

import requests

from event_publisher.core.exceptions import TransportError
from event_publisher.core.http import DEFAULT_TIMEOUT, PlatformHTTPClient
from event_publisher.models.credentials import PlatformCredentials
from event_publisher.models.event import EventData
from event_publisher.models.results import PlatformResult, Status

logger = logging.getLogger(__name__)


class BasePlatformAdapter(ABC):
    """Base adapter with common functionality for event platforms.

    Each platform adapter provides:
    - Translation of EventData into the platform's request schema
    - The platform's network protocol for creating an event
    - A lightweight authenticated read to test credentials
    - Normalization of every outcome into a PlatformResult

    Public methods never raise. Missing credentials, transport failures and
    platform errors all come back as failed results.

    Subclasses must implement:
    - _create_event: Create the event once credentials are known to be present
    - _test_connection: Verify credentials once they are known to be present

    Example:
        >>> class MyPlatformAdapter(BasePlatformAdapter):
        ...     name = "myplatform"
        ...     base_url = "https://api.myplatform.com"
        ...
        ...     def _create_event(self, client, credentials, event):
        ...         response = client.post("/events", {...})
        ...         return self._published_result("Created", event_id=response.data["id"])
    """

    # Class attributes to be overridden
    name: str = "base"
    display_name: str = "Base"
    base_url: str = ""
    api_key_label: str = "API key"
    scope_label: str = "scope"

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session_factory: Callable[[], requests.Session] | None = None,
        redact: bool = True,
    ) -> None:
        """Initialize the adapter.

        Args:
            timeout: Per-request timeout in seconds
            session_factory: Optional factory for requests sessions
            redact: Whether to redact sensitive payload keys in debug logs
        """
        self.timeout = timeout
        self.session_factory = session_factory or requests.Session
        self.redact = redact

    def create_event(self, credentials: PlatformCredentials, event: EventData) -> PlatformResult:
        """Create and publish ``event`` on this platform.

        Args:
            credentials: API key and scope identifier
            event: Event to publish

        Returns:
            PlatformResult describing the outcome
        """
        missing = self.check_credentials(credentials)
        if missing:
            return missing

        logger.info(f"Creating {self.display_name} event: {event.title}")
        try:
            with self._client(credentials) as client:
                result = self._create_event(client, credentials, event)
        except TransportError as e:
            logger.error(f"{self.display_name} API error: {e.message}")
            return self._failed_result(f"Failed to connect to {self.display_name} API", e.message)
        except Exception as e:
            logger.exception(f"Unexpected error creating {self.display_name} event")
            return self._failed_result(f"Failed to create {self.display_name} event", str(e))

        logger.info(f"{self.display_name}: {result.status.value}")
        return result

    def test_connection(self, credentials: PlatformCredentials) -> PlatformResult:
        """Verify that ``credentials`` are accepted by the platform.

        Args:
            credentials: API key and scope identifier

        Returns:
            PlatformResult whose message names the authenticated identity
        """
        missing = self.check_credentials(credentials)
        if missing:
            return missing

        try:
            with self._client(credentials) as client:
                return self._test_connection(client, credentials)
        except TransportError as e:
            logger.error(f"{self.display_name} connection test error: {e.message}")
            return self._failed_result(f"Failed to connect to {self.display_name} API", e.message)
        except Exception as e:
            logger.exception(f"Unexpected error testing {self.display_name} connection")
            return self._failed_result(f"Failed to connect to {self.display_name} API", str(e))

    @abstractmethod
    def _create_event(
        self,
        client: PlatformHTTPClient,
        credentials: PlatformCredentials,
        event: EventData,
    ) -> PlatformResult:
        """Platform-specific event creation.

        Args:
            client: HTTP client authenticated with the credentials' API key
            credentials: Complete credentials
            event: Event to publish

        Returns:
            PlatformResult for the attempt
        """
        raise NotImplementedError

    @abstractmethod
    def _test_connection(
        self,
        client: PlatformHTTPClient,
        credentials: PlatformCredentials,
    ) -> PlatformResult:
        """Platform-specific credential check."""
        raise NotImplementedError

    def check_credentials(self, credentials: PlatformCredentials) -> PlatformResult | None:
        """Check that both credential fields are present.

        Args:
            credentials: Credentials to check

        Returns:
            A failed result citing the first missing field, or None if complete
        """
        missing = credentials.missing_fields()
        if not missing:
            return None

        label = self.api_key_label if missing[0] == "api_key" else self.scope_label
        return self._failed_result(
            f"{self.display_name} {label} is required",
            f"Missing {label}",
            data={"missing": missing},
        )

    def _client(self, credentials: PlatformCredentials) -> PlatformHTTPClient:
        return PlatformHTTPClient(
            self.base_url,
            credentials.api_key,
            platform=self.name,
            timeout=self.timeout,
            session=self.session_factory(),
            redact=self.redact,
        )

    def _published_result(
        self,
        message: str,
        event_id: str = "",
        event_url: str = "",
        error: str = "",
        status: Status = Status.PUBLISHED,
        data: dict[str, Any] | None = None,
    ) -> PlatformResult:
        """Create a result for an event that now exists on the platform."""
        return PlatformResult(
            platform=self.name,
            status=status,
            message=message,
            event_id=str(event_id or ""),
            event_url=event_url or "",
            error=error,
            data=data or {},
        )

    def _success_result(self, message: str, data: dict[str, Any] | None = None) -> PlatformResult:
        """Create a successful result that did not create anything."""
        return PlatformResult(
            platform=self.name,
            status=Status.SUCCESS,
            message=message,
            data=data or {},
        )

    def _failed_result(
        self,
        message: str,
        error: str,
        data: dict[str, Any] | None = None,
    ) -> PlatformResult:
        """Create a failed result.

        Args:
            message: Human-readable summary
            error: Error detail
            data: Extra details

        Returns:
            PlatformResult with failed status
        """
        return PlatformResult(
            platform=self.name,
            status=Status.FAILED,
            message=message,
            error=error,
            data=data or {},
        )

    def not_configured_result(self, error: str = "") -> PlatformResult:
        """Create a result for a platform without configured credentials."""
        return PlatformResult(
            platform=self.name,
            status=Status.NOT_CONFIGURED,
            message=f"{self.display_name} is not configured",
            error=error or f"Missing {self.display_name} credentials",
        )
