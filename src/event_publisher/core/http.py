"""HTTP client used by the platform adapters."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import requests

from event_publisher.core.exceptions import TransportError
from event_publisher.utils.sanitization import redact_sensitive_data

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass
class ApiResponse:
    """Parsed response from a platform API call.

    Attributes:
        status_code: HTTP status code
        data: Decoded JSON body (empty dict when the body is not JSON)
        text: Raw response body
        is_json: Whether the body decoded as JSON
    """

    status_code: int
    data: Any = field(default_factory=dict)
    text: str = ""
    is_json: bool = True

    @property
    def ok(self) -> bool:
        """Check if the status code is 2xx."""
        return 200 <= self.status_code < 300

    def error_message(self, fallback: str = "") -> str:
        """Get the platform's error text for a failed call.

        Args:
            fallback: Message used when the body carries no error fields

        Returns:
            ``error_description``, then ``error``, then the fallback or HTTP status
        """
        if isinstance(self.data, dict):
            message = self.data.get("error_description") or self.data.get("error")
            if message:
                return str(message)
        return fallback or f"HTTP {self.status_code}"


class PlatformHTTPClient:
    """Thin wrapper around ``requests.Session`` for one platform call sequence.

    Every request carries the bearer token and a JSON content type, and is
    bounded by ``timeout``. Nothing is retried.

    Example:
        >>> client = PlatformHTTPClient("https://www.eventbriteapi.com/v3", "token")
        >>> response = client.get("/users/me/")
        >>> response.ok
        True
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        platform: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
        redact: bool = True,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL that request paths are appended to
            token: Bearer token for the Authorization header
            platform: Platform name used in logs and errors
            timeout: Per-request timeout in seconds
            session: Optional pre-built requests session
            redact: Whether to redact sensitive payload keys in debug logs
        """
        self.base_url = base_url.rstrip("/")
        self.platform = platform
        self.timeout = timeout
        self.redact = redact
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

    def _url(self, path: str) -> str:
        if not path:
            return self.base_url
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str = "",
        payload: dict[str, Any] | None = None,
    ) -> ApiResponse:
        """Send a request and decode the response.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            payload: Optional JSON body

        Returns:
            ApiResponse for any HTTP status

        Raises:
            TransportError: If the request could not be completed
        """
        url = self._url(path)
        logger.debug(f"{self.platform or 'http'}: {method} {url}")
        if payload is not None:
            logged = redact_sensitive_data(payload) if self.redact else payload
            logger.debug(f"Payload: {json.dumps(logged, default=str)}")

        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise TransportError(
                f"Request to {url} timed out after {self.timeout}s",
                platform=self.platform,
                details={"error": str(e)},
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(
                str(e) or f"Request to {url} failed",
                platform=self.platform,
                details={"error_type": type(e).__name__},
            ) from e

        try:
            data = response.json()
            is_json = True
        except ValueError:
            data = {}
            is_json = False

        logger.debug(f"{self.platform or 'http'}: {method} {url} -> {response.status_code}")
        return ApiResponse(
            status_code=response.status_code,
            data=data,
            text=response.text,
            is_json=is_json,
        )

    def get(self, path: str = "") -> ApiResponse:
        """Send a GET request."""
        return self.request("GET", path)

    def post(self, path: str = "", payload: dict[str, Any] | None = None) -> ApiResponse:
        """Send a POST request."""
        return self.request("POST", path, payload)

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def __enter__(self) -> "PlatformHTTPClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
