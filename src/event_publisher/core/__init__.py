"""Core infrastructure for Event Publisher."""

from event_publisher.core.config import Config
from event_publisher.core.exceptions import (
    AuthorizationError,
    ConfigurationError,
    EventPublisherError,
    PlatformRejection,
    TransportError,
    ValidationError,
)
from event_publisher.core.http import ApiResponse, PlatformHTTPClient

__all__ = [
    "Config",
    "EventPublisherError",
    "AuthorizationError",
    "ConfigurationError",
    "PlatformRejection",
    "TransportError",
    "ValidationError",
    "ApiResponse",
    "PlatformHTTPClient",
]
