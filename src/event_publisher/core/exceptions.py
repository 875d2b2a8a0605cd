"""Custom exceptions for Event Publisher."""

from typing import Any


class EventPublisherError(Exception):
    """Base exception for all Event Publisher errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class AuthorizationError(EventPublisherError):
    """Raised when a privileged operation runs without a valid session."""

    def __init__(
        self,
        message: str = "Authentication required",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


class ConfigurationError(EventPublisherError):
    """Raised when required configuration or credentials are missing."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.field = field


class ValidationError(EventPublisherError):
    """Raised when event input fails validation."""

    def __init__(
        self,
        message: str = "Event validation failed",
        errors: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.errors = errors or []

    def __str__(self) -> str:
        if self.errors:
            return f"{self.message}: {'; '.join(self.errors)}"
        return super().__str__()


class TransportError(EventPublisherError):
    """Raised when a platform cannot be reached over HTTP."""

    def __init__(
        self,
        message: str,
        platform: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.platform = platform


class PlatformRejection(EventPublisherError):
    """Raised when a platform answered but refused the operation."""

    def __init__(
        self,
        message: str,
        platform: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.platform = platform
        self.operation = operation
