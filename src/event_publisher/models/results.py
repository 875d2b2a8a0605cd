"""Result models for Event Publisher operations."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class Status(str, Enum):
    """Status codes for platform operations."""

    SUCCESS = "success"
    PUBLISHED = "published"
    UNPUBLISHED = "unpublished"
    FAILED = "failed"
    NOT_CONFIGURED = "not_configured"


SUCCESS_STATUSES = (Status.SUCCESS, Status.PUBLISHED, Status.UNPUBLISHED)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PlatformResult:
    """Result from a single platform operation.

    Attributes:
        platform: Platform name (e.g., "meetup", "eventbrite")
        status: Operation status
        message: Human-readable status message
        event_id: Identifier of the created event, if the platform returned one
        event_url: Public URL of the created event, if the platform returned one
        error: Error detail if failed (or a warning for partial success)
        data: Extra response details
        timestamp: When the operation completed
    """

    platform: str
    status: Status
    message: str = ""
    event_id: str = ""
    event_url: str = ""
    error: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        if self.is_success and not self.message:
            self.message = f"{self.platform.title()} operation succeeded"

    @property
    def is_success(self) -> bool:
        """Check if operation was successful."""
        return self.status in SUCCESS_STATUSES

    @property
    def success(self) -> bool:
        return self.is_success

    @property
    def is_failure(self) -> bool:
        """Check if operation failed."""
        return self.status == Status.FAILED

    @property
    def is_configured(self) -> bool:
        return self.status != Status.NOT_CONFIGURED

    @property
    def needs_attention(self) -> bool:
        """Created, but the platform still needs manual follow-up."""
        return self.status == Status.UNPUBLISHED

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        result: dict[str, Any] = {
            "platform": self.platform,
            "status": self.status.value,
            "success": self.is_success,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.event_id:
            result["event_id"] = self.event_id
        if self.event_url:
            result["event_url"] = self.event_url
        if self.error:
            result["error"] = self.error
        return result


@dataclass
class PublishResult:
    """Aggregate result from publishing one event to every platform.

    Attributes:
        results: One result per platform, in platform order
        summary: Human-readable summary
    """

    results: list[PlatformResult] = field(default_factory=list)
    summary: str = ""

    def __post_init__(self) -> None:
        if not self.summary:
            self.summary = self._generate_summary()

    def _generate_summary(self) -> str:
        return f"Published on {self.success_count}/{len(self.attempted)} platforms"

    @property
    def attempted(self) -> list[PlatformResult]:
        """Results for platforms that were actually called."""
        return [r for r in self.results if r.is_configured]

    @property
    def success_count(self) -> int:
        """Count of successful platforms."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def is_complete_success(self) -> bool:
        """Check if all attempted platforms succeeded."""
        attempted = self.attempted
        return all(r.is_success for r in attempted) if attempted else False

    def get(self, platform: str) -> PlatformResult | None:
        """Get the result for one platform."""
        for result in self.results:
            if result.platform == platform:
                return result
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "results": [r.to_dict() for r in self.results],
            "summary": self.summary,
            "success_count": self.success_count,
        }
