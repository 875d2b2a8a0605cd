"""Event data model for Event Publisher."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from event_publisher.utils.datetimes import format_utc, parse_datetime, to_utc
from event_publisher.utils.sanitization import sanitize_input

TITLE_MAX_LENGTH = 100
DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 5000


@dataclass
class EventData:
    """Platform-independent description of one event.

    This is the single input model for publishing. It is built once per
    request from the submitted form and is never stored.

    Attributes:
        title: Event title (1-100 characters)
        description: Event description (10-5000 characters)
        start: Start date and time
        end: End date and time, strictly after start
        venue: Street address. Empty means an online event.
        photo: Opaque photo payload carried with the form; not uploaded
    """

    title: str
    description: str
    start: datetime | None
    end: datetime | None
    venue: str = ""
    photo: str = ""

    def __post_init__(self) -> None:
        """Sanitize text inputs after initialization."""
        self.title = sanitize_input(self.title)
        self.description = sanitize_input(self.description)
        self.venue = sanitize_input(self.venue)

    def validate(self) -> list[str]:
        """Validate event data and return list of validation errors.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.title:
            errors.append("Event title is required")
        elif len(self.title) > TITLE_MAX_LENGTH:
            errors.append(f"Title must be less than {TITLE_MAX_LENGTH} characters")

        if len(self.description) < DESCRIPTION_MIN_LENGTH:
            errors.append(f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters")
        elif len(self.description) > DESCRIPTION_MAX_LENGTH:
            errors.append(f"Description must be less than {DESCRIPTION_MAX_LENGTH} characters")

        if self.start is None:
            errors.append("Start date and time is required")
        if self.end is None:
            errors.append("End date and time is required")
        if self.start is not None and self.end is not None:
            if to_utc(self.end) <= to_utc(self.start):
                errors.append("End date must be after start date")

        return errors

    def is_valid(self) -> bool:
        """Check if event data is valid.

        Returns:
            True if no validation errors were found
        """
        return len(self.validate()) == 0

    @property
    def is_online(self) -> bool:
        """An event without a venue is held online."""
        return not self.venue

    @property
    def duration_seconds(self) -> int:
        """Whole seconds between start and end."""
        if self.start is None or self.end is None:
            return 0
        return int((to_utc(self.end) - to_utc(self.start)).total_seconds())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary with UTC timestamps
        """
        return {
            "title": self.title,
            "description": self.description,
            "start": format_utc(self.start) if self.start else None,
            "end": format_utc(self.end) if self.end else None,
            "venue": self.venue,
            "online": self.is_online,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], tz_name: str | None = None) -> "EventData":
        """Create EventData from submitted form data.

        Args:
            data: Dictionary with event data. Accepts ``start``/``end`` as well
                as the form's ``startDateTime``/``endDateTime`` keys, either
                as datetimes or ISO-8601 strings.
            tz_name: Zone applied to naive timestamps (UTC when omitted)

        Returns:
            EventData instance

        Raises:
            ValueError: If a timestamp cannot be parsed
        """
        def get_value(*keys: str) -> Any:
            for key in keys:
                if data.get(key) not in (None, ""):
                    return data[key]
            return None

        return cls(
            title=get_value("title") or "",
            description=get_value("description") or "",
            start=parse_datetime(get_value("start", "startDateTime", "start_date_time"), tz_name),
            end=parse_datetime(get_value("end", "endDateTime", "end_date_time"), tz_name),
            venue=get_value("venue") or "",
            photo=get_value("photo") or "",
        )
