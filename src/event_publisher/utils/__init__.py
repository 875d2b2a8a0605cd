"""Utility modules for Event Publisher."""

from event_publisher.utils.datetimes import format_utc, parse_datetime, to_utc
from event_publisher.utils.sanitization import (
    redact_sensitive_data,
    sanitize_for_html,
    sanitize_input,
    text_to_html,
)

__all__ = [
    "format_utc",
    "parse_datetime",
    "to_utc",
    "redact_sensitive_data",
    "sanitize_for_html",
    "sanitize_input",
    "text_to_html",
]
