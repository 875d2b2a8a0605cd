"""Data models for Event Publisher."""

from event_publisher.models.credentials import PLATFORMS, CredentialsBundle, PlatformCredentials
from event_publisher.models.event import EventData
from event_publisher.models.results import PlatformResult, PublishResult, Status

__all__ = [
    "PLATFORMS",
    "CredentialsBundle",
    "PlatformCredentials",
    "EventData",
    "PlatformResult",
    "PublishResult",
    "Status",
]
