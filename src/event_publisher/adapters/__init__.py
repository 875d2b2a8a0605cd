"""Platform adapters for event publishing."""

from event_publisher.adapters.base import BasePlatformAdapter
from event_publisher.adapters.eventbrite import EventbriteAdapter, EventbriteWorkflow, WorkflowState
from event_publisher.adapters.meetup import MeetupAdapter

__all__ = [
    "BasePlatformAdapter",
    "EventbriteAdapter",
    "EventbriteWorkflow",
    "WorkflowState",
    "MeetupAdapter",
]
