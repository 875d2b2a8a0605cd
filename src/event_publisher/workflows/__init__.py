"""Workflow orchestrators for publishing and connection checks."""

from event_publisher.workflows.connectivity import ConnectivityProbe
from event_publisher.workflows.publish import PublishOrchestrator, build_adapters

__all__ = [
    "ConnectivityProbe",
    "PublishOrchestrator",
    "build_adapters",
]
