"""Eventbrite platform adapter."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from event_publisher.adapters.base import BasePlatformAdapter
from event_publisher.core.http import PlatformHTTPClient
from event_publisher.models.credentials import PlatformCredentials
from event_publisher.models.event import EventData
from event_publisher.models.results import PlatformResult, Status
from event_publisher.utils.datetimes import format_utc
from event_publisher.utils.sanitization import sanitize_for_html, text_to_html

logger = logging.getLogger(__name__)

PUBLISHED_MESSAGE = "Eventbrite event created and published successfully"
UNPUBLISHED_MESSAGE = (
    "Event created but not published. "
    "You may need to complete additional requirements in Eventbrite."
)


class WorkflowState(str, Enum):
    """Where the create/ticket/publish sequence ended."""

    FAILED_BEFORE_CREATE = "failed_before_create"
    CREATED_UNPUBLISHED = "created_unpublished"
    CREATED_PUBLISHED = "created_published"


@dataclass
class EventbriteWorkflow:
    """Record of one pass through the Eventbrite publishing sequence.

    Attributes:
        state: Final state of the sequence
        event_id: Draft event id (set once step 1 succeeds)
        event_url: Public event URL returned by step 1
        error: Error from the step that ended the sequence
        ticket_error: Error from the ticket step, which never ends the sequence
        steps: Names of the steps that succeeded, in order
    """

    state: WorkflowState = WorkflowState.FAILED_BEFORE_CREATE
    event_id: str = ""
    event_url: str = ""
    error: str = ""
    ticket_error: str = ""
    steps: list[str] = field(default_factory=list)

    def to_result(self, platform: str) -> PlatformResult:
        """Convert the workflow outcome into a PlatformResult."""
        data: dict[str, Any] = {"state": self.state.value, "steps": list(self.steps)}
        if self.ticket_error:
            data["ticket_error"] = self.ticket_error

        if self.state == WorkflowState.CREATED_PUBLISHED:
            return PlatformResult(
                platform=platform,
                status=Status.PUBLISHED,
                message=PUBLISHED_MESSAGE,
                event_id=self.event_id,
                event_url=self.event_url,
                data=data,
            )

        if self.state == WorkflowState.CREATED_UNPUBLISHED:
            return PlatformResult(
                platform=platform,
                status=Status.UNPUBLISHED,
                message=UNPUBLISHED_MESSAGE,
                event_id=self.event_id,
                event_url=self.event_url,
                error=self.error or "Publishing failed",
                data=data,
            )

        return PlatformResult(
            platform=platform,
            status=Status.FAILED,
            message="Failed to create Eventbrite event",
            error=self.error or "Event creation failed",
            data=data,
        )


class EventbriteAdapter(BasePlatformAdapter):
    """Adapter for the Eventbrite REST API (v3).

    Publishing is three calls made strictly in order:
    1. Create a draft event under the organization
    2. Add a free General Admission ticket class (failure is not fatal)
    3. Publish the draft (failure leaves a created but unpublished event)

    Notes:
        - Times are sent as UTC instants with a fixed display timezone
        - ``online_event`` is set exactly when the event has no venue
        - Nothing is rolled back if a later step fails
    """

    name = "eventbrite"
    display_name = "Eventbrite"
    base_url = "https://www.eventbriteapi.com/v3"
    scope_label = "organization ID"

    timezone = "America/Los_Angeles"
    currency = "USD"

    ticket_name = "General Admission"
    ticket_quantity_total = 100
    ticket_minimum_quantity = 1
    ticket_maximum_quantity = 10

    def build_event_payload(self, event: EventData) -> dict[str, Any]:
        """Build the draft event request body.

        Args:
            event: Event to publish

        Returns:
            Request body for the organization events endpoint
        """
        return {
            "event": {
                "name": {"html": sanitize_for_html(event.title)},
                "description": {"html": text_to_html(event.description)},
                "start": {"timezone": self.timezone, "utc": format_utc(event.start)},
                "end": {"timezone": self.timezone, "utc": format_utc(event.end)},
                "currency": self.currency,
                "online_event": event.is_online,
                "listed": True,
                "shareable": True,
            }
        }

    def build_ticket_payload(self) -> dict[str, Any]:
        """Build the free ticket class request body."""
        return {
            "ticket_class": {
                "name": self.ticket_name,
                "free": True,
                "quantity_total": self.ticket_quantity_total,
                "minimum_quantity": self.ticket_minimum_quantity,
                "maximum_quantity": self.ticket_maximum_quantity,
            }
        }

    def run_workflow(
        self,
        client: PlatformHTTPClient,
        credentials: PlatformCredentials,
        event: EventData,
    ) -> EventbriteWorkflow:
        """Run create, ticket and publish in order.

        Args:
            client: Authenticated HTTP client
            credentials: Credentials carrying the organization id
            event: Event to publish

        Returns:
            EventbriteWorkflow describing where the sequence ended

        Raises:
            TransportError: If the platform cannot be reached during step 1.
                Transport errors in later steps are recorded on the workflow.
        """
        workflow = EventbriteWorkflow()

        # Step 1: Create draft event
        response = client.post(
            f"/organizations/{credentials.scope_id}/events/",
            self.build_event_payload(event),
        )
        if not response.ok:
            workflow.error = response.error_message("Event creation failed")
            logger.warning(f"Eventbrite draft creation failed: {workflow.error}")
            return workflow

        created = response.data if isinstance(response.data, dict) else {}
        if not created.get("id"):
            workflow.error = "Invalid response structure"
            return workflow

        workflow.event_id = str(created["id"])
        workflow.event_url = created.get("url") or ""
        workflow.state = WorkflowState.CREATED_UNPUBLISHED
        workflow.steps.append("create")
        logger.info(f"Created Eventbrite draft {workflow.event_id}")

        # Step 2: Create a free ticket class
        try:
            ticket_response = client.post(
                f"/events/{workflow.event_id}/ticket_classes/",
                self.build_ticket_payload(),
            )
            if ticket_response.ok:
                workflow.steps.append("ticket")
            else:
                workflow.ticket_error = ticket_response.error_message()
        except Exception as e:
            workflow.ticket_error = str(e)
        if workflow.ticket_error:
            logger.error(
                f"Failed to create ticket class, but event was created: {workflow.ticket_error}"
            )

        # Step 3: Publish the event
        try:
            publish_response = client.post(f"/events/{workflow.event_id}/publish/")
        except Exception as e:
            workflow.error = str(e) or "Publishing failed"
            logger.error(f"Eventbrite publish failed: {workflow.error}")
            return workflow

        if not publish_response.ok:
            workflow.error = publish_response.error_message("Publishing failed")
            logger.warning(f"Eventbrite publish failed: {workflow.error}")
            return workflow

        workflow.steps.append("publish")
        workflow.state = WorkflowState.CREATED_PUBLISHED
        return workflow

    def _create_event(
        self,
        client: PlatformHTTPClient,
        credentials: PlatformCredentials,
        event: EventData,
    ) -> PlatformResult:
        return self.run_workflow(client, credentials, event).to_result(self.name)

    def _test_connection(
        self,
        client: PlatformHTTPClient,
        credentials: PlatformCredentials,
    ) -> PlatformResult:
        user_response = client.get("/users/me/")
        if not user_response.ok:
            return self._failed_result(
                "Eventbrite API authentication failed",
                user_response.error_message(),
            )

        user = user_response.data if isinstance(user_response.data, dict) else {}
        if not user.get("id"):
            return self._failed_result(
                "Unexpected response from Eventbrite API",
                "Could not verify authentication",
            )

        org_response = client.get(f"/organizations/{credentials.scope_id}/")
        if not org_response.ok:
            return self._failed_result(
                "Organization ID is invalid",
                f"Organization {credentials.scope_id} not found or not accessible",
            )

        org = org_response.data if isinstance(org_response.data, dict) else {}
        return self._success_result(
            f"Connected to {org.get('name') or 'Eventbrite Organization'}",
            data={"user_id": user.get("id"), "organization_id": credentials.scope_id},
        )
