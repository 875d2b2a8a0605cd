"""Meetup platform adapter."""

import logging
from typing import Any

from event_publisher.adapters.base import BasePlatformAdapter
from event_publisher.core.exceptions import PlatformRejection
from event_publisher.core.http import ApiResponse, PlatformHTTPClient
from event_publisher.models.credentials import PlatformCredentials
from event_publisher.models.event import EventData
from event_publisher.models.results import PlatformResult
from event_publisher.utils.datetimes import format_utc

logger = logging.getLogger(__name__)

SELF_QUERY = """
query {
  self {
    id
    name
    email
  }
}
"""

CREATE_EVENT_MUTATION = """
mutation CreateEvent($input: CreateEventInput!) {
  createEvent(input: $input) {
    event {
      id
      title
      eventUrl
    }
    errors {
      message
      field
    }
  }
}
"""

INVALID_RESPONSE = "Invalid response structure"


def first_error_message(errors: Any, fallback: str) -> str:
    """Get the message of the first GraphQL error, or ``fallback``."""
    if isinstance(errors, list) and errors:
        first = errors[0]
        if isinstance(first, dict) and first.get("message"):
            return str(first["message"])
    return fallback


class MeetupAdapter(BasePlatformAdapter):
    """Adapter for the Meetup GraphQL API.

    Notes:
        - Single POST endpoint, bearer token, ``{query, variables}`` body
        - Events are created directly in PUBLISHED state in the configured group
        - Events without a venue are created as online events (no address)
        - Error sources, each reported with its own error text:
          transport/HTTP failure, top-level ``errors``, ``createEvent.errors``,
          and a response without an event
    """

    name = "meetup"
    display_name = "Meetup"
    base_url = "https://api.meetup.com/gql"
    scope_label = "group URL name"

    def build_variables(self, credentials: PlatformCredentials, event: EventData) -> dict[str, Any]:
        """Build the CreateEvent mutation variables.

        Args:
            credentials: Credentials carrying the group URL name
            event: Event to publish

        Returns:
            Variables dictionary with the ``input`` object
        """
        event_input: dict[str, Any] = {
            "groupUrlname": credentials.scope_id,
            "title": event.title,
            "description": event.description,
            "startDateTime": format_utc(event.start),
            "duration": event.duration_seconds,
            "publishStatus": "PUBLISHED",
        }
        if event.venue:
            event_input.update({
                "venueId": None,
                "onlineVenue": False,
                "address": event.venue,
            })
        return {"input": event_input}

    def _create_event(
        self,
        client: PlatformHTTPClient,
        credentials: PlatformCredentials,
        event: EventData,
    ) -> PlatformResult:
        response = client.post(
            payload={
                "query": CREATE_EVENT_MUTATION,
                "variables": self.build_variables(credentials, event),
            }
        )

        try:
            created = self._parse_create_response(response)
        except PlatformRejection as e:
            logger.warning(f"Meetup rejected event: {e.message}")
            return self._failed_result(
                "Failed to create Meetup event",
                e.message,
                data={"operation": e.operation},
            )

        if not created:
            return self._failed_result("Unexpected response from Meetup API", INVALID_RESPONSE)

        return self._published_result(
            "Meetup event created successfully",
            event_id=created.get("id", ""),
            event_url=created.get("eventUrl", ""),
        )

    def _parse_create_response(self, response: ApiResponse) -> dict[str, Any] | None:
        """Extract the created event from a CreateEvent response.

        Returns:
            The event object, or None if the response does not contain one

        Raises:
            PlatformRejection: For HTTP failures and GraphQL errors
        """
        body = response.data if isinstance(response.data, dict) else {}

        if body.get("errors"):
            raise PlatformRejection(
                first_error_message(body["errors"], "Unknown error occurred"),
                platform=self.name,
                operation="graphql",
            )

        if not response.ok:
            raise PlatformRejection(
                f"HTTP {response.status_code}: {response.text[:100]}",
                platform=self.name,
                operation="http",
            )

        if not response.is_json:
            return None

        data = body.get("data")
        payload = data.get("createEvent") if isinstance(data, dict) else None
        if not isinstance(payload, dict):
            return None

        if payload.get("errors"):
            raise PlatformRejection(
                first_error_message(payload["errors"], "Event creation failed"),
                platform=self.name,
                operation="createEvent",
            )

        created = payload.get("event")
        return created if isinstance(created, dict) else None

    def _test_connection(
        self,
        client: PlatformHTTPClient,
        credentials: PlatformCredentials,
    ) -> PlatformResult:
        response = client.post(payload={"query": SELF_QUERY})

        if not response.ok:
            return self._failed_result(
                "Meetup API authentication failed",
                f"HTTP {response.status_code}: {response.text[:100]}",
            )

        body = response.data if isinstance(response.data, dict) else {}
        if body.get("errors"):
            return self._failed_result(
                "Meetup API authentication failed",
                first_error_message(body["errors"], "Invalid API token"),
            )

        identity = (body.get("data") or {}).get("self")
        if isinstance(identity, dict):
            display = identity.get("name") or identity.get("email") or "Meetup User"
            return self._success_result(f"Connected as {display}", data={"id": identity.get("id")})

        return self._failed_result(
            "Unexpected response from Meetup API",
            "Could not verify authentication",
        )
