"""Tests for the Meetup adapter."""

import pytest
import requests
import responses

from event_publisher.adapters.meetup import MeetupAdapter, first_error_message
from event_publisher.models.credentials import PlatformCredentials
from event_publisher.models.results import Status

from tests.helpers import MEETUP_URL, meetup_created, request_json


@pytest.fixture
def adapter():
    return MeetupAdapter(timeout=5)


class TestMeetupCredentials:
    """Tests for the credential precondition."""

    @responses.activate
    @pytest.mark.parametrize(
        "api_key,scope_id,message",
        [
            ("", "philly-ai", "Meetup API key is required"),
            ("token", "", "Meetup group URL name is required"),
            ("", "", "Meetup API key is required"),
        ],
    )
    def test_create_event_without_credentials(self, adapter, sample_event, api_key, scope_id, message):
        """Test missing credentials fail without any network call."""
        result = adapter.create_event(PlatformCredentials(api_key, scope_id), sample_event)

        assert not result.success
        assert result.message == message
        assert len(responses.calls) == 0

    @responses.activate
    def test_test_connection_without_credentials(self, adapter):
        result = adapter.test_connection(PlatformCredentials("", "philly-ai"))

        assert not result.success
        assert result.error == "Missing API key"
        assert len(responses.calls) == 0


class TestMeetupPayload:
    """Tests for mutation variables."""

    def test_in_person_event(self, adapter, meetup_credentials, sample_event):
        event_input = adapter.build_variables(meetup_credentials, sample_event)["input"]

        assert event_input == {
            "groupUrlname": "philly-ai",
            "title": "AI Workshop",
            "description": sample_event.description,
            "startDateTime": "2025-01-25T23:00:00Z",
            "duration": 7200,
            "publishStatus": "PUBLISHED",
            "venueId": None,
            "onlineVenue": False,
            "address": "123 Main St",
        }

    def test_online_event_has_no_address(self, adapter, meetup_credentials, online_event):
        event_input = adapter.build_variables(meetup_credentials, online_event)["input"]

        assert "address" not in event_input
        assert "onlineVenue" not in event_input
        assert "venueId" not in event_input


class TestMeetupCreateEvent:
    """Tests for MeetupAdapter.create_event."""

    @responses.activate
    def test_success(self, adapter, meetup_credentials, sample_event):
        responses.add(responses.POST, MEETUP_URL, json=meetup_created())

        result = adapter.create_event(meetup_credentials, sample_event)

        assert result.success
        assert result.status == Status.PUBLISHED
        assert result.message == "Meetup event created successfully"
        assert result.event_id == "305512345"
        assert result.event_url == "https://www.meetup.com/philly-ai/events/305512345/"

        assert len(responses.calls) == 1
        assert responses.calls[0].request.headers["Authorization"] == "Bearer meetup-token"
        body = request_json(responses.calls[0])
        assert "mutation CreateEvent" in body["query"]
        assert body["variables"]["input"]["groupUrlname"] == "philly-ai"

    @responses.activate
    def test_top_level_errors_surface_first_message(self, adapter, meetup_credentials, sample_event):
        """Test the first top-level error's message is returned verbatim."""
        responses.add(
            responses.POST,
            MEETUP_URL,
            json={
                "errors": [
                    {"message": "Not authorized to create events in this group"},
                    {"message": "second error"},
                ]
            },
        )

        result = adapter.create_event(meetup_credentials, sample_event)

        assert not result.success
        assert result.message == "Failed to create Meetup event"
        assert result.error == "Not authorized to create events in this group"

    @responses.activate
    def test_top_level_error_without_message(self, adapter, meetup_credentials, sample_event):
        responses.add(responses.POST, MEETUP_URL, json={"errors": [{"code": "X"}]})

        result = adapter.create_event(meetup_credentials, sample_event)

        assert result.error == "Unknown error occurred"

    @responses.activate
    def test_mutation_errors(self, adapter, meetup_credentials, sample_event):
        """Test nested createEvent errors are reported separately."""
        responses.add(
            responses.POST,
            MEETUP_URL,
            json={
                "data": {
                    "createEvent": {
                        "event": None,
                        "errors": [{"message": "Start time must be in the future", "field": "startDateTime"}],
                    }
                }
            },
        )

        result = adapter.create_event(meetup_credentials, sample_event)

        assert not result.success
        assert result.error == "Start time must be in the future"
        assert result.data["operation"] == "createEvent"

    @responses.activate
    def test_http_failure(self, adapter, meetup_credentials, sample_event):
        responses.add(responses.POST, MEETUP_URL, body="Service Unavailable", status=503)

        result = adapter.create_event(meetup_credentials, sample_event)

        assert not result.success
        assert result.error == "HTTP 503: Service Unavailable"

    @responses.activate
    def test_unparseable_response(self, adapter, meetup_credentials, sample_event):
        responses.add(responses.POST, MEETUP_URL, json={"data": {"createEvent": {"errors": []}}})

        result = adapter.create_event(meetup_credentials, sample_event)

        assert not result.success
        assert result.message == "Unexpected response from Meetup API"
        assert result.error == "Invalid response structure"

    @responses.activate
    def test_non_json_success_response(self, adapter, meetup_credentials, sample_event):
        responses.add(responses.POST, MEETUP_URL, body="ok", status=200)

        result = adapter.create_event(meetup_credentials, sample_event)

        assert result.error == "Invalid response structure"

    @responses.activate
    @pytest.mark.parametrize("data", [[1], "created", 42])
    def test_non_object_data(self, adapter, meetup_credentials, sample_event, data):
        """Test a malformed data field is reported as an invalid structure."""
        responses.add(responses.POST, MEETUP_URL, json={"data": data})

        result = adapter.create_event(meetup_credentials, sample_event)

        assert not result.success
        assert result.message == "Unexpected response from Meetup API"
        assert result.error == "Invalid response structure"

    @responses.activate
    def test_transport_error(self, adapter, meetup_credentials, sample_event):
        responses.add(
            responses.POST,
            MEETUP_URL,
            body=requests.exceptions.ConnectionError("Connection refused"),
        )

        result = adapter.create_event(meetup_credentials, sample_event)

        assert not result.success
        assert result.message == "Failed to connect to Meetup API"
        assert "Connection refused" in result.error


class TestMeetupTestConnection:
    """Tests for MeetupAdapter.test_connection."""

    @responses.activate
    def test_connected_as_name(self, adapter, meetup_credentials):
        responses.add(
            responses.POST,
            MEETUP_URL,
            json={"data": {"self": {"id": "1", "name": "Ada Lovelace", "email": "ada@example.com"}}},
        )

        result = adapter.test_connection(meetup_credentials)

        assert result.success
        assert result.status == Status.SUCCESS
        assert result.message == "Connected as Ada Lovelace"
        assert "self" in request_json(responses.calls[0])["query"]

    @responses.activate
    def test_connected_as_email(self, adapter, meetup_credentials):
        responses.add(
            responses.POST,
            MEETUP_URL,
            json={"data": {"self": {"id": "1", "name": None, "email": "ada@example.com"}}},
        )

        assert adapter.test_connection(meetup_credentials).message == "Connected as ada@example.com"

    @responses.activate
    def test_http_failure_truncates_body(self, adapter, meetup_credentials):
        responses.add(responses.POST, MEETUP_URL, body="x" * 500, status=401)

        result = adapter.test_connection(meetup_credentials)

        assert not result.success
        assert result.message == "Meetup API authentication failed"
        assert result.error == "HTTP 401: " + "x" * 100

    @responses.activate
    def test_graphql_errors(self, adapter, meetup_credentials):
        responses.add(responses.POST, MEETUP_URL, json={"errors": [{"message": "Invalid token"}]})

        result = adapter.test_connection(meetup_credentials)

        assert result.error == "Invalid token"

    @responses.activate
    def test_missing_identity(self, adapter, meetup_credentials):
        responses.add(responses.POST, MEETUP_URL, json={"data": {}})

        result = adapter.test_connection(meetup_credentials)

        assert not result.success
        assert result.error == "Could not verify authentication"


class TestFirstErrorMessage:
    """Tests for first_error_message helper."""

    def test_first_message(self):
        assert first_error_message([{"message": "a"}, {"message": "b"}], "fb") == "a"

    @pytest.mark.parametrize("errors", [[], None, [{}], ["text"]])
    def test_fallback(self, errors):
        assert first_error_message(errors, "fb") == "fb"
