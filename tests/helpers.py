"""Shared constants and builders for the Event Publisher test suite."""

import json

TEST_SECRET = "test-secret-key-at-least-32-characters-long"
TEST_EMAIL = "admin@example.com"
TEST_PASSWORD = "correct horse battery staple"

MEETUP_URL = "https://api.meetup.com/gql"
EVENTBRITE_URL = "https://www.eventbriteapi.com/v3"


def request_json(call):
    """Decode the JSON body of a recorded ``responses`` call."""
    body = call.request.body
    if isinstance(body, bytes):
        body = body.decode()
    return json.loads(body) if body else None


def meetup_created(event_id="305512345", url="https://www.meetup.com/philly-ai/events/305512345/"):
    """Meetup CreateEvent response body for a created event."""
    return {
        "data": {
            "createEvent": {
                "event": {"id": event_id, "title": "AI Workshop", "eventUrl": url},
                "errors": [],
            }
        }
    }


def eventbrite_event(event_id="1234567890", url="https://www.eventbrite.com/e/ai-workshop-1234567890"):
    """Eventbrite event resource returned by the create endpoint."""
    return {"id": event_id, "url": url, "status": "draft"}
