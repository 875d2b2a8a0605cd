"""Pytest configuration and fixtures for Event Publisher tests."""

import os
from datetime import datetime, timedelta, timezone

import pytest

from event_publisher.auth.gate import CredentialGate
from event_publisher.core.config import Config
from event_publisher.models.credentials import CredentialsBundle, PlatformCredentials
from event_publisher.models.event import EventData

from tests.helpers import TEST_EMAIL, TEST_PASSWORD, TEST_SECRET


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove platform, auth and EVENTPUB_* env vars to ensure clean state."""
    names = {
        "MEETUP_API_KEY",
        "MEETUP_GROUP_URLNAME",
        "EVENTBRITE_API_KEY",
        "EVENTBRITE_ORG_ID",
        "AUTH_SECRET",
        "AUTH_EMAIL",
        "AUTH_PASSWORD",
    }
    for key in list(os.environ.keys()):
        if key in names or key.startswith("EVENTPUB_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def event_start() -> datetime:
    return datetime(2025, 1, 25, 23, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_event_data(event_start) -> dict:
    """Sample event form data for testing."""
    return {
        "title": "AI Workshop",
        "description": "Join us for a hands-on workshop exploring the latest AI tools.",
        "start": event_start,
        "end": event_start + timedelta(hours=2),
        "venue": "123 Main St",
    }


@pytest.fixture
def sample_event(sample_event_data) -> EventData:
    """Sample in-person EventData instance."""
    return EventData(**sample_event_data)


@pytest.fixture
def online_event(sample_event_data) -> EventData:
    """Sample EventData without a venue."""
    sample_event_data["venue"] = ""
    return EventData(**sample_event_data)


@pytest.fixture
def meetup_credentials() -> PlatformCredentials:
    return PlatformCredentials(api_key="meetup-token", scope_id="philly-ai")


@pytest.fixture
def eventbrite_credentials() -> PlatformCredentials:
    return PlatformCredentials(api_key="eventbrite-token", scope_id="org-1")


@pytest.fixture
def credentials(meetup_credentials, eventbrite_credentials) -> CredentialsBundle:
    """Credentials for both platforms."""
    return CredentialsBundle(meetup=meetup_credentials, eventbrite=eventbrite_credentials)


@pytest.fixture
def config(tmp_path) -> Config:
    """Fully configured Config instance."""
    return Config(
        meetup_api_key="meetup-token",
        meetup_group_urlname="philly-ai",
        eventbrite_api_key="eventbrite-token",
        eventbrite_org_id="org-1",
        auth_secret=TEST_SECRET,
        auth_email=TEST_EMAIL,
        auth_password=TEST_PASSWORD,
        session_file=tmp_path / "session.json",
        request_timeout=5.0,
    )


@pytest.fixture
def gate() -> CredentialGate:
    return CredentialGate(TEST_SECRET, TEST_EMAIL, TEST_PASSWORD)


@pytest.fixture
def token(gate) -> str:
    """Valid admin session token."""
    return gate.issue_token(TEST_EMAIL)


@pytest.fixture
def cli_env(monkeypatch, tmp_path):
    """Set up env vars as a configured deployment would."""
    monkeypatch.setenv("MEETUP_API_KEY", "meetup-token")
    monkeypatch.setenv("MEETUP_GROUP_URLNAME", "philly-ai")
    monkeypatch.setenv("EVENTBRITE_API_KEY", "eventbrite-token")
    monkeypatch.setenv("EVENTBRITE_ORG_ID", "org-1")
    monkeypatch.setenv("AUTH_SECRET", TEST_SECRET)
    monkeypatch.setenv("AUTH_EMAIL", TEST_EMAIL)
    monkeypatch.setenv("AUTH_PASSWORD", TEST_PASSWORD)
    monkeypatch.setenv("EVENTPUB_SESSION_FILE", str(tmp_path / "session.json"))
    monkeypatch.setenv("EVENTPUB_LOG_LEVEL", "WARNING")
    return tmp_path / "session.json"
