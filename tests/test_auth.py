"""Tests for the credential gate and session store."""

import json
import os
import stat
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from event_publisher.auth.gate import CredentialGate
from event_publisher.auth.store import SessionStore
from event_publisher.core.config import Config
from event_publisher.core.exceptions import AuthorizationError, ConfigurationError

from tests.helpers import TEST_EMAIL, TEST_PASSWORD, TEST_SECRET


class TestCredentialGate:
    """Tests for CredentialGate."""

    def test_issued_token_authorizes(self, gate, token):
        assert gate.authorize(token)

    def test_session_contents(self, gate, token):
        session = gate.get_session(token)

        assert session.email == TEST_EMAIL
        assert session.expires_at - session.issued_at == timedelta(hours=24)
        assert session.remaining > timedelta(hours=23)

    @pytest.mark.parametrize("value", [None, "", "not-a-jwt", "a.b.c"])
    def test_missing_or_malformed_token(self, gate, value):
        """Test absence and garbage both yield False without raising."""
        assert gate.authorize(value) is False

    def test_wrong_signature(self, gate):
        other = CredentialGate("another-secret-key-that-is-32-chars-long", TEST_EMAIL)

        assert not gate.authorize(other.issue_token(TEST_EMAIL))

    def test_expired_token(self, gate):
        past = datetime.now(timezone.utc) - timedelta(hours=25)
        expired = jwt.encode(
            {
                "email": TEST_EMAIL,
                "authenticated": True,
                "iat": past,
                "exp": past + timedelta(hours=24),
            },
            TEST_SECRET,
            algorithm="HS256",
        )

        assert not gate.authorize(expired)

    def test_token_without_expiry(self, gate):
        token = jwt.encode(
            {"email": TEST_EMAIL, "authenticated": True, "iat": datetime.now(timezone.utc)},
            TEST_SECRET,
            algorithm="HS256",
        )

        assert not gate.authorize(token)

    def test_token_for_other_identity(self, gate):
        assert not gate.authorize(gate.issue_token("intruder@example.com"))

    def test_unsigned_token_rejected(self, gate):
        token = jwt.encode(
            {"email": TEST_EMAIL, "authenticated": True}, key=None, algorithm="none"
        )

        assert not gate.authorize(token)

    def test_login_success(self, gate):
        result = gate.login(TEST_EMAIL, TEST_PASSWORD)

        assert result.success
        assert gate.authorize(result.token)

    @pytest.mark.parametrize(
        "email,password",
        [(TEST_EMAIL, "wrong"), ("other@example.com", TEST_PASSWORD), (TEST_EMAIL, "")],
    )
    def test_login_failure(self, gate, email, password):
        result = gate.login(email, password)

        assert not result.success
        assert result.token == ""
        assert result.error == "Invalid credentials"

    def test_login_without_configured_password(self):
        gate = CredentialGate(TEST_SECRET, TEST_EMAIL)

        assert not gate.login(TEST_EMAIL, "").success

    def test_require(self, gate, token):
        assert gate.require(token).email == TEST_EMAIL
        with pytest.raises(AuthorizationError):
            gate.require(None)

    def test_requires_secret(self):
        with pytest.raises(ValueError):
            CredentialGate("", TEST_EMAIL)

    def test_from_config(self, config):
        gate = CredentialGate.from_config(config)

        assert gate.admin_email == TEST_EMAIL
        assert gate.authorize(gate.issue_token(TEST_EMAIL))

    def test_from_config_custom_ttl(self, config):
        config.session_ttl_hours = 1
        gate = CredentialGate.from_config(config)
        session = gate.get_session(gate.issue_token(TEST_EMAIL))

        assert session.expires_at - session.issued_at == timedelta(hours=1)

    def test_from_config_short_secret(self, config):
        config.auth_secret = "short"

        with pytest.raises(ConfigurationError) as exc_info:
            CredentialGate.from_config(config)
        assert exc_info.value.field == "auth_secret"


class TestSessionStore:
    """Tests for SessionStore."""

    def test_round_trip(self, tmp_path):
        store = SessionStore(tmp_path / "nested" / "session.json")
        store.save("tok")

        assert store.load() == "tok"

    def test_file_is_private(self, tmp_path):
        store = SessionStore(tmp_path / "session.json")
        store.save("tok")

        mode = stat.S_IMODE(os.stat(store.path).st_mode)
        assert mode == 0o600

    def test_existing_readable_file_is_made_private(self, tmp_path):
        """Test saving over a world-readable file tightens its mode."""
        path = tmp_path / "session.json"
        path.write_text("{}")
        path.chmod(0o644)

        SessionStore(path).save("tok")

        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600
        assert SessionStore(path).load() == "tok"

    def test_load_missing(self, tmp_path):
        assert SessionStore(tmp_path / "none.json").load() is None

    def test_load_corrupt(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{not json")

        assert SessionStore(path).load() is None

    def test_load_without_token(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text(json.dumps({"saved_at": "x"}))

        assert SessionStore(path).load() is None

    def test_clear(self, tmp_path):
        store = SessionStore(tmp_path / "session.json")
        store.save("tok")
        store.clear()
        store.clear()

        assert not store.path.exists()


class TestConfig:
    """Tests for Config."""

    def test_reads_environment(self, cli_env):
        config = Config.from_env()

        assert config.meetup_group_urlname == "philly-ai"
        assert config.eventbrite_org_id == "org-1"
        assert config.request_timeout == 30.0
        assert str(config.session_file) == str(cli_env)

    def test_credentials_bundle(self, config):
        bundle = config.credentials()

        assert bundle.meetup.api_key == "meetup-token"
        assert bundle.eventbrite.scope_id == "org-1"

    def test_validate_missing_secret(self):
        with pytest.raises(ConfigurationError, match="AUTH_SECRET"):
            Config(auth_secret="").validate()

    def test_validate_missing_password(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Config(auth_secret=TEST_SECRET, auth_password="").validate()
        assert exc_info.value.field == "auth_password"
