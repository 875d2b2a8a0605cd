"""File storage for the admin session token."""

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path

logger = logging.getLogger(__name__)


class SessionStore:
    """Keeps the current session token in a private JSON file.

    The file plays the role of the browser's session cookie: it is written
    at login, removed at logout, and only read by the gate.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def save(self, token: str) -> None:
        """Persist the session token with owner-only permissions."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {"token": token, "saved_at": datetime.now(timezone.utc).isoformat()}
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        # O_CREAT mode only applies to new files
        os.fchmod(fd, 0o600)
        with os.fdopen(fd, "w") as f:
            json.dump(data, f, indent=2)
        logger.debug(f"Saved session to file: {self.path}")

    def load(self) -> str | None:
        """Load the session token. Returns None if not found or unreadable."""
        if not self.path.exists():
            return None
        try:
            with open(self.path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load session from {self.path}: {e}")
            return None
        token = data.get("token") if isinstance(data, dict) else None
        return token or None

    def clear(self) -> None:
        """Delete the session file."""
        if self.path.exists():
            self.path.unlink()
            logger.debug(f"Deleted session file: {self.path}")
