"""Input sanitization utilities for Event Publisher.

Form input is cleaned before it is validated and sent to the platforms, and
request payloads are redacted before they reach the logs.
"""

from typing import Any

REDACTED = "***REDACTED***"

DEFAULT_SENSITIVE_KEYS = {"api_key", "password", "secret", "token", "credential", "auth"}


def sanitize_input(text: str | None, max_len: int | None = None) -> str:
    """Clean user-supplied text.

    Args:
        text: Input text to sanitize
        max_len: Optional maximum length. Left unset for fields whose
            length is enforced by validation instead.

    Returns:
        Text without control characters (newlines and tabs are kept) and
        without surrounding whitespace
    """
    if not text:
        return ""

    text = str(text)

    # Remove control characters except newlines and tabs
    text = "".join(char for char in text if char >= " " or char in "\n\t")
    text = text.strip()

    if max_len is not None:
        return text[:max_len]
    return text


def sanitize_for_html(text: str | None) -> str:
    """Sanitize text for safe HTML output.

    Args:
        text: Text to sanitize

    Returns:
        HTML-safe string
    """
    if not text:
        return ""

    # Escape HTML special characters
    replacements = {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#x27;",
    }

    for char, replacement in replacements.items():
        text = text.replace(char, replacement)

    return text


def text_to_html(text: str | None) -> str:
    """Convert plain text into simple HTML paragraphs.

    Blank lines separate paragraphs and single newlines become ``<br>``.

    Args:
        text: Plain text

    Returns:
        HTML fragment
    """
    if not text:
        return ""

    paragraphs = [p for p in text.replace("\r\n", "\n").split("\n\n") if p.strip()]
    return "".join(
        f"<p>{sanitize_for_html(p.strip()).replace(chr(10), '<br>')}</p>" for p in paragraphs
    )


def redact_sensitive_data(
    data: Any,
    sensitive_keys: set[str] | None = None,
) -> Any:
    """Redact sensitive values from a dictionary for safe logging.

    Args:
        data: Dictionary to redact
        sensitive_keys: Set of key substrings to redact. Defaults to common sensitive keys.

    Returns:
        New dictionary with sensitive values replaced with "***REDACTED***"
    """
    if sensitive_keys is None:
        sensitive_keys = DEFAULT_SENSITIVE_KEYS

    if not isinstance(data, dict):
        return data

    redacted = {}
    for key, value in data.items():
        key_lower = str(key).lower()
        if any(sk in key_lower for sk in sensitive_keys):
            redacted[key] = REDACTED
        elif isinstance(value, dict):
            redacted[key] = redact_sensitive_data(value, sensitive_keys)
        elif isinstance(value, list):
            redacted[key] = [
                redact_sensitive_data(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            redacted[key] = value

    return redacted
