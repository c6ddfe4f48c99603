"""Scrubs bearer tokens and payment fields before anything reaches a log line."""

import re
from collections.abc import Mapping
from typing import Any

REDACTED = "[REDACTED]"

# (prefix)(secret) pairs; only the secret half is replaced
SECRET_PATTERNS = [
    re.compile(r"(Bearer\s+)([\w\-.~+/=]+)", re.IGNORECASE),
    re.compile(r"(Authorization:\s*)(?!Bearer\b)([\w\-.~+/=]+)", re.IGNORECASE),
    re.compile(r"(\b(?:access_)?token=)([^&\s]+)", re.IGNORECASE),
    re.compile(r"(\"(?:cardNumber|cvv)\"\s*:\s*\")([^\"]*)", re.IGNORECASE),
]

# Matched as substrings of the lower-cased key
SENSITIVE_KEYS = (
    "authorization",
    "token",
    "password",
    "secret",
    "cardnumber",
    "card_number",
    "cvv",
)


def redact_text(text: str) -> str:
    if not text:
        return text
    for pattern in SECRET_PATTERNS:
        text = pattern.sub(rf"\1{REDACTED}", text)
    return text


def redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, Mapping):
        return redact_dict(value)
    if isinstance(value, (list, tuple)):
        return [redact_value(item) for item in value]
    return value


def redact_dict(obj: Mapping[str, Any]) -> dict[str, Any]:
    """Copy ``obj`` with sensitive keys masked and string values scrubbed, recursively.

    Accepts any mapping, so ``httpx.Headers`` can be passed as-is.
    """
    return {
        key: REDACTED if _is_sensitive(key) else redact_value(value)
        for key, value in obj.items()
    }


def _is_sensitive(key: object) -> bool:
    lowered = str(key).lower()
    return any(marker in lowered for marker in SENSITIVE_KEYS)
