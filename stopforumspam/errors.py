"""Exceptions raised by the StopForumSpam client."""
from __future__ import annotations

from typing import Any, Iterable

_INVALID_FIELD_MESSAGES = {
    "email": "The email address is not a valid email address",
    "ip": "The IP address is not a valid IP address",
    "emailhash": "The email hash is not a valid MD5 hash",
}


class StopForumSpamError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(StopForumSpamError, ValueError):
    """Raised when an identity attribute fails syntax validation."""

    def __init__(self, field: str, value: Any) -> None:
        prefix = _INVALID_FIELD_MESSAGES.get(field, f"The {field} is not valid")
        super().__init__(f"{prefix} {value}")
        self.field = field
        self.value = value


class MissingApiKeyError(StopForumSpamError):
    def __init__(self) -> None:
        super().__init__("You cannot submit spammers without an API Key.")


class IncompleteRecordError(StopForumSpamError):
    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(
            "You must have all search parameters for StopForumSpam.com to accept your submission. "
            f"Missing: {', '.join(self.missing)}"
        )


class TransportError(StopForumSpamError):
    """The HTTP request never produced a response."""

    def __init__(self, original: Exception) -> None:
        super().__init__(f"Request to StopForumSpam failed: {original}")
        self.original = original


class RemoteError(StopForumSpamError):
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Response Status: {status_code}, {body}")
        self.status_code = status_code
        self.body = body


class ParseError(StopForumSpamError):
    def __init__(self, body: str) -> None:
        super().__init__("StopForumSpam returned a body that is not valid JSON")
        self.body = body
