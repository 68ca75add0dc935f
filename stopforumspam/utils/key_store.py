"""Holder for the StopForumSpam API key used by submissions."""
from __future__ import annotations

from typing import Any, Optional

UNSET: Any = object()


class KeyStore:
    """Mutable API key owned by a client instance.

    An empty string, ``None`` or ``False`` all mean "no key"; reads always
    return a string.
    """

    def __init__(self, key: Optional[str] = None) -> None:
        self._key = key or ""

    def get_key(self) -> str:
        return self._key

    def set_key(self, key: Optional[str]) -> None:
        self._key = key or ""

    def key(self, value: Any = UNSET) -> str:
        if value is not UNSET:
            self.set_key(value)
        return self._key

    def __repr__(self) -> str:
        state = "set" if self._key else "unset"
        return f"KeyStore(<{state}>)"
