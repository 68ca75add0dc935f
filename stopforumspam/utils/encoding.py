from __future__ import annotations

from urllib.parse import quote

# Characters left alone by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(value: str) -> str:
    """Percent-encode the UTF-8 octets of ``value`` for a form field."""
    return quote(value.encode("utf-8"), safe=_URI_COMPONENT_SAFE)
