"""
Sharing internals - endpoint table and query string encoding.

Key behaviors:
- Falsy values (None, "", 0, False, empty lists) never reach the query string
- Field order in the query string is the insertion order of the params dict
- Encoding follows the HTML form serializer (space as "+", "*-._" kept as-is)
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any
from urllib.parse import quote_plus, urlencode

from .models import SharingPlatform

# --- Endpoint Table ---

SOCIAL_URLS: Mapping[SharingPlatform, str] = MappingProxyType(
    {
        "twitter": "https://twitter.com/intent/tweet",
        "facebook": "https://www.facebook.com/sharer/sharer.php",
        "telegram": "https://t.me/share/url",
        "whatsapp": "https://wa.me",
        "reddit": "https://reddit.com/submit",
        "linkedin": "https://www.linkedin.com/sharing/share-offsite",
        "tumblr": "https://www.tumblr.com/widgets/share/tool",
        "gmail": "https://mail.google.com/mail",
        "pocket": "https://getpocket.com/edit",
    }
)

MAILTO_SCHEME = "mailto:"

# Characters the form serializer leaves unescaped besides alphanumerics.
# quote_plus always keeps "~", so it is escaped separately below.
_FORM_SAFE = "*-._"

_SURROGATE = re.compile(r"[\ud800-\udfff]")


# --- Encoding ---


def _form_quote(
    string: str,
    safe: str = "",
    encoding: str | None = None,
    errors: str | None = None,
) -> str:
    """quote_via hook for urlencode matching application/x-www-form-urlencoded."""
    # Lone surrogates cannot be UTF-8 encoded; the form serializer sends U+FFFD
    string = _SURROGATE.sub("\ufffd", string)
    return quote_plus(string, safe=_FORM_SAFE, encoding="utf-8", errors="strict").replace(
        "~", "%7E"
    )


def stringify(value: Any) -> str:
    """
    Convert a share value to its query string form.

    Args:
        value: Scalar or list/tuple value

    Returns:
        String form. Lists are joined with ",", bools become "true"/"false"
        and integral floats drop the ".0".

    Example:
        >>> stringify(["hello", "world"])
        'hello,world'
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(item) for item in value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_query_string(params: Mapping[str, Any]) -> str:
    """
    Build a URL query string (without the leading "?") from share params.

    Args:
        params: Field name to value mapping. Falsy values are omitted.

    Returns:
        Encoded query string, possibly empty

    Example:
        >>> to_query_string({"url": "https://a.b", "text": "", "via": "me"})
        'url=https%3A%2F%2Fa.b&via=me'
    """
    pairs = [(key, stringify(value)) for key, value in params.items() if value]
    return urlencode(pairs, quote_via=_form_quote)


# --- Endpoint Lookup ---


def social_base_url(platform: SharingPlatform) -> str:
    """Return the base endpoint for a platform. Unknown platforms raise KeyError."""
    return SOCIAL_URLS[platform]


def social_base(params: Mapping[str, Any], platform: SharingPlatform) -> str:
    """Join a platform endpoint with the encoded params."""
    return f"{social_base_url(platform)}?{to_query_string(params)}"


# --- Field Helpers ---


def coalesce(*values: Any) -> Any:
    """
    Return the first truthy value, or the last value if none is truthy.

    Example:
        >>> coalesce(None, "", "fallback")
        'fallback'
    """
    for value in values[:-1]:
        if value:
            return value
    return values[-1] if values else None


def join_body(lead: Any, url: Any) -> str:
    """
    Append the shared URL to a message body with a single space.

    Absent parts are skipped, so a missing body yields the URL alone.
    """
    return " ".join(stringify(part) for part in (lead, url) if part)
