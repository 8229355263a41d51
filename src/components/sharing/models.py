"""
Sharing component input/output models.

Share props are plain dicts at runtime. The TypedDicts below document the
fields each platform understands; unknown extra fields are passed through.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Literal, Required, TypedDict

# --- Types ---

SharingPlatform = Literal[
    "twitter",
    "facebook",
    "telegram",
    "whatsapp",
    "reddit",
    "linkedin",
    "tumblr",
    "gmail",
    "pocket",
]

# mailto has no endpoint table entry but is a valid share target
ShareTarget = SharingPlatform | Literal["mailto"]

ShareValue = str | int | float | bool | list[str] | None


# --- Share Props ---


class ShareProps(TypedDict, total=False):
    """Fields common to every share target."""

    url: Required[str]  # e.g., "https://example.com"
    text: str


class TwitterShareProps(ShareProps, total=False):
    """
    Twitter intent fields.

    hashtags are given without the leading "#".
    """

    hashtags: Sequence[str]
    via: str


class FacebookShareProps(ShareProps, total=False):
    """Facebook only reads `u`; `url` is used when `u` is missing."""

    u: str


class TelegramShareProps(ShareProps, total=False):
    pass


class WhatsappShareProps(ShareProps, total=False):
    pass


class RedditShareProps(ShareProps, total=False):
    """Post title. Takes priority over `text`."""

    title: str


class LinkedInShareProps(ShareProps, total=False):
    pass


class TumblrShareProps(ShareProps, total=False):
    """Tumblr share tool fields."""

    canonicalUrl: str
    content: str
    title: str
    caption: str
    tags: Sequence[str]


class GmailShareProps(ShareProps, total=False):
    """Gmail compose fields. `body` takes priority over `text`, `su` over `subject`."""

    body: str
    to: str
    subject: str
    su: str
    bcc: str
    cc: str


class MailtoShareProps(ShareProps, total=False):
    """RFC 2368 mailto fields."""

    emailAddress: str
    subject: str
    body: str


class PocketShareProps(ShareProps, total=False):
    pass


# --- Validation Error ---


@dataclass(frozen=True)
class SharingValidationError:
    """Sharing validation error."""

    code: str
    message: str
    field_name: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class GenerateShareUrlInput:
    """Input for generating a share URL for one target."""

    platform: str
    props: Mapping[str, ShareValue] = field(default_factory=dict)


# --- Output Models ---


@dataclass(frozen=True)
class GenerateShareUrlOutput:
    """Output from share URL generation."""

    share_url: str | None
    platform: str
    errors: list[SharingValidationError] = field(default_factory=list)
    success: bool = True
