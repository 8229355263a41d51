"""
Sharing component - Social share URL generation.

Builds platform-specific share URLs (and mailto URIs) from a generic set of
share props.

Invariants:
- Builders are pure: same props, same URL
- Falsy props never appear in the query string
- Fields a platform does not accept are dropped, not renamed silently
- Extra props are passed through to the query string
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from ._impl import MAILTO_SCHEME, coalesce, join_body, social_base, to_query_string
from .models import (
    FacebookShareProps,
    GenerateShareUrlInput,
    GenerateShareUrlOutput,
    GmailShareProps,
    LinkedInShareProps,
    MailtoShareProps,
    PocketShareProps,
    RedditShareProps,
    ShareTarget,
    SharingValidationError,
    TelegramShareProps,
    TumblrShareProps,
    TwitterShareProps,
    WhatsappShareProps,
)
from .ports import SharingRulesPort

logger = logging.getLogger(__name__)


# --- Pure Functions (Functional Core) ---


def twitter(props: TwitterShareProps) -> str:
    """
    Share on Twitter.

    Reference: https://developer.twitter.com/en/docs/twitter-for-websites/tweet-button/overview

    Example:
        >>> twitter({"url": "https://example.com", "hashtags": ["a", "b"]})
        'https://twitter.com/intent/tweet?url=https%3A%2F%2Fexample.com&hashtags=a%2Cb'
    """
    return social_base(props, "twitter")


def facebook(props: FacebookShareProps) -> str:
    """
    Share on Facebook.

    Facebook only reads `u`, so `url` is used as its fallback and both `url`
    and `text` are dropped.
    """
    params: dict[str, Any] = dict(props)
    params["u"] = coalesce(props.get("u"), props.get("url"))
    params["url"] = None
    params["text"] = None
    return social_base(params, "facebook")


def telegram(props: TelegramShareProps) -> str:
    """Share on Telegram."""
    return social_base(props, "telegram")


def whatsapp(props: WhatsappShareProps) -> str:
    """
    Share on WhatsApp.

    WhatsApp has no URL field; the URL is appended to the message text.

    Example:
        >>> whatsapp({"url": "https://example.com", "text": "Hi"})
        'https://wa.me?text=Hi+https%3A%2F%2Fexample.com'
    """
    params: dict[str, Any] = dict(props)
    params["text"] = join_body(props.get("text"), props.get("url"))
    params["url"] = None
    return social_base(params, "whatsapp")


def reddit(props: RedditShareProps) -> str:
    """Share on Reddit. `title` falls back to `text`."""
    params: dict[str, Any] = dict(props)
    params["title"] = coalesce(props.get("title"), props.get("text"))
    params["text"] = None
    return social_base(params, "reddit")


def linkedin(props: LinkedInShareProps) -> str:
    """Share on LinkedIn. `text` is not officially supported but is honored."""
    return social_base(props, "linkedin")


def tumblr(props: TumblrShareProps) -> str:
    """
    Share on Tumblr as a link post.

    `canonicalUrl` falls back to `url` and `content` is taken from `text`
    before `caption`.
    """
    params: dict[str, Any] = dict(props)
    params["posttype"] = "link"
    params["canonicalUrl"] = coalesce(props.get("canonicalUrl"), props.get("url"))
    params["content"] = coalesce(props.get("text"), props.get("caption"))
    params["url"] = None
    params["text"] = None
    return social_base(params, "tumblr")


def gmail(props: GmailShareProps) -> str:
    """
    Share through the Gmail compose view.

    The URL is appended to the body (`body`, else `text`). The subject is
    read from `su`, else `subject`.
    """
    params: dict[str, Any] = dict(props)
    params["view"] = "cm"
    params["body"] = join_body(coalesce(props.get("body"), props.get("text")), props.get("url"))
    params["su"] = coalesce(props.get("su"), props.get("subject"))
    params["url"] = None
    params["text"] = None
    return social_base(params, "gmail")


def mailto(props: MailtoShareProps) -> str:
    """
    Share by email (RFC 2368).

    Example:
        >>> mailto({"url": "https://example.com", "emailAddress": "a@b.c"})
        'mailto:a@b.c?body=https%3A%2F%2Fexample.com'
    """
    params: dict[str, Any] = dict(props)
    params["body"] = join_body(coalesce(props.get("body"), props.get("text")), props.get("url"))
    params["url"] = None
    params["text"] = None
    email_address = params.pop("emailAddress", None) or ""
    return f"{MAILTO_SCHEME}{email_address}?{to_query_string(params)}"


def pocket(props: PocketShareProps) -> str:
    """Save on Pocket. Pocket ignores `text`, so it is always dropped."""
    params: dict[str, Any] = dict(props)
    params["text"] = None
    return social_base(params, "pocket")


ShareBuilder = Callable[[Any], str]

SHARE_BUILDERS: Mapping[ShareTarget, ShareBuilder] = {
    "twitter": twitter,
    "facebook": facebook,
    "telegram": telegram,
    "whatsapp": whatsapp,
    "reddit": reddit,
    "linkedin": linkedin,
    "tumblr": tumblr,
    "gmail": gmail,
    "mailto": mailto,
    "pocket": pocket,
}

SUPPORTED_TARGETS: tuple[ShareTarget, ...] = tuple(SHARE_BUILDERS)


# --- Validation ---


def validate_platform(platform: str) -> list[SharingValidationError]:
    """
    Validate that platform is a supported share target.

    Args:
        platform: The platform to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors: list[SharingValidationError] = []

    if not platform:
        errors.append(
            SharingValidationError(
                code="EMPTY_PLATFORM",
                message="Platform cannot be empty",
                field_name="platform",
            )
        )
        return errors

    if platform not in SHARE_BUILDERS:
        errors.append(
            SharingValidationError(
                code="INVALID_PLATFORM",
                message=f"Platform must be one of: {', '.join(sorted(SUPPORTED_TARGETS))}",
                field_name="platform",
            )
        )

    return errors


def validate_enabled(
    platform: str, rules: SharingRulesPort | None
) -> list[SharingValidationError]:
    """Check the platform against the enabled set from rules (all enabled without rules)."""
    if rules is None:
        return []

    if not rules.is_enabled() or platform not in rules.get_platforms():
        return [
            SharingValidationError(
                code="PLATFORM_DISABLED",
                message=f"Sharing to {platform} is disabled",
                field_name="platform",
            )
        ]

    return []


def generate_share_url(
    platform: ShareTarget, props: Mapping[str, Any]
) -> str:
    """Dispatch props to the builder for an already validated platform."""
    return SHARE_BUILDERS[platform](props)


# --- Component Entry Point ---


def run(
    inp: GenerateShareUrlInput,
    *,
    rules: SharingRulesPort | None = None,
) -> GenerateShareUrlOutput:
    """
    Main component entry point (Atomic Component Pattern).

    Args:
        inp: GenerateShareUrlInput with target platform and share props
        rules: Optional rules port restricting the enabled platforms

    Returns:
        GenerateShareUrlOutput with the share URL or validation errors
    """
    if not isinstance(inp, GenerateShareUrlInput):
        raise ValueError(f"Unknown input type: {type(inp)}")

    errors = validate_platform(inp.platform)
    if not errors:
        errors = validate_enabled(inp.platform, rules)

    if errors:
        logger.debug(
            "Share URL rejected: platform=%s codes=%s",
            inp.platform,
            [e.code for e in errors],
        )
        return GenerateShareUrlOutput(
            share_url=None,
            platform=inp.platform,
            errors=errors,
            success=False,
        )

    share_url = generate_share_url(inp.platform, inp.props)  # type: ignore[arg-type]
    logger.debug("Share URL generated: platform=%s", inp.platform)

    return GenerateShareUrlOutput(
        share_url=share_url,
        platform=inp.platform,
        errors=[],
        success=True,
    )
