"""
Sharing component - Social share URL generation.
"""

from ._impl import (
    MAILTO_SCHEME,
    SOCIAL_URLS,
    coalesce,
    join_body,
    social_base,
    social_base_url,
    stringify,
    to_query_string,
)
from .component import (
    SHARE_BUILDERS,
    SUPPORTED_TARGETS,
    facebook,
    generate_share_url,
    gmail,
    linkedin,
    mailto,
    pocket,
    reddit,
    run,
    telegram,
    tumblr,
    twitter,
    validate_enabled,
    validate_platform,
    whatsapp,
)
from .models import (
    FacebookShareProps,
    GenerateShareUrlInput,
    GenerateShareUrlOutput,
    GmailShareProps,
    LinkedInShareProps,
    MailtoShareProps,
    PocketShareProps,
    RedditShareProps,
    ShareProps,
    ShareTarget,
    ShareValue,
    SharingPlatform,
    SharingValidationError,
    TelegramShareProps,
    TumblrShareProps,
    TwitterShareProps,
    WhatsappShareProps,
)
from .ports import SharingRulesPort

__all__ = [
    # Component
    "run",
    # Builders
    "twitter",
    "facebook",
    "telegram",
    "whatsapp",
    "reddit",
    "linkedin",
    "tumblr",
    "gmail",
    "mailto",
    "pocket",
    # Pure functions
    "generate_share_url",
    "validate_platform",
    "validate_enabled",
    "to_query_string",
    "stringify",
    "social_base",
    "social_base_url",
    "coalesce",
    "join_body",
    # Constants
    "SOCIAL_URLS",
    "MAILTO_SCHEME",
    "SHARE_BUILDERS",
    "SUPPORTED_TARGETS",
    # Models
    "SharingPlatform",
    "ShareTarget",
    "ShareValue",
    "ShareProps",
    "TwitterShareProps",
    "FacebookShareProps",
    "TelegramShareProps",
    "WhatsappShareProps",
    "RedditShareProps",
    "LinkedInShareProps",
    "TumblrShareProps",
    "GmailShareProps",
    "MailtoShareProps",
    "PocketShareProps",
    "SharingValidationError",
    "GenerateShareUrlInput",
    "GenerateShareUrlOutput",
    # Ports
    "SharingRulesPort",
]
