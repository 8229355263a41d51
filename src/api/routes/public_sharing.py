"""
Public sharing endpoints for generating platform share URLs.

Endpoints:
- POST /api/public/share/generate - build a share URL (and its popup link) from share props
- GET /api/public/share/platforms - list enabled share targets
- Public routes (no auth required)
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from src.adapters.sharing_rules import RulesSharingAdapter
from src.api.deps import get_popup_config, get_sharing_rules
from src.components.popup import PopupConfig, render_popup_link
from src.components.sharing import GenerateShareUrlInput, ShareValue, run

router = APIRouter()


# --- Request/Response Models ---


class GenerateShareUrlRequest(BaseModel):
    """Request body for share URL generation."""

    platform: str = Field(..., description="Target share platform, e.g. 'twitter' or 'mailto'")
    props: dict[str, ShareValue] = Field(
        ..., description="Share props (url, text and platform-specific fields)"
    )
    label: str | None = Field(
        default=None, description="Link text for the popup anchor (defaults to the platform)"
    )


class GenerateShareUrlResponse(BaseModel):
    """Response containing the generated share URL."""

    share_url: str = Field(..., description="Platform-specific share URL")
    platform: str = Field(..., description="Target platform")
    link_html: str = Field(..., description="Anchor adopted by the popup dispatcher")


class ShareUrlErrorResponse(BaseModel):
    """Error response for share URL generation."""

    detail: str


# --- Endpoint ---


@router.post(
    "/share/generate",
    response_model=GenerateShareUrlResponse,
    responses={
        400: {"model": ShareUrlErrorResponse, "description": "Unknown or disabled platform"},
    },
    summary="Generate share URL",
    description="Generate a platform-specific share URL from share props.",
)
def generate_share_url_endpoint(
    request: GenerateShareUrlRequest,
    rules: RulesSharingAdapter = Depends(get_sharing_rules),
    popup_config: PopupConfig = Depends(get_popup_config),
) -> GenerateShareUrlResponse:
    """
    Generate a share URL.

    - **platform**: Target platform (twitter, facebook, ..., mailto, pocket)
    - **props**: Share props; falsy values are omitted from the URL
    - **label**: Optional link text for the rendered popup anchor
    """
    result = run(GenerateShareUrlInput(platform=request.platform, props=request.props), rules=rules)

    if not result.success or result.share_url is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="; ".join(e.message for e in result.errors) or "Failed to generate share URL",
        )

    return GenerateShareUrlResponse(
        share_url=result.share_url,
        platform=result.platform,
        link_html=render_popup_link(
            result.share_url, request.label or result.platform, popup_config
        ),
    )


# --- Additional endpoint for getting shareable platforms ---


class SharePlatformsResponse(BaseModel):
    """Response containing available sharing platforms."""

    platforms: list[str] = Field(..., description="List of enabled share platforms")


@router.get(
    "/share/platforms",
    response_model=SharePlatformsResponse,
    summary="Get available share platforms",
    description="Get list of enabled share platforms.",
)
def get_share_platforms(
    rules: RulesSharingAdapter = Depends(get_sharing_rules),
) -> SharePlatformsResponse:
    """Returns the share targets enabled in rules.yaml."""
    return SharePlatformsResponse(platforms=list(rules.get_platforms()))
