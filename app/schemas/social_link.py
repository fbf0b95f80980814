"""Pydantic schemas for social links."""

import re
from datetime import datetime
from urllib.parse import urlparse, urlunparse
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from app.models.social_link import SocialPlatform


# Platform-specific URL patterns
PLATFORM_PATTERNS = {
    SocialPlatform.INSTAGRAM: r"^https?://(www\.)?instagram\.com/[\w.]+/?",
    SocialPlatform.TWITTER: r"^https?://(www\.)?(twitter\.com|x\.com)/[\w]+/?",
    SocialPlatform.YOUTUBE: r"^https?://(www\.)?(youtube\.com|youtu\.be)/(c/|channel/|@)?[\w-]+/?",
    SocialPlatform.TIKTOK: r"^https?://(www\.)?tiktok\.com/@[\w.]+/?",
    SocialPlatform.LINKEDIN: r"^https?://(www\.)?linkedin\.com/(in|company)/[\w-]+/?",
    SocialPlatform.TWITCH: r"^https?://(www\.)?twitch\.tv/[\w]+/?",
    SocialPlatform.WEBSITE: r"^https?://[\w.-]+\.[a-z]{2,}",
}


def normalize_url(url: str) -> str:
    """Remove tracking parameters and normalize URL."""
    parsed = urlparse(url)
    # Strip query params (removes ?igsh=..., ?utm_source=..., etc.)
    clean = urlunparse((
        parsed.scheme,
        parsed.netloc,
        parsed.path.rstrip('/'),
        '', '', ''
    ))
    return clean


def validate_platform_url(platform: SocialPlatform, url: str) -> str:
    """Check the URL against the platform pattern and return it normalized."""
    pattern = PLATFORM_PATTERNS.get(platform)
    if pattern and not re.match(pattern, url, re.IGNORECASE):
        raise ValueError(f'Invalid {platform.value} URL format')
    return normalize_url(url)


class SocialLinkCreate(BaseModel):
    """Schema for creating a social link."""

    platform: SocialPlatform
    url: str = Field(..., min_length=1, max_length=500)
    label: str | None = Field(None, max_length=100)
    enabled: bool = True

    @model_validator(mode='after')
    def validate_and_normalize_url(self) -> 'SocialLinkCreate':
        """Validate URL matches platform pattern and normalize it."""
        self.url = validate_platform_url(self.platform, self.url)
        if not self.label:
            self.label = self.platform.value
        return self


class SocialLinkUpdate(BaseModel):
    """Schema for updating a social link.

    The platform is fixed once created; positions change through reorder only.
    """

    url: str | None = Field(None, min_length=1, max_length=500)
    label: str | None = Field(None, min_length=1, max_length=100)
    enabled: bool | None = None

    @field_validator('url', 'label', 'enabled')
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError('Field cannot be null')
        return v


class SocialLinkResponse(BaseModel):
    """Schema for social link response."""

    id: UUID
    user_id: UUID
    platform: SocialPlatform
    url: str
    label: str
    enabled: bool
    position: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
