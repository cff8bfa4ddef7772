"""Persisted website record and onboarding input"""

import secrets
import uuid
from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, Field

from sitefactory.core.state_machine import OnboardingStatus, WebsiteStatus
from sitefactory.models.draft import ColorScheme, GeneratedWebsiteDraft


def _now() -> datetime:
    return datetime.now(timezone.utc)


def new_preview_token() -> str:
    return secrets.token_urlsafe(16)


class WebsiteRecord(BaseModel):
    """A generated website and its lifecycle state"""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    business_id: str
    slug: str
    preview_token: str = Field(default_factory=new_preview_token)
    status: WebsiteStatus = WebsiteStatus.PREVIEW
    onboarding_status: OnboardingStatus = OnboardingStatus.PENDING

    industry_key: str
    layout_style: str
    generation_seed: str
    hero_image: str
    gallery_images: List[str] = Field(default_factory=list)
    color_scheme: ColorScheme
    content: GeneratedWebsiteDraft

    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)


class OnboardingService(BaseModel):
    title: str
    description: str = ""


class OnboardingPatch(BaseModel):
    """Customer-supplied data that replaces generated placeholder content"""
    business_name: Optional[str] = None
    tagline: Optional[str] = None
    description: Optional[str] = None
    about_text: Optional[str] = None
    services: Optional[List[OnboardingService]] = None
    brand_color: Optional[str] = Field(default=None, description="#RRGGBB, sets primary and accent")
    brand_secondary_color: Optional[str] = Field(default=None, description="#RRGGBB, sets secondary")
    hero_photo_url: Optional[str] = None
    about_photo_url: Optional[str] = None
