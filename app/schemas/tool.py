from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel, UrlStr, not_null


class ToolCreate(CamelModel):
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    website_url: UrlStr
    description: Optional[str] = None
    content: Optional[str] = None
    tagline: Optional[str] = None
    screenshot_url: Optional[UrlStr] = None
    favicon_url: Optional[UrlStr] = None
    submitter_name: Optional[str] = None
    submitter_email: Optional[EmailStr] = None
    category_id: Optional[str] = None
    alternative_id: Optional[str] = Field(None, description="Alternative to link the new tool to.")
    is_open_source: Optional[bool] = None
    is_featured: Optional[bool] = None

    check_not_null = not_null("is_open_source", "is_featured")


class ToolUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, min_length=1)
    website_url: Optional[UrlStr] = None
    screenshot_url: Optional[UrlStr] = None
    description: Optional[str] = None
    favicon_url: Optional[UrlStr] = None
    content: Optional[str] = None
    tagline: Optional[str] = None
    is_open_source: Optional[bool] = None
    is_featured: Optional[bool] = None
    submitter_name: Optional[str] = None
    submitter_email: Optional[EmailStr] = None
    page_views: Optional[int] = Field(None, ge=0)
    category_id: Optional[str] = None

    check_not_null = not_null("name", "slug", "website_url", "is_open_source", "is_featured")


class Tool(CamelModel):
    id: str
    name: str
    slug: str
    website_url: str
    screenshot_url: Optional[str] = None
    description: Optional[str] = None
    favicon_url: Optional[str] = None
    content: Optional[str] = None
    tagline: Optional[str] = None
    is_open_source: bool
    is_featured: bool
    submitter_name: Optional[str] = None
    submitter_email: Optional[str] = None
    page_views: Optional[int] = 0
    category_id: Optional[str] = None
    account_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SitemapEntry(CamelModel):
    loc: str
    lastmod: Optional[datetime] = None
    changefreq: str = "weekly"
    priority: float = 0.8
