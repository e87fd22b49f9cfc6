from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel, UrlStr, not_null


class AlternativeCreate(CamelModel):
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    website_url: UrlStr
    description: Optional[str] = None
    favicon_url: Optional[UrlStr] = None
    is_featured: Optional[bool] = None
    is_open_source: Optional[bool] = None

    check_not_null = not_null("is_featured", "is_open_source")


class AlternativeUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, min_length=1)
    website_url: Optional[UrlStr] = None
    description: Optional[str] = None
    favicon_url: Optional[UrlStr] = None
    is_featured: Optional[bool] = None
    is_open_source: Optional[bool] = None

    check_not_null = not_null("name", "slug", "website_url", "is_featured", "is_open_source")


class Alternative(CamelModel):
    id: str
    name: str
    slug: str
    website_url: str
    description: Optional[str] = None
    favicon_url: Optional[str] = None
    is_featured: bool
    is_open_source: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ToolLink(CamelModel):
    alternative_id: str
    tool_id: str
