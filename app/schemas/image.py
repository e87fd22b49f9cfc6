from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel, UrlStr, not_null


class ImageCreate(CamelModel):
    url: UrlStr
    thumbnail_url: Optional[UrlStr] = None
    file_id: Optional[str] = None
    filename: Optional[str] = None
    original_name: Optional[str] = None
    size: Optional[int] = Field(None, ge=0)
    mime_type: Optional[str] = None


class ImageUpdate(CamelModel):
    url: Optional[UrlStr] = None
    thumbnail_url: Optional[UrlStr] = None
    file_id: Optional[str] = None
    filename: Optional[str] = None
    original_name: Optional[str] = None
    size: Optional[int] = Field(None, ge=0)
    mime_type: Optional[str] = None

    check_not_null = not_null("url")


class Image(CamelModel):
    id: str
    url: str
    thumbnail_url: Optional[str] = None
    file_id: Optional[str] = None
    filename: Optional[str] = None
    original_name: Optional[str] = None
    size: Optional[int] = None
    mime_type: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
