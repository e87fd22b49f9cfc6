from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel, not_null


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    label: Optional[str] = None


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, min_length=1)
    label: Optional[str] = None

    check_not_null = not_null("name", "slug")


class Category(CamelModel):
    id: str
    name: str
    slug: str
    label: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
