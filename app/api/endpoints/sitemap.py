from typing import List, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.dependencies import get_db, get_settings
from app.core.exceptions import ValidationError
from app.schemas.tool import SitemapEntry
from app.services.tool_service import ToolService

router = APIRouter()


@router.get("/__sitemap__/tools", response_model=List[SitemapEntry])
def sitemap_tools(db: Session = Depends(get_db)):
    return [
        SitemapEntry(loc=f"/t/{tool.slug}", lastmod=tool.updated_at or tool.created_at)
        for tool in ToolService(db).sitemap()
    ]


@router.get("/get-tool", response_class=RedirectResponse, status_code=302)
def get_tool_legacy(slug: Optional[str] = None, settings: Settings = Depends(get_settings)):
    """Legacy lookup, superseded by ``/tools/slug/{slug}``."""
    if not slug:
        raise ValidationError([{"path": ["slug"], "message": "Slug is required", "type": "missing"}])
    return RedirectResponse(url=f"{settings.API_PREFIX}/tools/slug/{quote(slug)}", status_code=302)
