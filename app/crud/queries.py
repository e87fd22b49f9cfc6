"""
Read side of the directory: paginated listings and point lookups.

Lookups return ``None`` on a miss; turning that into a 404 is the caller's job.
"""
from typing import Any, Dict, List, Optional, Type

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.models import Alternative, Category, Image, Tool

# The two text columns a free-text ``q`` is matched against, per resource
SEARCH_COLUMNS = {
    Alternative: (Alternative.name, Alternative.description),
    Category: (Category.name, Category.label),
    Image: (Image.original_name, Image.filename),
    Tool: (Tool.name, Tool.description),
}


def find_many(
    db: Session,
    model: Type[Any],
    page: int = 1,
    limit: int = 20,
    q: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Page through ``model`` newest first, optionally filtered by ``q``.

    ``total`` is the size of the whole table and is not narrowed by ``q``.
    """
    offset = (page - 1) * limit
    total = db.query(func.count(model.id)).scalar() or 0

    query = db.query(model)
    if q:
        pattern = f"%{q}%"
        query = query.filter(or_(*(column.ilike(pattern) for column in SEARCH_COLUMNS[model])))

    rows = query.order_by(model.created_at.desc()).offset(offset).limit(limit).all()
    return {"data": rows, "total": total, "page": page, "page_size": limit}


def find_by_id(db: Session, model: Type[Any], row_id: str) -> Optional[Any]:
    return db.query(model).filter(model.id == row_id).first()


def find_by_slug(db: Session, model: Type[Any], slug: str) -> Optional[Any]:
    return db.query(model).filter(model.slug == slug).first()


def find_tools_for_alternative(db: Session, alternative_id: str) -> List[Tool]:
    return (
        db.query(Tool)
        .join(Tool.alternatives)
        .filter(Alternative.id == alternative_id)
        .order_by(Tool.created_at.desc())
        .all()
    )


def find_sitemap_tools(db: Session) -> List[Tool]:
    return db.query(Tool).order_by(Tool.created_at.desc()).all()
