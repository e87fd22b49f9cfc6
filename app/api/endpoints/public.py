from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.dependencies import get_db, get_pagination
from app.core.exceptions import NotFoundError
from app.schemas import alternative as schemas_alternative, tool as schemas_tool
from app.schemas.common import Envelope, PaginationQuery, Page
from app.services.alternative_service import AlternativeService
from app.services.tool_service import ToolService

router = APIRouter()


@router.get("/tools", response_model=Page[schemas_tool.Tool])
def list_public_tools(pagination: PaginationQuery = Depends(get_pagination), db: Session = Depends(get_db)):
    return ToolService(db).find_many(pagination.page, pagination.limit, pagination.q)


@router.get("/tools/slug/{slug}", response_model=Envelope[schemas_tool.Tool])
def get_public_tool_by_slug(slug: str, db: Session = Depends(get_db)):
    db_tool = ToolService(db).find_by_slug(slug)
    if db_tool is None:
        raise NotFoundError("Tool", f"slug {slug}")
    return {"success": True, "data": db_tool, "message": "Tool retrieved successfully"}


@router.get("/alternatives", response_model=Page[schemas_alternative.Alternative])
def list_public_alternatives(pagination: PaginationQuery = Depends(get_pagination), db: Session = Depends(get_db)):
    return AlternativeService(db).find_many(pagination.page, pagination.limit, pagination.q)
