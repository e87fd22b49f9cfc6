from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.dependencies import IdPath, get_db, get_pagination
from app.core.exceptions import NotFoundError
from app.models.tool import Tool
from app.schemas import alternative as schemas_alternative, tool as schemas_tool
from app.schemas.common import Envelope, PaginationQuery, Page
from app.services.alternative_service import AlternativeService
from app.services.tool_service import ToolService

router = APIRouter()


@router.get("", response_model=Page[schemas_alternative.Alternative])
def list_alternatives(pagination: PaginationQuery = Depends(get_pagination), db: Session = Depends(get_db)):
    return AlternativeService(db).find_many(pagination.page, pagination.limit, pagination.q)


@router.post("", response_model=Envelope[schemas_alternative.Alternative])
def create_alternative(alternative: schemas_alternative.AlternativeCreate, db: Session = Depends(get_db)):
    db_alternative = AlternativeService(db).create(alternative)
    return {"success": True, "data": db_alternative, "message": "Alternative created successfully"}


@router.get("/{alternative_id}", response_model=Envelope[schemas_alternative.Alternative])
def get_alternative(alternative_id: IdPath, db: Session = Depends(get_db)):
    db_alternative = AlternativeService(db).find_by_id(alternative_id)
    if db_alternative is None:
        raise NotFoundError("Alternative", f"id {alternative_id}")
    return {"success": True, "data": db_alternative, "message": "Alternative retrieved successfully"}


@router.patch("/{alternative_id}", response_model=Envelope[schemas_alternative.Alternative])
def update_alternative(
    alternative_id: IdPath,
    alternative: schemas_alternative.AlternativeUpdate,
    db: Session = Depends(get_db),
):
    db_alternative = AlternativeService(db).update(alternative_id, alternative)
    if db_alternative is None:
        raise NotFoundError("Alternative", f"id {alternative_id}")
    return {"success": True, "data": db_alternative, "message": "Alternative updated successfully"}


@router.delete("/{alternative_id}", response_model=Envelope[None])
def delete_alternative(alternative_id: IdPath, db: Session = Depends(get_db)):
    if not AlternativeService(db).delete(alternative_id):
        raise NotFoundError("Alternative", f"id {alternative_id}")
    return {"success": True, "data": None, "message": "Alternative deleted successfully"}


def _existing_pair(db: Session, alternative_id: str, tool_id: str) -> None:
    if AlternativeService(db).find_by_id(alternative_id) is None:
        raise NotFoundError("Alternative", f"id {alternative_id}")
    if ToolService(db).find_by_id(tool_id) is None:
        raise NotFoundError("Tool", f"id {tool_id}")


@router.get("/{alternative_id}/tools", response_model=Envelope[List[schemas_tool.Tool]])
def list_alternative_tools(alternative_id: IdPath, db: Session = Depends(get_db)):
    service = AlternativeService(db)
    if service.find_by_id(alternative_id) is None:
        raise NotFoundError("Alternative", f"id {alternative_id}")
    tools: List[Tool] = service.list_tools(alternative_id)
    return {"success": True, "data": tools, "message": "Tools retrieved successfully"}


@router.post("/{alternative_id}/tools/{tool_id}", response_model=Envelope[schemas_alternative.ToolLink])
def link_tool(alternative_id: IdPath, tool_id: IdPath, db: Session = Depends(get_db)):
    _existing_pair(db, alternative_id, tool_id)
    link = AlternativeService(db).link_tool(tool_id, alternative_id)
    return {"success": True, "data": link, "message": "Tool linked to alternative successfully"}


@router.delete("/{alternative_id}/tools/{tool_id}", response_model=Envelope[None])
def unlink_tool(alternative_id: IdPath, tool_id: IdPath, db: Session = Depends(get_db)):
    if not AlternativeService(db).unlink_tool(tool_id, alternative_id):
        raise NotFoundError("Link", f"alternative id {alternative_id} and tool id {tool_id}")
    return {"success": True, "data": None, "message": "Tool unlinked from alternative successfully"}
