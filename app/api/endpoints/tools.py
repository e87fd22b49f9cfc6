from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.core.dependencies import IdPath, get_content_generator, get_db, get_pagination
from app.core.exceptions import NotFoundError
from app.schemas import tool as schemas_tool
from app.schemas.common import Envelope, PaginationQuery, Page
from app.schemas.media import GenerateRequest
from app.services.content_generation_service import ContentGenerationService
from app.services.tool_service import ToolService
from app.workflows.generate_content import handle_generate_content

router = APIRouter()


@router.get("", response_model=Page[schemas_tool.Tool])
def list_tools(pagination: PaginationQuery = Depends(get_pagination), db: Session = Depends(get_db)):
    return ToolService(db).find_many(pagination.page, pagination.limit, pagination.q)


@router.post("", response_model=Envelope[schemas_tool.Tool])
def create_tool(tool: schemas_tool.ToolCreate, db: Session = Depends(get_db)):
    db_tool = ToolService(db).create(tool)
    return {"success": True, "data": db_tool, "message": "Tool created successfully"}


@router.post("/generate", response_model=None)
async def generate_tool_content(
    request: GenerateRequest,
    generator: ContentGenerationService = Depends(get_content_generator),
):
    """
    Scrape the tool's website and draft its tagline, description and content.
    Streams the model output as plain text unless ``stream`` is false.
    """
    generator.ensure_configured()
    if not request.stream:
        result = await handle_generate_content(generator, request.url)
        return {
            "success": True,
            "data": result["content"].model_dump(by_alias=True),
            "message": "Content generated successfully",
        }

    page = await generator.scrape(request.url)
    deltas = await generator.stream(page)
    return StreamingResponse(deltas, media_type="text/plain; charset=utf-8")


@router.get("/slug/{slug}", response_model=Envelope[schemas_tool.Tool])
def get_tool_by_slug(slug: str, db: Session = Depends(get_db)):
    db_tool = ToolService(db).find_by_slug(slug)
    if db_tool is None:
        raise NotFoundError("Tool", f"slug {slug}")
    return {"success": True, "data": db_tool, "message": "Tool retrieved successfully"}


@router.get("/{tool_id}", response_model=Envelope[schemas_tool.Tool])
def get_tool(tool_id: IdPath, db: Session = Depends(get_db)):
    db_tool = ToolService(db).find_by_id(tool_id)
    if db_tool is None:
        raise NotFoundError("Tool", f"id {tool_id}")
    return {"success": True, "data": db_tool, "message": "Tool retrieved successfully"}


@router.patch("/{tool_id}", response_model=Envelope[schemas_tool.Tool])
def update_tool(tool_id: IdPath, tool: schemas_tool.ToolUpdate, db: Session = Depends(get_db)):
    db_tool = ToolService(db).update(tool_id, tool)
    if db_tool is None:
        raise NotFoundError("Tool", f"id {tool_id}")
    return {"success": True, "data": db_tool, "message": "Tool updated successfully"}


@router.delete("/{tool_id}", response_model=Envelope[None])
def delete_tool(tool_id: IdPath, db: Session = Depends(get_db)):
    if not ToolService(db).delete(tool_id):
        raise NotFoundError("Tool", f"id {tool_id}")
    return {"success": True, "data": None, "message": "Tool deleted successfully"}
