from fastapi import APIRouter, Depends

from app.core.dependencies import get_media_service
from app.schemas.common import Envelope
from app.schemas.media import MediaUrlRequest
from app.services.media_service import MediaService

router = APIRouter()


@router.post("/favicon", response_model=Envelope[str])
async def fetch_favicon(request: MediaUrlRequest, media: MediaService = Depends(get_media_service)):
    image = await media.fetch_favicon(request.url)
    return {"success": True, "data": image.url, "message": "Favicon fetched successfully"}


@router.post("/screenshot", response_model=Envelope[str])
async def capture_screenshot(request: MediaUrlRequest, media: MediaService = Depends(get_media_service)):
    image = await media.capture_screenshot(request.url)
    return {"success": True, "data": image.url, "message": "Screenshot captured successfully"}
