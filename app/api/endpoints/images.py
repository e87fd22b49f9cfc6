from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session

from app.core.dependencies import IdPath, get_db, get_media_service, get_pagination
from app.core.exceptions import NotFoundError
from app.schemas import image as schemas_image
from app.schemas.common import Envelope, PaginationQuery, Page
from app.services.image_service import ImageService
from app.services.media_service import MAX_UPLOAD_SIZE, MediaService

router = APIRouter()


@router.get("", response_model=Page[schemas_image.Image])
def list_images(pagination: PaginationQuery = Depends(get_pagination), db: Session = Depends(get_db)):
    return ImageService(db).find_many(pagination.page, pagination.limit, pagination.q)


@router.post("", response_model=Envelope[schemas_image.Image])
def create_image(image: schemas_image.ImageCreate, db: Session = Depends(get_db)):
    db_image = ImageService(db).create(image)
    return {"success": True, "data": db_image, "message": "Image created successfully"}


@router.post("/upload", response_model=Envelope[schemas_image.Image])
async def upload_image(file: UploadFile = File(...), media: MediaService = Depends(get_media_service)):
    # Reject by declared size before buffering the body
    media.check_upload(file.content_type, file.size or 0)
    file_content = await file.read(MAX_UPLOAD_SIZE + 1)
    db_image = media.upload_image(file_content, file.filename, file.content_type)
    return {"success": True, "data": db_image, "message": "Image uploaded successfully"}


@router.get("/{image_id}", response_model=Envelope[schemas_image.Image])
def get_image(image_id: IdPath, db: Session = Depends(get_db)):
    db_image = ImageService(db).find_by_id(image_id)
    if db_image is None:
        raise NotFoundError("Image", f"id {image_id}")
    return {"success": True, "data": db_image, "message": "Image retrieved successfully"}


@router.patch("/{image_id}", response_model=Envelope[schemas_image.Image])
def update_image(image_id: IdPath, image: schemas_image.ImageUpdate, db: Session = Depends(get_db)):
    db_image = ImageService(db).update(image_id, image)
    if db_image is None:
        raise NotFoundError("Image", f"id {image_id}")
    return {"success": True, "data": db_image, "message": "Image updated successfully"}


@router.delete("/{image_id}", response_model=Envelope[None])
def delete_image(image_id: IdPath, media: MediaService = Depends(get_media_service)):
    if not media.delete_image(image_id):
        raise NotFoundError("Image", f"id {image_id}")
    return {"success": True, "data": None, "message": "Image deleted successfully"}
