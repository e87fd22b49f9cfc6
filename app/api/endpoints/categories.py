from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.dependencies import IdPath, get_db, get_pagination
from app.core.exceptions import NotFoundError
from app.schemas import category as schemas_category
from app.schemas.common import Envelope, PaginationQuery, Page
from app.services.category_service import CategoryService

router = APIRouter()


@router.get("", response_model=Page[schemas_category.Category])
def list_categories(pagination: PaginationQuery = Depends(get_pagination), db: Session = Depends(get_db)):
    return CategoryService(db).find_many(pagination.page, pagination.limit, pagination.q)


@router.post("", response_model=Envelope[schemas_category.Category])
def create_category(category: schemas_category.CategoryCreate, db: Session = Depends(get_db)):
    db_category = CategoryService(db).create(category)
    return {"success": True, "data": db_category, "message": "Category created successfully"}


@router.get("/{category_id}", response_model=Envelope[schemas_category.Category])
def get_category(category_id: IdPath, db: Session = Depends(get_db)):
    db_category = CategoryService(db).find_by_id(category_id)
    if db_category is None:
        raise NotFoundError("Category", f"id {category_id}")
    return {"success": True, "data": db_category, "message": "Category retrieved successfully"}


@router.patch("/{category_id}", response_model=Envelope[schemas_category.Category])
def update_category(category_id: IdPath, category: schemas_category.CategoryUpdate, db: Session = Depends(get_db)):
    db_category = CategoryService(db).update(category_id, category)
    if db_category is None:
        raise NotFoundError("Category", f"id {category_id}")
    return {"success": True, "data": db_category, "message": "Category updated successfully"}


@router.delete("/{category_id}", response_model=Envelope[None])
def delete_category(category_id: IdPath, db: Session = Depends(get_db)):
    if not CategoryService(db).delete(category_id):
        raise NotFoundError("Category", f"id {category_id}")
    return {"success": True, "data": None, "message": "Category deleted successfully"}
