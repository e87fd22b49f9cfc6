from app.models.category import Category
from app.services.resource_service import ResourceService


class CategoryService(ResourceService):
    model = Category
    resource_name = "Category"
