from app.models.image import Image
from app.services.resource_service import ResourceService


class ImageService(ResourceService):
    model = Image
    resource_name = "Image"
