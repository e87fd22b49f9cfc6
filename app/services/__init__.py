from app.services.account_service import AccountService
from app.services.alternative_service import AlternativeService
from app.services.category_service import CategoryService
from app.services.content_generation_service import ContentGenerationService
from app.services.image_service import ImageService
from app.services.media_service import MediaService
from app.services.tool_service import ToolService
