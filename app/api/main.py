from fastapi import APIRouter, Depends

from app.api.endpoints import alternatives, auth, categories, images, media, public, sitemap, tools
from app.core.dependencies import Access, require_access

api_router = APIRouter()

admin_only = [Depends(require_access(Access.ADMIN))]

api_router.include_router(alternatives.router, prefix="/alternatives", tags=["alternatives"], dependencies=admin_only)
api_router.include_router(categories.router, prefix="/categories", tags=["categories"], dependencies=admin_only)
api_router.include_router(tools.router, prefix="/tools", tags=["tools"], dependencies=admin_only)
api_router.include_router(images.router, prefix="/images", tags=["images"], dependencies=admin_only)
api_router.include_router(media.router, prefix="/media", tags=["media"], dependencies=admin_only)
api_router.include_router(
    auth.router, prefix="/auth", tags=["auth"], dependencies=[Depends(require_access(Access.AUTHENTICATED))]
)
api_router.include_router(public.router, prefix="/public", tags=["public"])
api_router.include_router(sitemap.router, tags=["sitemap"])
