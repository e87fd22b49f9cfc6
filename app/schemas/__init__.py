from app.schemas.common import Envelope, Page, PaginationQuery
from app.schemas.account import Account, AccountCreate, AccountUpdate
from app.schemas.alternative import Alternative, AlternativeCreate, AlternativeUpdate, ToolLink
from app.schemas.category import Category, CategoryCreate, CategoryUpdate
from app.schemas.image import Image, ImageCreate, ImageUpdate
from app.schemas.tool import Tool, ToolCreate, ToolUpdate, SitemapEntry
from app.schemas.media import GenerateRequest, GeneratedContent, MediaUrlRequest, ScrapedPage
