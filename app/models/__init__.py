from app.models.account import Account
from app.models.alternative import Alternative, alternatives_to_tools
from app.models.category import Category
from app.models.image import Image
from app.models.like import Like
from app.models.tool import Tool
