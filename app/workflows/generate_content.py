import logging
from typing import Any, Dict

from app.services.content_generation_service import ContentGenerationService

logger = logging.getLogger(__name__)


async def handle_generate_content(generator: ContentGenerationService, url: str) -> Dict[str, Any]:
    """Scrape ``url`` then generate its directory copy in one pass."""
    page = await generator.scrape(url)
    content = await generator.generate(page)
    logger.info("Generated content for %s", url)
    return {"status": "generated", "content": content}
