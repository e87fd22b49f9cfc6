"""
Scrape a tool's website with Firecrawl and turn it into directory copy
(tagline, meta description, long-form markdown) with an OpenRouter model.
"""
import logging
from typing import AsyncIterator

import httpx

from app.core.config import Settings
from app.core.exceptions import InternalError, UpstreamError
from app.llm_providers import openrouter_provider
from app.schemas.media import GeneratedContent, ScrapedPage

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert content creator specializing in reactjs and vuejs alternatives.\n"
    "Your task is to generate high quality, engaging content to display on a directory website.\n"
    'You do not use any catchphrases or marketing speak like "best" or "top", "Empower", '
    '"Unleash", "Revolutionize", "Streamline" etc.'
)


def build_prompt(page: ScrapedPage) -> str:
    fields = GeneratedContent.model_fields
    return (
        "Provide me details for the following data:\n"
        f"Title: {page.title}\n"
        f"Description: {page.description}\n"
        f"Content: {page.markdown}\n\n"
        "Answer with a JSON object with exactly these keys:\n"
        f'- "tagline": {fields["tagline"].description}\n'
        f'- "description": {fields["description"].description}\n'
        f'- "content": {fields["content"].description}\n'
    )


async def _relay(first: str, rest: AsyncIterator[str]) -> AsyncIterator[str]:
    if first:
        yield first
    async for delta in rest:
        yield delta


class ContentGenerationService:
    def __init__(self, http_client: httpx.AsyncClient, settings: Settings):
        self.http_client = http_client
        self.settings = settings

    def ensure_configured(self) -> None:
        if not self.settings.FIRECRAWL_API_KEY:
            raise InternalError("Missing Firecrawl API key")
        if not self.settings.OPENROUTER_API_KEY:
            raise InternalError("Missing OpenRouter API key")

    async def scrape(self, url: str) -> ScrapedPage:
        if not self.settings.FIRECRAWL_API_KEY:
            raise InternalError("Missing Firecrawl API key")

        try:
            response = await self.http_client.post(
                self.settings.FIRECRAWL_URL,
                headers={"Authorization": f"Bearer {self.settings.FIRECRAWL_API_KEY}"},
                json={
                    "url": url,
                    "formats": ["markdown"],
                    "onlyMainContent": True,
                    "excludeTags": ["img", "video", "iframe"],
                },
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Firecrawl scrape of %s failed: %s", url, e)
            raise UpstreamError(f"Failed to scrape {url}", data={"detail": str(e)})

        data = response.json().get("data") or {}
        metadata = data.get("metadata") or {}
        return ScrapedPage(
            url=url,
            title=metadata.get("title") or "",
            description=metadata.get("description") or "",
            markdown=data.get("markdown") or "",
        )

    async def generate(self, page: ScrapedPage) -> GeneratedContent:
        client = openrouter_provider.create_client(self.settings, self.http_client)
        result = await openrouter_provider.generate_json(
            client, self.settings.OPENROUTER_MODEL, SYSTEM_PROMPT, build_prompt(page)
        )
        try:
            return GeneratedContent.model_validate(result)
        except ValueError as e:
            raise UpstreamError("LLM provider returned incomplete content", data={"detail": str(e)})

    async def stream(self, page: ScrapedPage) -> AsyncIterator[str]:
        """
        Start the completion and wait for its first delta, so provider
        failures surface here rather than after the response has started.
        """
        client = openrouter_provider.create_client(self.settings, self.http_client)
        deltas = openrouter_provider.stream_text(
            client, self.settings.OPENROUTER_MODEL, SYSTEM_PROMPT, build_prompt(page)
        )
        try:
            first = await deltas.__anext__()
        except StopAsyncIteration:
            first = ""
        return _relay(first, deltas)
