import json
import logging
from typing import AsyncIterator, Dict, List, Optional

import httpx
from openai import AsyncOpenAI, OpenAIError

from app.core.config import Settings
from app.core.exceptions import InternalError, UpstreamError

logger = logging.getLogger(__name__)


def create_client(settings: Settings, http_client: Optional[httpx.AsyncClient] = None) -> AsyncOpenAI:
    """OpenAI-compatible client pointed at OpenRouter."""
    if not settings.OPENROUTER_API_KEY:
        raise InternalError("Missing OpenRouter API key")
    return AsyncOpenAI(
        api_key=settings.OPENROUTER_API_KEY,
        base_url=settings.OPENROUTER_BASE_URL,
        http_client=http_client,
    )


def _messages(system_prompt: str, prompt: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": prompt},
    ]


async def generate_json(client: AsyncOpenAI, model_name: str, system_prompt: str, prompt: str) -> dict:
    try:
        chat_completion = await client.chat.completions.create(
            messages=_messages(system_prompt, prompt),
            model=model_name,
            response_format={"type": "json_object"},
        )
    except OpenAIError as e:
        logger.error("OpenRouter API error: %s", e)
        raise UpstreamError(f"LLM provider error: {e}")

    content = chat_completion.choices[0].message.content or ""
    try:
        return json.loads(content)
    except json.JSONDecodeError:
        raise UpstreamError("LLM provider returned malformed JSON", data={"content": content})


async def stream_text(client: AsyncOpenAI, model_name: str, system_prompt: str, prompt: str) -> AsyncIterator[str]:
    try:
        stream = await client.chat.completions.create(
            messages=_messages(system_prompt, prompt),
            model=model_name,
            stream=True,
        )
        async for chunk in stream:
            if chunk.choices and chunk.choices[0].delta.content:
                yield chunk.choices[0].delta.content
    except OpenAIError as e:
        logger.error("OpenRouter streaming error: %s", e)
        raise UpstreamError(f"LLM provider error: {e}")
