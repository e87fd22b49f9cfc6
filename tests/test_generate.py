import asyncio
import json

import httpx
import pytest

from app.core.exceptions import InternalError
from app.schemas.media import ScrapedPage
from app.services.content_generation_service import ContentGenerationService, SYSTEM_PROMPT, build_prompt
from app.workflows.generate_content import handle_generate_content

GENERATED = {
    "tagline": "State that stays out of your way",
    "description": "Type-safe stores with devtools support and a tiny footprint.",
    "content": "Pinia gives every component **typed stores**.\n\n- Devtools\n- Plugins\n\nA calm default for state.",
}

SCRAPE_RESPONSE = {
    "success": True,
    "data": {
        "markdown": "# Pinia\nThe intuitive store for Vue.js",
        "metadata": {"title": "Pinia", "description": "The intuitive store for Vue.js"},
    },
}


def _completion(content: str) -> dict:
    return {
        "id": "gen-1",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "mistralai/devstral-2512:free",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"},
        ],
    }


def _chunk(content: str) -> str:
    payload = {
        "id": "gen-1",
        "object": "chat.completion.chunk",
        "created": 1700000000,
        "model": "mistralai/devstral-2512:free",
        "choices": [{"index": 0, "delta": {"content": content}, "finish_reason": None}],
    }
    return f"data: {json.dumps(payload)}\n\n"


def provider_handler(request: httpx.Request) -> httpx.Response:
    if request.url.host == "api.firecrawl.dev":
        return httpx.Response(200, json=SCRAPE_RESPONSE)
    body = json.loads(request.content)
    if body.get("stream"):
        stream = _chunk("Hello ") + _chunk("Vue") + "data: [DONE]\n\n"
        return httpx.Response(200, content=stream.encode(), headers={"content-type": "text/event-stream"})
    return httpx.Response(200, json=_completion(json.dumps(GENERATED)))


def test_generate_without_streaming(client, admin_headers, mock_http):
    mock_http.handler = provider_handler

    response = client.post("/api/tools/generate", json={"url": "https://pinia.vuejs.org", "stream": False}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"] == GENERATED

    scrape, completion = mock_http.requests
    assert json.loads(scrape.content) == {
        "url": "https://pinia.vuejs.org",
        "formats": ["markdown"],
        "onlyMainContent": True,
        "excludeTags": ["img", "video", "iframe"],
    }
    assert scrape.headers["authorization"] == "Bearer fc-test"

    assert str(completion.url) == "https://openrouter.ai/api/v1/chat/completions"
    payload = json.loads(completion.content)
    assert payload["model"] == "mistralai/devstral-2512:free"
    assert payload["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert "Title: Pinia" in payload["messages"][1]["content"]


def test_generate_streams_text(client, admin_headers, mock_http):
    mock_http.handler = provider_handler

    response = client.post("/api/tools/generate", json={"url": "https://pinia.vuejs.org"}, headers=admin_headers)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Hello Vue"


def test_generate_stream_reports_provider_errors_as_json(client, admin_headers, mock_http):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "api.firecrawl.dev":
            return httpx.Response(200, json=SCRAPE_RESPONSE)
        return httpx.Response(401, json={"error": {"message": "No auth credentials found", "code": 401}})

    mock_http.handler = handler

    response = client.post("/api/tools/generate", json={"url": "https://pinia.vuejs.org"}, headers=admin_headers)

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    body = response.json()
    assert body["statusCode"] == 500
    assert body["message"].startswith("LLM provider error:")


def test_generate_without_keys(client, admin_headers, mock_http):
    client.app.state.settings.OPENROUTER_API_KEY = ""

    response = client.post("/api/tools/generate", json={"url": "https://pinia.vuejs.org"}, headers=admin_headers)

    assert response.status_code == 500
    assert response.json()["message"] == "Missing OpenRouter API key"
    assert mock_http.requests == []


def test_generate_scrape_failure(client, admin_headers, mock_http):
    mock_http.handler = lambda request: httpx.Response(402, json={"error": "Payment required"})

    response = client.post("/api/tools/generate", json={"url": "https://pinia.vuejs.org", "stream": False}, headers=admin_headers)

    assert response.status_code == 500
    assert response.json()["message"] == "Failed to scrape https://pinia.vuejs.org"


def test_generate_requires_valid_url(client, admin_headers):
    response = client.post("/api/tools/generate", json={}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["data"]["field"] == "url"


def test_build_prompt_includes_scraped_page():
    prompt = build_prompt(ScrapedPage(url="https://pinia.vuejs.org", title="Pinia", description="Stores", markdown="# Pinia"))
    assert "Title: Pinia" in prompt
    assert "Description: Stores" in prompt
    assert "Content: # Pinia" in prompt
    assert '"tagline"' in prompt


def test_workflow_returns_generated_status(settings):
    generator = ContentGenerationService(httpx.AsyncClient(transport=httpx.MockTransport(provider_handler)), settings)

    result = asyncio.run(handle_generate_content(generator, "https://pinia.vuejs.org"))

    assert result["status"] == "generated"
    assert result["content"].tagline == GENERATED["tagline"]


def test_scrape_requires_key(settings):
    settings.FIRECRAWL_API_KEY = ""
    generator = ContentGenerationService(httpx.AsyncClient(), settings)

    with pytest.raises(InternalError):
        asyncio.run(generator.scrape("https://pinia.vuejs.org"))
