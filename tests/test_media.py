import io
from urllib.parse import parse_qsl, urlencode

import httpx
import pytest
from PIL import Image as PILImage

from app.core.exceptions import InternalError
from app.models import Image
from app.services.media_service import MediaService, generate_thumbnail, sign_screenshot_query


def _png(size=(600, 400)) -> bytes:
    buf = io.BytesIO()
    PILImage.new("RGBA", size, (66, 184, 131, 255)).save(buf, format="PNG")
    return buf.getvalue()


def test_favicon_falls_back_to_next_provider(client, admin_headers, mock_http, storage, app_db):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "www.google.com":
            return httpx.Response(503)
        return httpx.Response(200, content=b"ico-bytes", headers={"content-type": "image/x-icon"})

    mock_http.handler = handler

    response = client.post("/api/media/favicon", json={"url": "https://vuejs.org/guide"}, headers=admin_headers)

    assert response.status_code == 200
    url = response.json()["data"]
    assert url.startswith("https://cdn.test/reactforvue/favicons/")
    assert [r.url.host for r in mock_http.requests] == ["www.google.com", "icons.duckduckgo.com"]
    assert str(mock_http.requests[1].url) == "https://icons.duckduckgo.com/ip3/vuejs.org.ico"

    image = app_db.query(Image).one()
    assert image.url == url
    assert image.original_name == "vuejs.org-favicon"
    assert image.mime_type == "image/x-icon"
    assert image.filename.endswith("vuejs.org.ico")
    assert storage.objects[image.file_id] == (b"ico-bytes", "image/x-icon")
    assert image.size == len(b"ico-bytes")


def test_favicon_uses_first_provider_when_it_answers(client, admin_headers, mock_http, app_db):
    mock_http.handler = lambda request: httpx.Response(200, content=b"png")

    client.post("/api/media/favicon", json={"url": "https://pinia.vuejs.org"}, headers=admin_headers)

    assert len(mock_http.requests) == 1
    assert mock_http.requests[0].url.params["domain"] == "pinia.vuejs.org"
    assert mock_http.requests[0].url.params["sz"] == "128"
    # No content type from the provider
    assert app_db.query(Image).one().mime_type == "image/png"


def test_favicon_fails_when_every_provider_fails(client, admin_headers, mock_http, app_db):
    mock_http.handler = lambda request: httpx.Response(500)

    response = client.post("/api/media/favicon", json={"url": "https://vuejs.org"}, headers=admin_headers)

    assert response.status_code == 500
    assert response.json()["message"].startswith("Failed to fetch favicon from all providers. Last error:")
    assert app_db.query(Image).count() == 0


def test_favicon_rejects_invalid_url(client, admin_headers):
    response = client.post("/api/media/favicon", json={"url": "vuejs"}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["data"]["field"] == "url"


def test_screenshot_is_signed_and_stored(client, admin_headers, mock_http, storage, settings):
    mock_http.handler = lambda request: httpx.Response(200, content=b"jpeg-bytes")

    response = client.post("/api/media/screenshot", json={"url": "https://vuejs.org"}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"].startswith("https://cdn.test/reactforvue/screenshots/")

    request = mock_http.requests[0]
    assert request.url.host == "api.screenshotone.com"
    params = parse_qsl(request.url.query.decode())
    signature = params.pop()
    assert signature[0] == "signature"
    assert signature[1] == sign_screenshot_query(urlencode(params), settings.SCREENSHOTONE_SECRET_KEY)
    values = dict(params)
    assert values["url"] == "https://vuejs.org"
    assert values["format"] == "jpg"
    assert values["dark_mode"] == "true"
    assert values["image_quality"] == "80"
    assert list(storage.objects.values())[0] == (b"jpeg-bytes", "image/jpeg")


def test_screenshot_provider_error(client, admin_headers, mock_http):
    mock_http.handler = lambda request: httpx.Response(400, json={"error": "bad url"})

    response = client.post("/api/media/screenshot", json={"url": "https://vuejs.org"}, headers=admin_headers)

    assert response.status_code == 500
    assert response.json()["message"] == "ScreenshotOne API error"


def test_screenshot_without_keys(client, admin_headers, mock_http):
    client.app.state.settings.SCREENSHOTONE_SECRET_KEY = ""

    response = client.post("/api/media/screenshot", json={"url": "https://vuejs.org"}, headers=admin_headers)

    assert response.status_code == 500
    assert response.json()["message"] == "ScreenshotOne API key missing"
    assert mock_http.requests == []


def test_build_screenshot_url_requires_keys(db, storage, settings):
    settings.SCREENSHOTONE_ACCESS_KEY = ""
    service = MediaService(db, httpx.AsyncClient(), storage, settings)
    with pytest.raises(InternalError):
        service.build_screenshot_url("https://vuejs.org")


def test_upload_image_stores_original_and_thumbnail(client, admin_headers, storage):
    content = _png()

    response = client.post(
        "/api/images/upload",
        files={"file": ("logo.png", content, "image/png")},
        headers=admin_headers,
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["originalName"] == "logo.png"
    assert data["mimeType"] == "image/png"
    assert data["size"] == len(content)
    assert data["url"].startswith("https://cdn.test/reactforvue/")
    assert data["thumbnailUrl"].startswith("https://cdn.test/reactforvue/thumbnails/")
    assert len(storage.objects) == 2


def test_upload_svg_skips_thumbnail(client, admin_headers, storage):
    svg = b'<svg xmlns="http://www.w3.org/2000/svg" width="1" height="1"/>'

    response = client.post(
        "/api/images/upload",
        files={"file": ("icon.svg", svg, "image/svg+xml")},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["data"]["thumbnailUrl"] is None
    assert len(storage.objects) == 1


def test_upload_rejects_unsupported_type(client, admin_headers, storage):
    response = client.post(
        "/api/images/upload",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["message"] == "No valid image file found"
    assert storage.objects == {}


def test_upload_rejects_large_files(client, admin_headers, storage):
    response = client.post(
        "/api/images/upload",
        files={"file": ("big.png", b"0" * (5 * 1024 * 1024 + 1), "image/png")},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["message"] == "File too large"
    assert storage.objects == {}


def test_generate_thumbnail():
    thumbnail = generate_thumbnail(_png((1200, 600)))
    img = PILImage.open(io.BytesIO(thumbnail))
    assert img.format == "JPEG"
    assert max(img.size) == 300

    assert generate_thumbnail(b"not an image") is None


def test_deleting_uploaded_image_removes_stored_file(client, admin_headers, storage):
    data = client.post(
        "/api/images/upload",
        files={"file": ("icon.svg", b'<svg xmlns="http://www.w3.org/2000/svg"/>', "image/svg+xml")},
        headers=admin_headers,
    ).json()["data"]
    assert data["fileId"] in storage.objects

    response = client.delete(f"/api/images/{data['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert storage.objects == {}
    assert client.get(f"/api/images/{data['id']}", headers=admin_headers).status_code == 404


def test_deleting_missing_image_leaves_storage_alone(client, admin_headers, storage):
    storage.objects["reactforvue/kept.png"] = (b"png", "image/png")

    response = client.delete("/api/images/missing", headers=admin_headers)

    assert response.status_code == 404
    assert list(storage.objects) == ["reactforvue/kept.png"]
