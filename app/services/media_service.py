"""
Media operations backed by third-party services and object storage:
favicon lookup, website screenshots and direct image uploads. Every stored
file is recorded as an ``Image`` row.
"""
import hashlib
import hmac
import io
import logging
import os
from typing import Optional, Tuple
from urllib.parse import urlencode, urlparse

import httpx
from PIL import Image as PILImage, UnidentifiedImageError
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.exceptions import InternalError, UpstreamError, ValidationError
from app.core.object_storage import ObjectStorage
from app.crud import mutations, queries
from app.models.image import Image

logger = logging.getLogger(__name__)

FAVICON_PROVIDERS = (
    ("Google S2", "https://www.google.com/s2/favicons?domain={domain}&sz=128"),
    ("DuckDuckGo", "https://icons.duckduckgo.com/ip3/{domain}.ico"),
)

SUPPORTED_MIME_TYPES = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/svg+xml": "svg",
}
FAVICON_MIME_TYPES = {
    **SUPPORTED_MIME_TYPES,
    "image/x-icon": "ico",
    "image/vnd.microsoft.icon": "ico",
}
MAX_UPLOAD_SIZE = 5 * 1024 * 1024  # 5 MB

THUMBNAIL_SIZE = (300, 300)
THUMBNAIL_QUALITY = 85


def generate_thumbnail(file_content: bytes) -> Optional[bytes]:
    """JPEG thumbnail of a raster image, or None when Pillow cannot read it."""
    try:
        img = PILImage.open(io.BytesIO(file_content))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        logger.warning("Skipping thumbnail: %s", e)
        return None

    # Convert to RGB if necessary (for PNG with transparency)
    if img.mode in ('RGBA', 'P', 'LA'):
        img = img.convert('RGB')

    img.thumbnail(THUMBNAIL_SIZE, PILImage.Resampling.LANCZOS)

    thumb_io = io.BytesIO()
    img.save(thumb_io, format='JPEG', quality=THUMBNAIL_QUALITY)
    return thumb_io.getvalue()


def sign_screenshot_query(query: str, secret_key: str) -> str:
    return hmac.new(secret_key.encode(), query.encode(), hashlib.sha256).hexdigest()


class MediaService:
    def __init__(self, db: Session, http_client: httpx.AsyncClient, storage: ObjectStorage, settings: Settings):
        self.db = db
        self.http_client = http_client
        self.storage = storage
        self.settings = settings

    @property
    def folder(self) -> str:
        return self.settings.STORAGE_FOLDER

    async def fetch_favicon(self, url: str) -> Image:
        """
        Download the site's favicon, trying each provider in order, and
        store the first one that answers.
        """
        domain = urlparse(url).hostname
        if not domain:
            raise ValidationError([{"path": ["url"], "message": "Invalid URL", "type": "url_parsing"}])

        last_error: Optional[Exception] = None
        for name, template in FAVICON_PROVIDERS:
            provider_url = template.format(domain=domain)
            logger.info("Trying favicon provider %s for %s", name, domain)
            try:
                response = await self.http_client.get(provider_url, follow_redirects=True)
                response.raise_for_status()
                if not response.content:
                    raise UpstreamError(f"{name} returned an empty favicon")
            except (httpx.HTTPError, UpstreamError) as e:
                last_error = e
                logger.warning("Favicon fetch failed for %s: %s", name, e)
                continue

            logger.info("Fetched favicon for %s using %s", domain, name)
            mime_type = response.headers.get("content-type", "").split(";")[0].strip().lower()
            if mime_type not in FAVICON_MIME_TYPES:
                mime_type = "image/png"
            stored = self.storage.upload(
                response.content, f"{domain}.{FAVICON_MIME_TYPES[mime_type]}", mime_type, folder=f"{self.folder}/favicons"
            )
            return mutations.insert(self.db, Image, {
                "url": stored.url,
                "file_id": stored.key,
                "filename": stored.key.rsplit("/", 1)[-1],
                "original_name": f"{domain}-favicon",
                "size": stored.size,
                "mime_type": mime_type,
            })

        raise UpstreamError(
            f"Failed to fetch favicon from all providers. Last error: {last_error or 'Unknown error'}"
        )

    def build_screenshot_url(self, url: str) -> str:
        access_key = self.settings.SCREENSHOTONE_ACCESS_KEY
        secret_key = self.settings.SCREENSHOTONE_SECRET_KEY
        if not access_key or not secret_key:
            raise InternalError("ScreenshotOne API key missing")

        query = urlencode([
            ("access_key", access_key),
            ("url", url),
            ("format", "jpg"),
            ("block_ads", "true"),
            ("block_cookie_banners", "true"),
            ("block_banners_by_heuristics", "false"),
            ("block_trackers", "true"),
            ("delay", "0"),
            ("timeout", "60"),
            ("dark_mode", "true"),
            ("response_type", "by_format"),
            ("image_quality", "80"),
        ])
        signature = sign_screenshot_query(query, secret_key)
        return f"{self.settings.SCREENSHOTONE_URL}?{query}&signature={signature}"

    async def capture_screenshot(self, url: str) -> Image:
        request_url = self.build_screenshot_url(url)
        try:
            # Captures may take up to the 60s ScreenshotOne timeout
            response = await self.http_client.get(request_url, timeout=90.0)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise UpstreamError("ScreenshotOne API error", data={"detail": str(e)})

        host = urlparse(url).hostname or "screenshot"
        stored = self.storage.upload(
            response.content, f"{host}.jpg", "image/jpeg", folder=f"{self.folder}/screenshots"
        )
        logger.info("Captured screenshot of %s", url)
        return mutations.insert(self.db, Image, {
            "url": stored.url,
            "file_id": stored.key,
            "filename": stored.key.rsplit("/", 1)[-1],
            "original_name": f"{host}-screenshot",
            "size": stored.size,
            "mime_type": "image/jpeg",
        })

    def check_upload(self, content_type: Optional[str], size: int) -> Tuple[str, str]:
        mime_type = (content_type or "").split(";")[0].strip().lower()
        if mime_type not in SUPPORTED_MIME_TYPES:
            raise ValidationError(
                [{"path": ["file"], "message": "Supported formats: JPEG, PNG, GIF, WebP, and SVG", "type": "mime_type"}],
                message="No valid image file found",
            )
        if size > MAX_UPLOAD_SIZE:
            raise ValidationError(
                [{"path": ["file"], "message": f"Maximum file size is {MAX_UPLOAD_SIZE // (1024 * 1024)}MB", "type": "file_size"}],
                message="File too large",
            )
        return mime_type, SUPPORTED_MIME_TYPES[mime_type]

    def upload_image(self, file_content: bytes, filename: Optional[str], content_type: Optional[str]) -> Image:
        mime_type, extension = self.check_upload(content_type, len(file_content))
        original_name = filename or f"upload.{extension}"
        stem = os.path.splitext(os.path.basename(original_name))[0] or "upload"

        stored = self.storage.upload(file_content, f"{stem}.{extension}", mime_type)

        thumbnail_url = None
        if mime_type != "image/svg+xml":
            thumbnail_data = generate_thumbnail(file_content)
            if thumbnail_data:
                thumbnail = self.storage.upload(
                    thumbnail_data, f"{stem}.jpg", "image/jpeg", folder=f"{self.folder}/thumbnails"
                )
                thumbnail_url = thumbnail.url

        return mutations.insert(self.db, Image, {
            "url": stored.url,
            "thumbnail_url": thumbnail_url,
            "file_id": stored.key,
            "filename": stored.key.rsplit("/", 1)[-1],
            "original_name": original_name,
            "size": stored.size,
            "mime_type": mime_type,
        })

    def delete_image(self, image_id: str) -> bool:
        """Delete the image row and its stored file. Returns False when ``image_id`` does not exist."""
        image = queries.find_by_id(self.db, Image, image_id)
        if image is None:
            return False
        if image.file_id:
            self.storage.delete(image.file_id)
            logger.info("Deleted stored file %s", image.file_id)
        return mutations.delete(self.db, Image, image_id)
