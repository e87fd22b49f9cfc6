"""
S3/MinIO object storage used for uploaded images, favicons and screenshots.

The client is built once per application (see ``app.main``) and handed to
services through ``get_object_storage``.
"""
import logging
import uuid
from dataclasses import dataclass
from typing import Optional

import boto3
from botocore.client import Config

from app.core.config import Settings

logger = logging.getLogger(__name__)


@dataclass
class StoredObject:
    key: str
    url: str
    name: str
    size: int


class ObjectStorage:
    def __init__(self, client, bucket: str, public_url: str, folder: str = ""):
        self.client = client
        self.bucket = bucket
        self.base_url = public_url.rstrip("/")
        self.folder = folder.strip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "ObjectStorage":
        scheme = 'https' if settings.STORAGE_SECURE else 'http'
        endpoint_url = f'{scheme}://{settings.STORAGE_ENDPOINT}'

        client = boto3.client(
            's3',
            endpoint_url=endpoint_url,
            aws_access_key_id=settings.STORAGE_ACCESS_KEY or None,
            aws_secret_access_key=settings.STORAGE_SECRET_KEY or None,
            config=Config(signature_version='s3v4'),
            use_ssl=settings.STORAGE_SECURE,
            region_name='us-east-1',
        )
        public_url = settings.STORAGE_PUBLIC_URL or f"{endpoint_url}/{settings.STORAGE_BUCKET}"
        return cls(client, settings.STORAGE_BUCKET, public_url, settings.STORAGE_FOLDER)

    def build_key(self, filename: str, folder: Optional[str] = None) -> str:
        folder = (folder or self.folder).strip("/")
        unique_name = f"{uuid.uuid4().hex}-{filename}"
        return f"{folder}/{unique_name}" if folder else unique_name

    def public_url(self, key: str) -> str:
        return f"{self.base_url}/{key}"

    def upload(self, data: bytes, filename: str, content_type: str, folder: Optional[str] = None) -> StoredObject:
        key = self.build_key(filename, folder)
        self.client.put_object(Bucket=self.bucket, Key=key, Body=data, ContentType=content_type)
        logger.info("Stored %s (%d bytes) in bucket %s", key, len(data), self.bucket)
        return StoredObject(key=key, url=self.public_url(key), name=filename, size=len(data))

    def delete(self, key: str) -> None:
        self.client.delete_object(Bucket=self.bucket, Key=key)
