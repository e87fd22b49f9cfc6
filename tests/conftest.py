import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTH_JWT_KEY", "test-signing-key")

from typing import Callable, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient
from jose import jwt

from app import models  # noqa: F401
from app.core.config import Settings
from app.core.database import Base, create_db_engine, create_session_factory
from app.core.dependencies import get_http_client, get_object_storage
from app.core.object_storage import StoredObject
from app.main import create_app
from app.schemas.account import AccountCreate
from app.services.account_service import AccountService

TEST_JWT_KEY = "test-signing-key"
ADMIN_USER_ID = "user_admin"
MEMBER_USER_ID = "user_member"


class FakeStorage:
    """In-memory stand-in for the S3 bucket."""

    def __init__(self):
        self.objects = {}
        self.folder = "reactforvue"

    def upload(self, data: bytes, filename: str, content_type: str, folder: Optional[str] = None) -> StoredObject:
        key = f"{folder or self.folder}/{len(self.objects)}-{filename}"
        self.objects[key] = (data, content_type)
        return StoredObject(key=key, url=f"https://cdn.test/{key}", name=filename, size=len(data))

    def delete(self, key: str) -> None:
        self.objects.pop(key, None)


class MockHttp:
    """Routes outbound httpx calls to ``handler`` and records every request."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(404)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


def make_token(user_id: str, **claims) -> str:
    return jwt.encode({"sub": user_id, **claims}, TEST_JWT_KEY, algorithm="HS256")


def bearer(user_id: str, **claims) -> dict:
    return {"Authorization": f"Bearer {make_token(user_id, **claims)}"}


@pytest.fixture
def settings():
    return Settings(
        DATABASE_URL="sqlite://",
        AUTO_CREATE_TABLES=True,
        AUTH_JWT_KEY=TEST_JWT_KEY,
        AUTH_JWT_ALGORITHMS="HS256",
        SCREENSHOTONE_ACCESS_KEY="shot-access",
        SCREENSHOTONE_SECRET_KEY="shot-secret",
        FIRECRAWL_API_KEY="fc-test",
        OPENROUTER_API_KEY="or-test",
    )


@pytest.fixture
def db():
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def mock_http():
    return MockHttp()


@pytest.fixture
def app(settings, storage, mock_http):
    application = create_app(settings)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(mock_http))
    application.dependency_overrides[get_object_storage] = lambda: storage
    application.dependency_overrides[get_http_client] = lambda: http_client
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def app_db(client):
    session = client.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def admin_headers(app_db):
    account = AccountService(app_db).create(
        AccountCreate(user_id=ADMIN_USER_ID, name="Ada Admin", email="ada@example.com", role="admin")
    )
    assert account.is_admin
    return bearer(ADMIN_USER_ID)


@pytest.fixture
def member_headers(app_db):
    AccountService(app_db).create(
        AccountCreate(user_id=MEMBER_USER_ID, name="Max Member", email="max@example.com")
    )
    return bearer(MEMBER_USER_ID)
