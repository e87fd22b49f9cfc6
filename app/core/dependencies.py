from enum import Enum
from typing import Annotated, Optional

import httpx
from fastapi import Depends, Path, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from app.core.auth import Identity, decode_token
from app.core.config import Settings
from app.core.exceptions import AuthError, ValidationError
from app.core.object_storage import ObjectStorage
from app.models.account import Account
from app.schemas.common import PaginationQuery
from app.services.account_service import AccountService
from app.services.content_generation_service import ContentGenerationService
from app.services.media_service import MediaService

bearer_scheme = HTTPBearer(auto_error=False)

IdPath = Annotated[str, Path(min_length=1, description="Resource identifier")]


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_object_storage(request: Request) -> ObjectStorage:
    return request.app.state.storage


def get_media_service(
    db: Session = Depends(get_db),
    http_client: httpx.AsyncClient = Depends(get_http_client),
    storage: ObjectStorage = Depends(get_object_storage),
    settings: Settings = Depends(get_settings),
) -> MediaService:
    return MediaService(db, http_client, storage, settings)


def get_content_generator(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> ContentGenerationService:
    return ContentGenerationService(http_client, settings)


def get_pagination(page: Optional[str] = None, limit: Optional[str] = None, q: Optional[str] = None) -> PaginationQuery:
    raw = {key: value for key, value in (("page", page), ("limit", limit), ("q", q)) if value is not None}
    try:
        return PaginationQuery.model_validate(raw)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e.errors())


async def get_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Optional[Identity]:
    if credentials is None:
        return None
    return decode_token(credentials.credentials, settings)


async def get_current_account(
    identity: Optional[Identity] = Depends(get_identity),
    db: Session = Depends(get_db),
) -> Optional[Account]:
    if identity is None:
        return None
    return AccountService(db).find_by_user_id(identity.user_id)


class Access(str, Enum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"


def authorize(identity: Optional[Identity], account: Optional[Account], access: Access) -> None:
    """
    The single authorization policy. Raises ``AuthError`` when the caller
    does not meet ``access``.
    """
    if access == Access.PUBLIC:
        return
    if identity is None:
        raise AuthError.unauthenticated()
    if access == Access.ADMIN and (account is None or not account.is_admin):
        raise AuthError.forbidden()


def require_access(access: Access):
    """
    Dependency factory that enforces an access level, meant for
    ``dependencies=[Depends(require_access(...))]`` on routers or routes.
    """
    async def access_checker(
        identity: Optional[Identity] = Depends(get_identity),
        account: Optional[Account] = Depends(get_current_account),
    ) -> Optional[Account]:
        authorize(identity, account, access)
        return account

    return access_checker
