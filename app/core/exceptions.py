"""
Error taxonomy for the directory API and the handlers that render it.

Every failure leaves the API as
``{"statusCode", "statusMessage", "message", "data"?}`` with the matching
HTTP status. Services and the crud layer let errors propagate; only the
handlers registered here translate them.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base error carrying an HTTP status, a status text and optional structured data."""

    status_code: int = 500
    status_message: str = "Internal Server Error"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        status_message: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if status_message is not None:
            self.status_message = status_message
        self.data = data

    def to_dict(self) -> Dict[str, Any]:
        body = {
            "statusCode": self.status_code,
            "statusMessage": self.status_message,
            "message": self.message,
        }
        if self.data is not None:
            body["data"] = self.data
        return body


class ValidationError(ApiError):
    status_code = 400
    status_message = "Validation Error"

    def __init__(self, errors: List[Dict[str, Any]], message: Optional[str] = None):
        first = errors[0] if errors else {"path": [], "message": "Invalid request"}
        super().__init__(
            message or first["message"],
            data={"field": ".".join(str(p) for p in first["path"]), "errors": errors},
        )
        self.errors = errors

    @classmethod
    def from_pydantic(cls, raw_errors: Sequence[Dict[str, Any]]) -> "ValidationError":
        errors = []
        for err in raw_errors:
            loc = list(err.get("loc", ()))
            # Drop FastAPI's "body"/"query"/"path" location prefix
            if loc and loc[0] in ("body", "query", "path", "header"):
                loc = loc[1:]
            errors.append({"path": loc, "message": err.get("msg", ""), "type": err.get("type", "")})
        return cls(errors)


class NotFoundError(ApiError):
    status_code = 404
    status_message = "Not Found"

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} with {identifier} not found")
        self.resource = resource
        self.identifier = identifier


class AuthError(ApiError):
    status_code = 401
    status_message = "Unauthorized"

    @classmethod
    def unauthenticated(cls, message: str = "Unauthorized: User not signed in") -> "AuthError":
        return cls(message)

    @classmethod
    def forbidden(cls, message: str = "Forbidden: Admin access required") -> "AuthError":
        return cls(message, status_code=403, status_message="Forbidden")


class UpstreamError(ApiError):
    """A third-party provider (favicon, screenshot, scrape, LLM) failed."""

    status_code = 500


class InternalError(ApiError):
    status_code = 500


def _json(error: ApiError, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=error.to_dict(), headers=headers)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("[%s %s] %s", request.method, request.url.path, exc.message, exc_info=exc)
    return _json(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _json(ValidationError.from_pydantic(exc.errors()))


async def pydantic_validation_handler(request: Request, exc: PydanticValidationError) -> JSONResponse:
    return _json(ValidationError.from_pydantic(exc.errors()))


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning("[%s %s] Integrity error: %s", request.method, request.url.path, exc.orig)
    error = ValidationError(
        [{"path": [], "message": "Record violates a uniqueness or reference constraint", "type": "integrity"}]
    )
    return _json(error)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        error = ApiError(
            f"Method {request.method} not allowed on {request.url.path}",
            status_code=405,
            status_message="Method Not Allowed",
        )
    elif exc.status_code == 404:
        error = ApiError(
            f"Route {request.url.path} not found", status_code=404, status_message="Not Found"
        )
    else:
        error = ApiError(str(exc.detail), status_code=exc.status_code, status_message=str(exc.detail))
    return _json(error, headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("[%s %s] Unexpected error", request.method, request.url.path)
    return _json(InternalError("Internal Server Error"))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PydanticValidationError, pydantic_validation_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
