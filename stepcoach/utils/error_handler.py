"""Error handling utilities and custom exceptions."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from .responses import build_response


class ChatError(Exception):
    """Base class for errors that terminate a request.

    Subclasses set ``status_code`` and ``error``; :meth:`to_content`
    produces the JSON body sent to the client.
    """

    status_code: int = 500
    error: str = "Internal server error"
    default_message: Optional[str] = None

    def __init__(self, message: Optional[str] = None, headers: Optional[Mapping[str, str]] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message or self.error)
        self.headers = dict(headers or {})

    def to_content(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"error": self.error}
        if self.message:
            content["message"] = self.message
        return content


class InvalidRequest(ChatError):
    """The request body is malformed or out of range."""

    status_code = 400
    error = "Invalid request format"

    def __init__(self, details: List[Dict[str, Any]]) -> None:
        super().__init__(f"{len(details)} validation error(s)")
        self.details = details

    @classmethod
    def from_errors(cls, errors: Sequence[Mapping[str, Any]], strip_prefix: Optional[str] = None) -> "InvalidRequest":
        """Build from pydantic error dicts, one detail per violation."""
        details = []
        for err in errors:
            path = list(err.get("loc", ()))
            if strip_prefix is not None and path and path[0] == strip_prefix:
                path = path[1:]
            details.append(
                {
                    "path": path,
                    "message": err.get("msg", "Invalid value"),
                    "code": err.get("type", "invalid"),
                }
            )
        return cls(details)

    def to_content(self) -> Dict[str, Any]:
        return {"error": self.error, "details": self.details}


class ProviderFailure(ChatError):
    """The language model call failed or produced no usable text."""

    status_code = 500
    error = "Failed to process chat request"
    default_message = "The language model request failed"


class RouteNotFound(ChatError):
    status_code = 404
    error = "Not found"


class MethodNotAllowed(ChatError):
    status_code = 405
    error = "Method not allowed"


async def chat_error_handler(request: Request, exc: ChatError) -> Response:
    """Render any :class:`ChatError` as a JSON response."""
    if exc.status_code >= 500:
        logger.error("{} on {} {}: {}", type(exc).__name__, request.method, request.url.path, exc)
    else:
        logger.warning("{} on {} {}: {}", type(exc).__name__, request.method, request.url.path, exc)
    return build_response(exc.status_code, exc.to_content(), exc.headers)


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """Answer errors raised outside the route body, e.g. while resolving dependencies."""
    logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
    error = ProviderFailure("Internal server error")
    return build_response(error.status_code, error.to_content())


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    """Convert FastAPI body validation failures into :class:`InvalidRequest`."""
    return await chat_error_handler(request, InvalidRequest.from_errors(exc.errors(), strip_prefix="body"))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Map routing errors onto the service's error shapes."""
    error: ChatError
    if exc.status_code == 404:
        error = RouteNotFound(headers=exc.headers)
    elif exc.status_code == 405:
        error = MethodNotAllowed(headers=exc.headers)
    else:
        return build_response(exc.status_code, {"error": exc.detail}, exc.headers)
    return await chat_error_handler(request, error)
