from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR
from pydantic import BaseModel, ValidationError

from app.core.logging import get_logger


class LibraryError(Exception):
    """Base class for errors raised by the books/authors domain."""


class LibraryValidationError(LibraryError, ValueError):
    """Request data failed a domain rule; nothing was written."""


class ErrorBody(BaseModel):
    """Structured error body."""
    type: str
    message: str
    details: dict[str, object] | None = None


class ErrorEnvelope(BaseModel):
    error: ErrorBody
    meta: dict[str, object]


def _build_meta(request: Request) -> dict[str, object]:
    """Collect metadata for error responses."""
    return {
        "request_id": getattr(request.state, "correlation_id", "-"),
        "path": request.url.path,
        "method": request.method,
    }


def validation_message(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one client-facing sentence."""
    messages: list[str] = []
    for error in exc.errors():
        message = str(error.get("msg", "Invalid value"))
        # pydantic prefixes messages raised from field validators
        messages.append(message.removeprefix("Value error, "))
    return "; ".join(messages)


def register_exception_handlers(app: FastAPI) -> None:
    """Register centralized exception."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.warning("HTTP error %s", exc.status_code)
        body = ErrorEnvelope(
            error=ErrorBody(type="http_error", message=exc.detail or "HTTP error"),
            meta=_build_meta(request),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=body.model_dump(),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.exception("Unhandled server error", exc_info=exc)
        body = ErrorEnvelope(
            error=ErrorBody(type="server_error", message="Internal Server Error"),
            meta=_build_meta(request),
        )
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR, content=body.model_dump()
        )
