from http import HTTPStatus
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR
from pydantic import BaseModel

from app.core.logging import get_logger


class ResponseStatusError(Exception):
    """
    Client-facing error carrying an HTTP status and a fixed reason.
    GraphQL responses expose `extensions` on the rendered error.
    """

    def __init__(self, status_code: int, reason: str):
        super().__init__(reason)
        self.status_code: int = status_code
        self.reason: str = reason

    @property
    def extensions(self) -> dict[str, object]:
        return {"code": HTTPStatus(self.status_code).name, "status": self.status_code}


class InvalidISBN13Error(ResponseStatusError):
    def __init__(self, isbn13: str):
        super().__init__(HTTP_400_BAD_REQUEST, f"Invalid ISBN-13: {isbn13}")


class InvalidISBN10Error(ResponseStatusError):
    def __init__(self, isbn10: str):
        super().__init__(HTTP_400_BAD_REQUEST, f"Invalid ISBN-10: {isbn10}")


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


def register_exception_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers for the non-GraphQL routes."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger = get_logger(__name__, request)
        logger.warning("HTTP error", extra={"status_code": exc.status_code})
        if isinstance(exc.detail, dict):
            message = str(exc.detail) if len(str(exc.detail)) < 200 else "Request failed"
            details = exc.detail
        else:
            message = exc.detail or "HTTP error"
            details = None

        body = ErrorEnvelope(
            error=ErrorBody(type="http_error", message=message, details=details),
            meta=_build_meta(request),
        )
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())

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
