"""
Exception handlers giving every error response the same flat body:

    {"error": "<message>"}

- `HTTPException` raised by handlers keeps its status; its detail becomes the
  message.
- Request validation failures (malformed JSON, wrong types, missing fields,
  non-integer path ids) answer 400 instead of FastAPI's default 422.
- Anything else is logged with its traceback and answers 500.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def describe_validation_errors(errors) -> str:
    """Flatten pydantic error entries into one readable message."""
    parts = []
    for err in errors:
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def attach_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def on_http_error(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def on_validation_error(request: Request, exc: RequestValidationError):
        message = describe_validation_errors(exc.errors())
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return error_response(400, message)

    @app.exception_handler(Exception)
    async def on_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, str(exc) or exc.__class__.__name__)
