"""Global error handlers - semua error dikembalikan dalam format JSON yang seragam."""

import logging
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.exceptions import PortalError, SubmissionValidationError

logger = logging.getLogger(__name__)


def _format_loc(loc) -> str:
    """Convert pydantic loc tuple ke path field: answers[2].answer_value."""
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    field = ""
    for part in parts:
        if part.isdigit():
            field += f"[{part}]"
        else:
            field = f"{field}.{part}" if field else part
    return field or "body"


def _error_payload(message: str, errors=None, code: str = "error") -> dict:
    payload = {
        "success": False,
        "code": code,
        "message": message,
        "timestamp": datetime.utcnow().isoformat(),
    }
    if errors is not None:
        payload["errors"] = errors
    return payload


async def portal_error_handler(request: Request, exc: PortalError) -> JSONResponse:
    """Handle semua error domain."""
    if isinstance(exc, SubmissionValidationError):
        logger.info(f"Validation failed on {request.url.path}: {len(exc.errors)} field error(s)")
        return JSONResponse(
            status_code=exc.status_code,
            content=jsonable_encoder(_error_payload(exc.message, exc.errors, "validation_error")),
        )

    log = logger.error if exc.status_code >= 500 else logger.info
    log(f"{exc.__class__.__name__} on {request.url.path}: {exc.message}")

    code = {
        404: "not_found",
        409: "conflict",
    }.get(exc.status_code, "error")

    payload = _error_payload(exc.message, code=code)
    if exc.details:
        payload["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(payload))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reshape error validasi FastAPI/pydantic ke format field-level yang sama."""
    errors = [
        {"field": _format_loc(err.get("loc", ())), "message": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder(_error_payload("Validasi data gagal", errors, "validation_error")),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback untuk exception yang tidak tertangani."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=jsonable_encoder(_error_payload("Terjadi kesalahan pada server", code="internal_error")),
    )


def add_error_handlers(app: FastAPI) -> None:
    """Register semua error handler ke aplikasi."""
    app.add_exception_handler(PortalError, portal_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
