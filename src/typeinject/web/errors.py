# typeinject/web/errors.py
from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from typeinject.errors import InjectError, MissingDependencyError, UnsupportedConversionError, UsageError

logger = logging.getLogger(__name__)

_CODES = (
    (MissingDependencyError, "MISSING_DEPENDENCY"),
    (UnsupportedConversionError, "UNSUPPORTED_CONVERSION"),
    (UsageError, "INJECT_USAGE"),
)


def error_envelope(code: str, message: str, details=None):
    return {"error": {"code": code, "message": message, "details": details or {}}}


def error_code(exc: InjectError) -> str:
    for cls, code in _CODES:
        if isinstance(exc, cls):
            return code
    return "INJECT_ERROR"


async def inject_error_handler(request: Request, exc: InjectError) -> JSONResponse:
    code = error_code(exc)
    logger.warning("[inject] %s %s → %s: %s", request.method, request.url.path, code, exc)
    details = {}
    if isinstance(exc, MissingDependencyError) and exc.parameter:
        details["parameter"] = exc.parameter
    return JSONResponse(error_envelope(code, str(exc), details), status_code=500)


def add_error_handlers(app: FastAPI) -> None:
    """Attach registry error handlers to app."""
    app.add_exception_handler(InjectError, inject_error_handler)
