"""Gestion standardisée des erreurs API avec enveloppes d'erreur.

Ce module rend les erreurs d'action, les erreurs de validation FastAPI et les exceptions
inattendues sous une enveloppe commune:

    {"success": false, "error": {"code", "message", "details"?}, "trace_id"}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from horoscope_backend.core.http_constants import (
    HTTP_BAD_REQUEST,
    HTTP_INTERNAL_SERVER_ERROR,
)
from horoscope_backend.domain.errors import ActionError, ErrorCodes

log = logging.getLogger(__name__)


@dataclass
class ErrorEnvelope:
    """Standard error envelope for API responses."""

    code: str
    message: str
    trace_id: str | None = None
    details: dict[str, Any] | None = None


def create_error_response(
    status_code: int,
    code: str,
    message: str,
    trace_id: str | None = None,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    envelope = ErrorEnvelope(code=code, message=message, trace_id=trace_id, details=details)
    error: dict[str, Any] = {"code": envelope.code, "message": envelope.message}
    if envelope.details:
        error["details"] = envelope.details
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "trace_id": envelope.trace_id},
    )


def extract_trace_id(request: Request) -> str | None:
    """Extract trace ID from request headers or request state (set by middleware)."""
    trace_id = request.headers.get("X-Trace-ID")
    if trace_id:
        return trace_id
    return getattr(request.state, "request_id", None)


def handle_action_error(request: Request, exc: ActionError) -> JSONResponse:
    """Handle ActionError exceptions with standard envelope."""
    trace_id = extract_trace_id(request)
    log.info(
        "Action failed",
        extra={
            "code": exc.code,
            "error_message": exc.message,
            "status_code": exc.status_code,
            "trace_id": trace_id,
        },
    )
    return create_error_response(
        status_code=exc.status_code,
        code=exc.code,
        message=exc.message,
        trace_id=trace_id,
        details=exc.details,
    )


def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle malformed request bodies (e.g. invalid JSON) as validation errors."""
    trace_id = extract_trace_id(request)
    errors = [
        {"field": ".".join(str(p) for p in e.get("loc", ())), "message": e.get("msg", "")}
        for e in exc.errors()
    ]
    return create_error_response(
        status_code=HTTP_BAD_REQUEST,
        code=ErrorCodes.VALIDATION_ERROR,
        message="Invalid input.",
        trace_id=trace_id,
        details={"errors": errors},
    )


def handle_generic_exception(request: Request, exc: Exception) -> JSONResponse:
    """Handle generic exceptions with standard envelope."""
    trace_id = extract_trace_id(request)
    log.error(
        "Unexpected error occurred",
        extra={
            "code": ErrorCodes.INTERNAL_ERROR,
            "trace_id": trace_id,
            "exception_type": type(exc).__name__,
        },
        exc_info=True,
    )
    return create_error_response(
        status_code=HTTP_INTERNAL_SERVER_ERROR,
        code=ErrorCodes.INTERNAL_ERROR,
        message="An unexpected error occurred",
        trace_id=trace_id,
    )


def install_error_handlers(app: FastAPI) -> None:
    """Branche les gestionnaires d'erreurs sur l'application."""
    app.add_exception_handler(ActionError, handle_action_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_generic_exception)
