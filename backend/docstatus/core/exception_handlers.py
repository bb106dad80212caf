"""
exception_handlers.py
- Purpose: Convert AppError (and generic exceptions) into consistent API responses.

The document/chatbot an error is about travels in AppError.details; it is
lifted into the log record so a refused reprocess or a 404 on a status poll
can be found by id.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from docstatus.core import AppError, ErrorCode
from docstatus.core.request_context import get_context

logger = logging.getLogger("docstatus.exceptions")

_SUBJECT_KEYS = ("document_id", "chatbot_id", "status")


def _subject(exc: AppError) -> dict:
    details = exc.details or {}
    ctx = get_context()
    # Context wins: the formatter would overwrite the extra anyway.
    return {k: details[k] for k in _SUBJECT_KEYS if k in details and k not in ctx}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    # A 5xx AppError (e.g. broker down) is our problem; 4xx is the caller's.
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "app_error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.status_code,
            "code": exc.code,
            "reason": exc.reason,
            **_subject(exc),
        },
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_exception",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=500,
        content={"error": {"code": ErrorCode.INTERNAL_ERROR, "reason": "Unhandled exception"}},
    )
