"""
error_reasons.py
- Purpose: Human-friendly "reason" strings.
- Keep these stable; the console surfaces them next to the status badge.
"""

from enum import Enum


class ErrorReason(str, Enum):
    UNKNOWN = "Unknown error"

    INVALID_INPUT = "Invalid input"
    RESOURCE_NOT_FOUND = "Resource not found"
    ALREADY_EXISTS = "Resource already exists"

    DATABASE_UNAVAILABLE = "Database unavailable"
    INTERNAL_ERROR = "Internal server error"

    DOCUMENT_NOT_FOUND = "Document not found"
    DOCUMENT_IN_FLIGHT = "Document is still being processed"
    CHATBOT_NOT_FOUND = "Chatbot not found"
    DISPATCH_FAILED = "Could not queue document for processing"
