# docstatus/core/error_codes.py
from enum import Enum

class ErrorCode(str, Enum):
    UNKNOWN = "UNKNOWN"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    DB_ERROR = "DB_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Documents
    DOCUMENT_NOT_FOUND = "DOCUMENT_NOT_FOUND"
    DOCUMENT_NOT_REPROCESSABLE = "DOCUMENT_NOT_REPROCESSABLE"

    # Chatbots / RAG index
    CHATBOT_NOT_FOUND = "CHATBOT_NOT_FOUND"

    # Background dispatch
    DISPATCH_FAILED = "DISPATCH_FAILED"
