# docstatus/core/__init__.py
from docstatus.core.errors import AppError
from docstatus.core.error_codes import ErrorCode
from docstatus.core.error_reasons import ErrorReason

__all__ = ["AppError", "ErrorCode", "ErrorReason"]
