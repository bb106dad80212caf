"""
models package
- Purpose: Import all ORM models so Base.metadata knows every table.
- Important: metadata only sees models that are imported somewhere.
"""

from docstatus.models.document import Document
from docstatus.models.chatbot import Chatbot
from docstatus.models.chunk import Chunk

__all__ = [
    "Document",
    "Chatbot",
    "Chunk",
]
