"""
document/write.py
- Purpose: Write-side DB operations for Document.
- Design: No business logic; persistence only. Service owns the transaction.
"""

from datetime import datetime

from sqlalchemy.orm import Session

from docstatus.constants.statuses import DocumentStatus
from docstatus.models.document import Document


class DocumentWriteRepo:
    def __init__(self, db: Session):
        self.db = db

    def reset_for_reprocess(self, document: Document, *, now: datetime) -> Document:
        document.status = DocumentStatus.UPLOADED.value
        document.progress_step = None
        document.progress_percent = 0
        document.error_message = None
        document.updated_at = now
        self.db.flush()
        self.db.refresh(document)
        return document
