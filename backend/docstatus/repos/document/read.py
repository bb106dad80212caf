"""
document/read.py
- Purpose: Read-side DB operations for Document.
"""

from sqlalchemy import func
from sqlalchemy.orm import Session

from docstatus.constants.statuses import DocumentStatus
from docstatus.models.chunk import Chunk
from docstatus.models.document import Document


class DocumentReadRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, document_id) -> Document | None:
        return self.db.query(Document).filter(Document.id == document_id).first()

    def list_processing(self, tenant_id, limit: int = 200) -> list[Document]:
        """Candidates for the stalled banner; staleness is decided in Python."""
        return (
            self.db.query(Document)
            .filter(Document.tenant_id == tenant_id, Document.status == DocumentStatus.PROCESSING.value)
            # No heartbeat means always stalled; keep those inside the limit.
            .order_by(Document.updated_at.asc().nulls_first())
            .limit(limit)
            .all()
        )

    def count_chunks(self, document_id) -> int:
        return (
            self.db.query(func.count(Chunk.id))
            .filter(Chunk.document_id == document_id)
            .scalar()
            or 0
        )
