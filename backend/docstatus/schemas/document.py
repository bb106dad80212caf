"""
document.py (schemas)
- Purpose: Response DTOs for document ingestion status + reprocessing.
- Design: Keep API DTOs stable; include helper constructors for DRY mapping.
"""

from datetime import datetime
from uuid import UUID

from docstatus.schemas.base import CamelModel


class DocumentStatusResponse(CamelModel):
    document_id: UUID
    status: str
    label: str
    is_stalled: bool
    can_reprocess: bool
    # not_allowed | destructive | safe
    reprocess_type: str
    chunk_count: int = 0
    progress_step: str | None = None
    progress_step_label: str | None = None
    progress_percent: int | None = None
    error_message: str | None = None
    updated_at: datetime | None = None
    # None: stop polling.
    poll_after_ms: int | None = None


class StalledDocument(CamelModel):
    document_id: UUID
    filename: str
    status: str
    progress_step: str | None = None
    progress_percent: int | None = None
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_document(cls, doc) -> "StalledDocument":
        return cls(
            document_id=doc.id,
            filename=doc.filename,
            status=doc.status,
            progress_step=doc.progress_step,
            progress_percent=doc.progress_percent,
            created_at=doc.created_at,
            updated_at=doc.updated_at,
        )


class StalledDocumentsResponse(CamelModel):
    tenant_id: UUID
    count: int
    documents: list[StalledDocument]


class ReprocessResponse(CamelModel):
    document_id: UUID
    status: str
    reprocess_type: str
    task_id: str | None = None
