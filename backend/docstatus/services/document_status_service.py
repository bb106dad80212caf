# docstatus/services/document_status_service.py
"""
document_status_service.py
- Purpose: Read-model for a polling client + the user-triggered reprocess action.
- Owns: DB reads/writes via repos, status derivation, dispatch to the pipeline.
- Design: Status decisions come from docstatus.status (pure); this layer only
  supplies `now`, the policy and the row.
"""

from __future__ import annotations

import logging
from typing import Callable

from sqlalchemy.orm import Session

from docstatus.constants.statuses import DocumentStatus, ReprocessType
from docstatus.core import AppError, ErrorCode, ErrorReason
from docstatus.core.clock import Clock, SystemClock
from docstatus.core.config import settings
from docstatus.core.errors import conflict, not_found
from docstatus.core.request_context import set_context
from docstatus.models.document import Document
from docstatus.repos.document.read import DocumentReadRepo
from docstatus.repos.document.write import DocumentWriteRepo
from docstatus.schemas.document import (
    DocumentStatusResponse,
    ReprocessResponse,
    StalledDocument,
    StalledDocumentsResponse,
)
from docstatus.status import (
    StatusPolicy,
    can_reprocess,
    is_stalled,
    poll_after_ms,
    progress_step_label,
    reprocess_type,
    status_label,
)
from docstatus.status.timestamps import as_utc
from docstatus.tasks.dispatch import dispatch_document_uploaded

logger = logging.getLogger("docstatus.document_status_service")


class DocumentStatusService:
    def __init__(
        self,
        db: Session,
        *,
        clock: Clock | None = None,
        policy: StatusPolicy | None = None,
        dispatch: Callable[[dict], str | None] = dispatch_document_uploaded,
    ):
        self.db = db
        self.clock = clock or SystemClock()
        self.policy = policy or StatusPolicy.from_settings(settings)
        self.dispatch = dispatch

        self.doc_read = DocumentReadRepo(db)
        self.doc_write = DocumentWriteRepo(db)

    def _get_or_404(self, document_id) -> Document:
        doc = self.doc_read.get_by_id(document_id)
        if not doc:
            raise not_found(
                ErrorReason.DOCUMENT_NOT_FOUND,
                code=ErrorCode.DOCUMENT_NOT_FOUND,
                details={"document_id": str(document_id)},
            )
        return doc

    def get_status(self, document_id) -> DocumentStatusResponse:
        doc = self._get_or_404(document_id)
        status = doc.status or DocumentStatus.UPLOADED.value
        now = self.clock.now()

        stalled = is_stalled(status, doc.updated_at, now, self.policy)
        chunk_count = self.doc_read.count_chunks(doc.id)
        return DocumentStatusResponse(
            document_id=doc.id,
            status=status,
            label=status_label(status, stalled),
            is_stalled=stalled,
            can_reprocess=can_reprocess(status, doc.updated_at, now, self.policy),
            reprocess_type=reprocess_type(status, chunk_count, doc.updated_at, now, self.policy).value,
            chunk_count=chunk_count,
            progress_step=doc.progress_step,
            progress_step_label=progress_step_label(doc.progress_step),
            progress_percent=doc.progress_percent,
            error_message=doc.error_message,
            updated_at=doc.updated_at,
            poll_after_ms=poll_after_ms(status, stalled, self.policy),
        )

    def list_stalled(self, tenant_id) -> StalledDocumentsResponse:
        now = self.clock.now()
        stalled = [
            doc
            for doc in self.doc_read.list_processing(tenant_id)
            if is_stalled(doc.status, doc.updated_at, now, self.policy)
        ]
        if stalled:
            logger.info("document.stalled_found", extra={"tenant_id": str(tenant_id), "count": len(stalled)})
        return StalledDocumentsResponse(
            tenant_id=tenant_id,
            count=len(stalled),
            documents=[StalledDocument.from_document(d) for d in stalled],
        )

    def reprocess(self, document_id) -> ReprocessResponse:
        """
        Reset a dead/terminal document to `uploaded` and hand it back to the
        pipeline. Refused while the document is healthy and mid-flight.
        """
        set_context(document_id=str(document_id))
        doc = self._get_or_404(document_id)
        now = self.clock.now()
        status = doc.status or DocumentStatus.UPLOADED.value

        kind = reprocess_type(status, self.doc_read.count_chunks(doc.id), doc.updated_at, now, self.policy)
        if kind is ReprocessType.NOT_ALLOWED:
            raise conflict(
                ErrorReason.DOCUMENT_IN_FLIGHT,
                code=ErrorCode.DOCUMENT_NOT_REPROCESSABLE,
                details={"document_id": str(doc.id), "status": status},
            )

        previous_status = status
        self.doc_write.reset_for_reprocess(
            doc, now=as_utc(now).replace(tzinfo=None)
        )
        self.db.commit()

        payload = {
            "document_id": str(doc.id),
            "tenant_id": str(doc.tenant_id),
            # None for library documents
            "dataset_id": str(doc.dataset_id) if doc.dataset_id else None,
            "filename": doc.filename,
            "file_type": doc.file_type or "unknown",
            "file_path": doc.file_path,
        }
        try:
            task_id = self.dispatch(payload)
        except Exception as e:
            # Row is already `uploaded`, so the user can simply retry.
            logger.exception("document.reprocess_dispatch_failed")
            raise AppError(
                code=ErrorCode.DISPATCH_FAILED,
                reason=ErrorReason.DISPATCH_FAILED.value,
                status_code=503,
                details={"document_id": str(doc.id)},
            ) from e

        logger.info(
            "document.reprocess_triggered",
            extra={
                "tenant_id": str(doc.tenant_id),
                "previous_status": previous_status,
                "reprocess_type": kind.value,
                "celery_task_id": task_id,
            },
        )
        return ReprocessResponse(
            document_id=doc.id, status=doc.status, reprocess_type=kind.value, task_id=task_id
        )
