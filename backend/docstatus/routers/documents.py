"""
documents.py
- Purpose: Status polling + reprocess routes for ingested documents.
- Design: Keep router thin. Delegate business logic to services.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from docstatus.api.deps import get_document_status_service
from docstatus.schemas.document import DocumentStatusResponse, ReprocessResponse, StalledDocumentsResponse
from docstatus.services.document_status_service import DocumentStatusService

router = APIRouter(prefix="/api/documents", tags=["Documents"])


@router.get("/stalled", response_model=StalledDocumentsResponse)
def list_stalled_documents(
    tenant_id: UUID = Query(...),
    svc: DocumentStatusService = Depends(get_document_status_service),
):
    return svc.list_stalled(tenant_id)


@router.get("/{document_id}/status", response_model=DocumentStatusResponse)
def get_document_status(document_id: UUID, svc: DocumentStatusService = Depends(get_document_status_service)):
    return svc.get_status(document_id)


@router.post("/{document_id}/reprocess", response_model=ReprocessResponse, status_code=202)
def reprocess_document(document_id: UUID, svc: DocumentStatusService = Depends(get_document_status_service)):
    return svc.reprocess(document_id)
