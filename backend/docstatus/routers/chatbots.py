"""
chatbots.py
- Purpose: RAG index build status for a chatbot.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from docstatus.api.deps import get_rag_index_status_service
from docstatus.schemas.rag_index import RagIndexStatusResponse
from docstatus.services.rag_index_service import RagIndexStatusService

router = APIRouter(prefix="/api/chatbots", tags=["Chatbots"])


@router.get("/{chatbot_id}/rag-index/status", response_model=RagIndexStatusResponse)
def get_rag_index_status(chatbot_id: UUID, svc: RagIndexStatusService = Depends(get_rag_index_status_service)):
    return svc.get_status(chatbot_id)
