# docstatus/services/rag_index_service.py
"""
rag_index_service.py
- Purpose: Status endpoint payload for the per-chatbot RAG index build.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from docstatus.core import ErrorCode, ErrorReason
from docstatus.core.config import settings
from docstatus.core.errors import not_found
from docstatus.core.request_context import set_context
from docstatus.repos.chatbot.read import ChatbotReadRepo
from docstatus.schemas.rag_index import RagIndexStatusResponse
from docstatus.status import StatusPolicy, needs_regeneration, rag_index_view, rag_poll_after_ms


class RagIndexStatusService:
    def __init__(self, db: Session, *, policy: StatusPolicy | None = None):
        self.db = db
        self.policy = policy or StatusPolicy.from_settings(settings)
        self.chatbot_read = ChatbotReadRepo(db)

    def get_status(self, chatbot_id) -> RagIndexStatusResponse:
        set_context(chatbot_id=str(chatbot_id))
        chatbot = self.chatbot_read.get_by_id(chatbot_id)
        if not chatbot:
            raise not_found(
                ErrorReason.CHATBOT_NOT_FOUND,
                code=ErrorCode.CHATBOT_NOT_FOUND,
                details={"chatbot_id": str(chatbot_id)},
            )

        view = rag_index_view(chatbot.rag_index_status, chatbot.rag_index_config)
        return RagIndexStatusResponse(
            chatbot_id=chatbot.id,
            status=view.status.value,
            last_generated_at=view.last_generated_at,
            needs_regeneration=needs_regeneration(view.last_generated_at, chatbot.content_updated_at),
            poll_after_ms=rag_poll_after_ms(view.status, self.policy),
        )
