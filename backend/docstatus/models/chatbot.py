"""
chatbot.py
- Purpose: Chatbot row, reduced to the columns the RAG index status view reads.
"""

import uuid
from datetime import datetime
from sqlalchemy import String, Text, DateTime, JSON, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from docstatus.models.base import Base, utcnow


def default_rag_index_config() -> dict:
    return {
        "keywords": [],
        "includedTopics": [],
        "excludedTopics": [],
        "confidence": None,
        "lastGeneratedAt": None,
        "documentSampleCount": 0,
    }


class Chatbot(Base):
    __tablename__ = "chatbots"

    __table_args__ = (
        Index("idx_chatbots_tenant", "tenant_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    tenant_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)

    # Written by the index build job; never editable through the API.
    rag_index_config: Mapped[dict | None] = mapped_column(JSON, nullable=True, default=default_rag_index_config)
    rag_index_status: Mapped[str | None] = mapped_column(String(32), nullable=True, default="idle")

    status: Mapped[str] = mapped_column(String(32), nullable=False, default="active")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )
    # Last dataset/document change that affects retrieval.
    content_updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=False), nullable=True)
