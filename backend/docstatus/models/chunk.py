"""
chunk.py
- Purpose: Chunks produced by the ingestion pipeline, reduced to what we count.
- A document with chunks loses them on reprocess, so the console confirms first.
"""

import uuid
from datetime import datetime
from sqlalchemy import Text, DateTime, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from docstatus.models.base import Base, utcnow


class Chunk(Base):
    __tablename__ = "chunks"

    __table_args__ = (
        Index("idx_chunks_document", "document_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    tenant_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    document_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("documents.id", ondelete="CASCADE"), nullable=False
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utcnow, nullable=False)
