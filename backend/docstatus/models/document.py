"""
document.py
- Purpose: Uploaded knowledge-base document + ingestion progress.
- Ownership: the ingestion pipeline writes status/progress/updated_at on every
  step; this service reads them and only writes on a reprocess reset.
"""

import uuid
from datetime import datetime
from sqlalchemy import String, Text, Integer, DateTime, JSON, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from docstatus.models.base import Base, utcnow


class Document(Base):
    __tablename__ = "documents"

    __table_args__ = (
        Index("idx_documents_tenant", "tenant_id"),
        Index("idx_documents_dataset", "dataset_id"),
        # Stalled scan: processing rows per tenant
        Index("idx_documents_tenant_status", "tenant_id", "status"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    tenant_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    dataset_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)

    filename: Mapped[str] = mapped_column(Text, nullable=False)
    file_path: Mapped[str] = mapped_column(Text, nullable=False)
    file_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    file_type: Mapped[str | None] = mapped_column(Text, nullable=True)

    status: Mapped[str | None] = mapped_column(String(32), nullable=True, default="uploaded")
    progress_step: Mapped[str | None] = mapped_column(String(32), nullable=True)
    progress_percent: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)
    metadata_: Mapped[dict | None] = mapped_column("metadata", JSON, nullable=True, default=dict)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=utcnow, nullable=False)
    # Heartbeat: refreshed by the pipeline on every processing step.
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=False),
        default=utcnow,
        onupdate=utcnow,
        nullable=True,
    )
