"""
statuses.py
- Purpose: Central source of truth for ingestion + RAG index statuses.
- Design: Persisted values are plain strings written by background jobs we do
  not own. Anything we don't recognize is carried as UnrecognizedStatus
  instead of being rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


STALLED_THRESHOLD_MS = 300_000
POLLING_INTERVAL_MS = 3_000


class DocumentStatus(str, Enum):
    UPLOADED = "uploaded"
    PROCESSING = "processing"
    CHUNKED = "chunked"
    REVIEWING = "reviewing"
    APPROVED = "approved"
    FAILED = "failed"


class ProgressStep(str, Enum):
    PARSING = "parsing"
    CHUNKING = "chunking"
    CONTEXT_GENERATION = "context_generation"
    EMBEDDING = "embedding"
    QUALITY_CHECK = "quality_check"


class ReprocessType(str, Enum):
    NOT_ALLOWED = "not_allowed"
    # Existing chunks get deleted and rebuilt; the console asks first.
    DESTRUCTIVE = "destructive"
    SAFE = "safe"


class RagIndexStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# Rows written before the index job was renamed still carry these.
LEGACY_RAG_INDEX_STATUSES: dict[str, RagIndexStatus] = {
    "generating": RagIndexStatus.RUNNING,
    "completed": RagIndexStatus.SUCCEEDED,
}

REPROCESSABLE_STATUSES: frozenset[DocumentStatus] = frozenset(
    {DocumentStatus.UPLOADED, DocumentStatus.FAILED}
)


@dataclass(frozen=True)
class UnrecognizedStatus:
    raw: str

    @property
    def value(self) -> str:
        return self.raw


def status_value(status) -> str:
    """Raw persisted string for any status-ish input (None -> "")."""
    if status is None:
        return ""
    if isinstance(status, (Enum, UnrecognizedStatus)):
        return status.value
    return str(status)


def parse_document_status(raw) -> DocumentStatus | UnrecognizedStatus:
    if isinstance(raw, (DocumentStatus, UnrecognizedStatus)):
        return raw
    value = status_value(raw)
    try:
        return DocumentStatus(value)
    except ValueError:
        return UnrecognizedStatus(value)


def parse_rag_index_status(raw) -> RagIndexStatus | UnrecognizedStatus:
    if isinstance(raw, (RagIndexStatus, UnrecognizedStatus)):
        return raw
    value = status_value(raw)
    if value in LEGACY_RAG_INDEX_STATUSES:
        return LEGACY_RAG_INDEX_STATUSES[value]
    try:
        return RagIndexStatus(value)
    except ValueError:
        return UnrecognizedStatus(value)
