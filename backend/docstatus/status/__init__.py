"""
Status derivation for asynchronously processed documents and RAG index builds.

Everything in this package is a pure function of its arguments: no DB, no
clock reads, no logging side effects beyond a warning for coerced values.
"""

from docstatus.status.labels import STALLED_LABEL, progress_step_label, status_label
from docstatus.status.policy import (
    DEFAULT_POLICY,
    StatusPolicy,
    can_reprocess,
    is_stalled,
    poll_after_ms,
    reprocess_type,
)
from docstatus.status.rag_index import RagIndexView, needs_regeneration, rag_index_view, rag_poll_after_ms
from docstatus.status.timestamps import parse_heartbeat

__all__ = [
    "DEFAULT_POLICY",
    "STALLED_LABEL",
    "RagIndexView",
    "StatusPolicy",
    "can_reprocess",
    "is_stalled",
    "needs_regeneration",
    "parse_heartbeat",
    "poll_after_ms",
    "progress_step_label",
    "rag_index_view",
    "rag_poll_after_ms",
    "reprocess_type",
    "status_label",
]
