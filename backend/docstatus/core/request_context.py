"""
Request/Task context helpers.

We keep a small context (request_id, task_id, document_id, chatbot_id) in
ContextVars. FastAPI middleware, services and the dispatch helper set these
values so logs from a status poll and the reprocess it triggers correlate.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any, Dict, Optional


_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
_task_id: ContextVar[Optional[str]] = ContextVar("task_id", default=None)
_document_id: ContextVar[Optional[str]] = ContextVar("document_id", default=None)
_chatbot_id: ContextVar[Optional[str]] = ContextVar("chatbot_id", default=None)


def set_context(
    *,
    request_id: Optional[str] = None,
    task_id: Optional[str] = None,
    document_id: Optional[str] = None,
    chatbot_id: Optional[str] = None,
) -> None:
    if request_id is not None:
        _request_id.set(request_id)
    if task_id is not None:
        _task_id.set(task_id)
    if document_id is not None:
        _document_id.set(document_id)
    if chatbot_id is not None:
        _chatbot_id.set(chatbot_id)


def clear_context() -> None:
    _request_id.set(None)
    _task_id.set(None)
    _document_id.set(None)
    _chatbot_id.set(None)


def get_context() -> Dict[str, Any]:
    ctx: Dict[str, Any] = {}
    rid = _request_id.get()
    tid = _task_id.get()
    did = _document_id.get()
    cid = _chatbot_id.get()

    if rid:
        ctx["request_id"] = rid
    if tid:
        ctx["task_id"] = tid
    if did:
        ctx["document_id"] = did
    if cid:
        ctx["chatbot_id"] = cid
    return ctx
