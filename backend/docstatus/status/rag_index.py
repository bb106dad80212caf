"""status/rag_index.py

Read projection for the per-chatbot RAG index build.

The build job (elsewhere) moves `rag_index_status` idle -> running ->
succeeded | failed and stamps `lastGeneratedAt` into the chatbot's
`rag_index_config` JSON. We only read those two things.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from docstatus.constants.statuses import (
    RagIndexStatus,
    UnrecognizedStatus,
    parse_rag_index_status,
)
from docstatus.status.policy import DEFAULT_POLICY, StatusPolicy
from docstatus.status.timestamps import parse_heartbeat

logger = logging.getLogger("docstatus.status.rag_index")


@dataclass(frozen=True)
class RagIndexView:
    status: RagIndexStatus
    last_generated_at: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status.value, "lastGeneratedAt": self.last_generated_at}


def _last_generated_at(config: Any) -> Any:
    if not isinstance(config, Mapping):
        return None
    if "lastGeneratedAt" in config:
        return config["lastGeneratedAt"]
    return config.get("last_generated_at")


def rag_index_view(persisted_status: Any, config: Any) -> RagIndexView:
    if persisted_status is None:
        status = RagIndexStatus.IDLE
    else:
        parsed = parse_rag_index_status(persisted_status)
        if isinstance(parsed, UnrecognizedStatus):
            logger.warning("rag_index.unknown_status", extra={"raw_status": parsed.raw})
            status = RagIndexStatus.IDLE
        else:
            status = parsed

    return RagIndexView(status=status, last_generated_at=_last_generated_at(config))


def needs_regeneration(last_generated_at: Any, content_updated_at: Any) -> bool:
    """True when dataset/document changes happened after the index was last built."""
    generated = parse_heartbeat(last_generated_at)
    if generated is None:
        return True
    changed = parse_heartbeat(content_updated_at)
    if changed is None:
        return False
    return changed > generated


def rag_poll_after_ms(status: RagIndexStatus, policy: StatusPolicy = DEFAULT_POLICY) -> int | None:
    if status is RagIndexStatus.RUNNING:
        return policy.polling_interval_ms
    return None
