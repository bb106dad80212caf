"""status/policy.py

Stall detection and reprocess eligibility for ingested documents.

A document is only ever "stalled" while it claims to be processing: the
pipeline refreshes `updated_at` on every step, so a processing row whose
heartbeat is older than the threshold (or missing, or unreadable) belongs to
a job that died without reporting failure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Iterable

from docstatus.constants.statuses import (
    POLLING_INTERVAL_MS,
    REPROCESSABLE_STATUSES,
    STALLED_THRESHOLD_MS,
    DocumentStatus,
    ReprocessType,
    parse_document_status,
    status_value,
)
from docstatus.status.timestamps import as_utc, parse_heartbeat


@dataclass(frozen=True)
class StatusPolicy:
    stalled_threshold: timedelta = timedelta(milliseconds=STALLED_THRESHOLD_MS)
    polling_interval_ms: int = POLLING_INTERVAL_MS
    reprocessable_statuses: frozenset[str] = field(
        default_factory=lambda: frozenset(s.value for s in REPROCESSABLE_STATUSES)
    )

    @classmethod
    def from_values(
        cls,
        *,
        stalled_threshold_ms: int = STALLED_THRESHOLD_MS,
        polling_interval_ms: int = POLLING_INTERVAL_MS,
        reprocessable_statuses: Iterable[Any] = REPROCESSABLE_STATUSES,
    ) -> "StatusPolicy":
        return cls(
            stalled_threshold=timedelta(milliseconds=stalled_threshold_ms),
            polling_interval_ms=polling_interval_ms,
            reprocessable_statuses=frozenset(status_value(s) for s in reprocessable_statuses),
        )

    @classmethod
    def from_settings(cls, settings) -> "StatusPolicy":
        return cls.from_values(
            stalled_threshold_ms=settings.STALLED_THRESHOLD_MS,
            polling_interval_ms=settings.POLLING_INTERVAL_MS,
            reprocessable_statuses=settings.REPROCESSABLE_STATUSES,
        )


DEFAULT_POLICY = StatusPolicy()


def is_stalled(status, updated_at: Any, now: datetime, policy: StatusPolicy = DEFAULT_POLICY) -> bool:
    if parse_document_status(status) is not DocumentStatus.PROCESSING:
        return False

    heartbeat = parse_heartbeat(updated_at)
    if heartbeat is None:
        # Missing or corrupt heartbeat: assume the worst.
        return True

    return as_utc(now) - heartbeat > policy.stalled_threshold


def can_reprocess(status, updated_at: Any, now: datetime, policy: StatusPolicy = DEFAULT_POLICY) -> bool:
    if status_value(status) in policy.reprocessable_statuses:
        return True
    return is_stalled(status, updated_at, now, policy)


def reprocess_type(
    status,
    chunk_count: int | None,
    updated_at: Any,
    now: datetime,
    policy: StatusPolicy = DEFAULT_POLICY,
) -> ReprocessType:
    if not can_reprocess(status, updated_at, now, policy):
        return ReprocessType.NOT_ALLOWED
    if chunk_count and chunk_count > 0:
        return ReprocessType.DESTRUCTIVE
    return ReprocessType.SAFE


def poll_after_ms(status, stalled: bool, policy: StatusPolicy = DEFAULT_POLICY) -> int | None:
    """
    How long a polling client should wait before asking again, or None once
    nothing will change without a user decision.
    """
    if stalled:
        return None
    if parse_document_status(status) in (DocumentStatus.UPLOADED, DocumentStatus.PROCESSING):
        return policy.polling_interval_ms
    return None
