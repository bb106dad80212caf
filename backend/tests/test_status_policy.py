from datetime import timedelta

import pytest

from docstatus.constants.statuses import DocumentStatus, ReprocessType, UnrecognizedStatus
from docstatus.core.config import Settings
from docstatus.status import DEFAULT_POLICY, StatusPolicy, can_reprocess, is_stalled, poll_after_ms, reprocess_type


NON_PROCESSING = ["uploaded", "chunked", "reviewing", "approved", "failed", "mystery"]


@pytest.mark.parametrize("status", NON_PROCESSING)
@pytest.mark.parametrize("age", [None, timedelta(0), timedelta(hours=3)])
def test_only_processing_can_stall(now, status, age):
    updated_at = None if age is None else now - age
    assert is_stalled(status, updated_at, now) is False


def test_processing_threshold_is_strict(now):
    assert is_stalled("processing", now - timedelta(minutes=4, seconds=59), now) is False
    assert is_stalled("processing", now - timedelta(minutes=5), now) is False
    assert is_stalled("processing", now - timedelta(minutes=5, seconds=1), now) is True


def test_missing_heartbeat_is_stalled(now):
    assert is_stalled("processing", None, now) is True


@pytest.mark.parametrize("garbage", ["not-a-timestamp", "", {"at": 1}, object(), True])
def test_unparseable_heartbeat_is_stalled(now, garbage):
    assert is_stalled("processing", garbage, now) is True


def test_iso_string_and_naive_heartbeats(now):
    fresh = (now - timedelta(minutes=1)).isoformat()
    stale = (now - timedelta(minutes=10)).isoformat()
    assert is_stalled("processing", fresh, now) is False
    assert is_stalled("processing", stale, now) is True

    naive_stale = (now - timedelta(minutes=6)).replace(tzinfo=None)
    assert is_stalled("processing", naive_stale, now) is True


def test_enum_and_wrapped_statuses_accepted(now):
    old = now - timedelta(minutes=10)
    assert is_stalled(DocumentStatus.PROCESSING, old, now) is True
    assert is_stalled(UnrecognizedStatus("processing-v2"), old, now) is False


def test_always_reprocessable_ignores_timestamp(now):
    for updated_at in (None, "junk", now, now - timedelta(days=2)):
        assert can_reprocess("uploaded", updated_at, now) is True
        assert can_reprocess("failed", updated_at, now) is True


def test_reprocess_only_when_processing_is_stalled(now):
    assert can_reprocess("processing", now - timedelta(minutes=10), now) is True
    assert can_reprocess("processing", now - timedelta(minutes=1), now) is False
    assert can_reprocess("processing", None, now) is True


@pytest.mark.parametrize("status", ["chunked", "reviewing", "approved", "unknown_status"])
def test_mid_pipeline_statuses_not_reprocessable(now, status):
    assert can_reprocess(status, now - timedelta(minutes=10), now) is False


def test_policy_overrides_threshold_without_globals(now):
    tight = StatusPolicy.from_values(stalled_threshold_ms=30_000)
    updated_at = now - timedelta(minutes=1)

    assert is_stalled("processing", updated_at, now, tight) is True
    assert is_stalled("processing", updated_at, now) is False
    assert DEFAULT_POLICY.stalled_threshold == timedelta(minutes=5)


def test_policy_from_settings():
    policy = StatusPolicy.from_settings(
        Settings(STALLED_THRESHOLD_MS=60_000, POLLING_INTERVAL_MS=1_000, REPROCESSABLE_STATUSES=["failed"])
    )
    assert policy.stalled_threshold == timedelta(minutes=1)
    assert policy.polling_interval_ms == 1_000
    assert policy.reprocessable_statuses == frozenset({"failed"})


def test_default_constants():
    assert DEFAULT_POLICY.stalled_threshold == timedelta(milliseconds=300_000)
    assert DEFAULT_POLICY.polling_interval_ms == 3_000
    assert DEFAULT_POLICY.reprocessable_statuses == frozenset({"uploaded", "failed"})


def test_poll_hint():
    assert poll_after_ms("uploaded", False) == 3_000
    assert poll_after_ms("processing", False) == 3_000
    assert poll_after_ms("processing", True) is None
    for status in ("chunked", "reviewing", "approved", "failed", "whatever"):
        assert poll_after_ms(status, False) is None


def test_repeated_calls_are_identical(now):
    args = ("processing", now - timedelta(minutes=7), now)
    assert {is_stalled(*args) for _ in range(5)} == {True}
    assert {can_reprocess(*args) for _ in range(5)} == {True}


def test_reprocess_type_outcomes(now):
    stale = now - timedelta(minutes=10)
    fresh = now - timedelta(minutes=1)

    assert reprocess_type("processing", 12, fresh, now) is ReprocessType.NOT_ALLOWED
    assert reprocess_type("approved", 0, stale, now) is ReprocessType.NOT_ALLOWED

    assert reprocess_type("failed", 12, stale, now) is ReprocessType.DESTRUCTIVE
    assert reprocess_type("processing", 3, stale, now) is ReprocessType.DESTRUCTIVE

    assert reprocess_type("uploaded", 0, None, now) is ReprocessType.SAFE
    assert reprocess_type("failed", None, fresh, now) is ReprocessType.SAFE
    assert reprocess_type("processing", 0, None, now) is ReprocessType.SAFE
