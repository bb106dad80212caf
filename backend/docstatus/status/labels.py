"""status/labels.py

Display labels for the console's status badge.
"""

from __future__ import annotations

from docstatus.constants.statuses import (
    DocumentStatus,
    ProgressStep,
    UnrecognizedStatus,
    parse_document_status,
    status_value,
)

STALLED_LABEL = "중단됨"

STATUS_LABELS: dict[DocumentStatus, str] = {
    DocumentStatus.UPLOADED: "업로드됨",
    DocumentStatus.PROCESSING: "처리 중",
    DocumentStatus.CHUNKED: "청킹 완료",
    DocumentStatus.REVIEWING: "검토 중",
    DocumentStatus.APPROVED: "승인됨",
    DocumentStatus.FAILED: "실패",
}

PROGRESS_STEP_LABELS: dict[ProgressStep, str] = {
    ProgressStep.PARSING: "파싱 중",
    ProgressStep.CHUNKING: "청킹 중",
    ProgressStep.CONTEXT_GENERATION: "컨텍스트 생성 중",
    ProgressStep.EMBEDDING: "임베딩 생성 중",
    ProgressStep.QUALITY_CHECK: "품질 검사 중",
}


def status_label(status, stalled: bool) -> str:
    if stalled:
        return STALLED_LABEL

    parsed = parse_document_status(status)
    if isinstance(parsed, UnrecognizedStatus):
        return parsed.raw
    return STATUS_LABELS[parsed]


def progress_step_label(step) -> str | None:
    if step is None:
        return None
    raw = status_value(step)
    try:
        return PROGRESS_STEP_LABELS[ProgressStep(raw)]
    except ValueError:
        return raw
