import json
import logging

from docstatus.core.logging_config import JsonFormatter
from docstatus.core.request_context import clear_context, set_context


def _record(msg="document.reprocess_triggered", **extra):
    record = logging.LogRecord("docstatus.test", logging.INFO, __file__, 1, msg, None, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_merges_context_and_extra():
    set_context(request_id="req-1", document_id="doc-9")
    try:
        out = json.loads(JsonFormatter().format(_record(previous_status="failed", blob=object())))
    finally:
        clear_context()

    assert out["msg"] == "document.reprocess_triggered"
    assert out["level"] == "INFO"
    assert out["request_id"] == "req-1"
    assert out["document_id"] == "doc-9"
    assert out["previous_status"] == "failed"
    assert isinstance(out["blob"], str)
    assert "chatbot_id" not in out
