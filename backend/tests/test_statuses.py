from docstatus.constants.statuses import (
    DocumentStatus,
    RagIndexStatus,
    UnrecognizedStatus,
    parse_document_status,
    parse_rag_index_status,
    status_value,
)


def test_parse_document_status():
    assert parse_document_status("approved") is DocumentStatus.APPROVED
    assert parse_document_status(DocumentStatus.FAILED) is DocumentStatus.FAILED
    assert parse_document_status("APPROVED") == UnrecognizedStatus("APPROVED")
    assert parse_document_status(None) == UnrecognizedStatus("")


def test_parse_rag_index_status():
    assert parse_rag_index_status("running") is RagIndexStatus.RUNNING
    assert parse_rag_index_status("generating") is RagIndexStatus.RUNNING
    assert parse_rag_index_status("queued") == UnrecognizedStatus("queued")


def test_status_value():
    assert status_value(DocumentStatus.CHUNKED) == "chunked"
    assert status_value(UnrecognizedStatus("x")) == "x"
    assert status_value(None) == ""
    assert status_value("reviewing") == "reviewing"
