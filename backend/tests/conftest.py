import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from docstatus.core.clock import FixedClock
from docstatus.db.base import create_all
from docstatus.models import Chatbot, Chunk, Document

NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
TENANT_ID = uuid.UUID("00000000-0000-0000-0000-00000000a001")


def naive_utc(dt: datetime) -> datetime:
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_document(db):
    def _make(status="uploaded", *, age: timedelta | None = timedelta(0), tenant_id=TENANT_ID, **fields):
        doc = Document(
            tenant_id=tenant_id,
            filename=fields.pop("filename", "handbook.pdf"),
            file_path=fields.pop("file_path", f"tenants/{tenant_id}/handbook.pdf"),
            file_type=fields.pop("file_type", "pdf"),
            **fields,
        )
        db.add(doc)
        db.flush()
        # Set after insert so column defaults (and onupdate) don't win.
        doc.status = status
        doc.updated_at = naive_utc(NOW - age) if age is not None else None
        db.commit()
        db.refresh(doc)
        return doc

    return _make


@pytest.fixture
def add_chunks(db):
    def _add(doc, n: int):
        for i in range(n):
            db.add(Chunk(tenant_id=doc.tenant_id, document_id=doc.id, content=f"chunk {i}"))
        db.commit()

    return _add


@pytest.fixture
def make_chatbot(db):
    def _make(*, rag_index_status="idle", rag_index_config=None, content_updated_at=None, **fields):
        bot = Chatbot(
            tenant_id=fields.pop("tenant_id", TENANT_ID),
            name=fields.pop("name", "Support bot"),
            rag_index_status=rag_index_status,
            rag_index_config=rag_index_config,
            content_updated_at=content_updated_at,
            **fields,
        )
        db.add(bot)
        db.commit()
        db.refresh(bot)
        return bot

    return _make


@pytest.fixture
def dispatched(monkeypatch):
    """Capture Celery publishes instead of talking to a broker."""
    from docstatus.celery_app import celery_app

    calls = []

    class _Result:
        def __init__(self, task_id):
            self.id = task_id

    def fake_send_task(name, args=None, kwargs=None, **options):
        calls.append({"name": name, "kwargs": kwargs, **options})
        return _Result(f"task-{len(calls)}")

    monkeypatch.setattr(celery_app, "send_task", fake_send_task)
    return calls
