from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from docstatus.core.clock import Clock, SystemClock
from docstatus.core.config import settings
from docstatus.db.session import SessionLocal
from docstatus.services.document_status_service import DocumentStatusService
from docstatus.services.rag_index_service import RagIndexStatusService
from docstatus.status import StatusPolicy


def get_db() -> Generator[Session, None, None]:
    """
    Yields a DB session per request.
    Ensures the session is closed even on exceptions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_clock() -> Clock:
    """Override in tests to pin `now` at a threshold boundary."""
    return SystemClock()


def get_status_policy() -> StatusPolicy:
    return StatusPolicy.from_settings(settings)


def get_document_status_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
    policy: StatusPolicy = Depends(get_status_policy),
) -> DocumentStatusService:
    return DocumentStatusService(db=db, clock=clock, policy=policy)


def get_rag_index_status_service(
    db: Session = Depends(get_db),
    policy: StatusPolicy = Depends(get_status_policy),
) -> RagIndexStatusService:
    return RagIndexStatusService(db=db, policy=policy)
