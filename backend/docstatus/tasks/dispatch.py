"""
tasks/dispatch.py
- Purpose: Hand a document back to the external ingestion pipeline.
- Design: send_task by name so this service never imports pipeline code.
"""

from __future__ import annotations

import logging

from docstatus.celery_app import celery_app
from docstatus.core.config import settings

logger = logging.getLogger("docstatus.tasks.dispatch")


def dispatch_document_uploaded(payload: dict) -> str | None:
    """Publish the `document uploaded` event; returns the Celery task id."""
    result = celery_app.send_task(
        settings.INGESTION_TASK_NAME,
        kwargs=payload,
        queue=settings.INGESTION_QUEUE,
    )
    task_id = getattr(result, "id", None)
    logger.info(
        "task.dispatched",
        extra={"task": settings.INGESTION_TASK_NAME, "queue": settings.INGESTION_QUEUE, "celery_task_id": task_id},
    )
    return task_id
