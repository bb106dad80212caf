# docstatus/celery_app.py
#
# Producer-side Celery app. The ingestion pipeline workers live in another
# deployment; we only publish to their queue by task name.
from celery import Celery

from docstatus.core.config import settings
from docstatus.core.logging_config import configure_logging

configure_logging()

BROKER_URL = settings.REDIS_BROKER_URL
BACKEND_URL = settings.CELERY_RESULT_BACKEND or BROKER_URL

celery_app = Celery(
    "docstatus",
    broker=BROKER_URL,
    backend=BACKEND_URL,
)

celery_app.conf.task_serializer = "json"
celery_app.conf.accept_content = ["json"]

# prevent Celery from overriding our root logger
celery_app.conf.worker_hijack_root_logger = False

celery_app.conf.task_routes = {
    settings.INGESTION_TASK_NAME: {"queue": settings.INGESTION_QUEUE},
}
