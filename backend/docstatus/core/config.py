# docstatus/core/config.py
import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

from docstatus.constants import statuses

PROJECT_ROOT = Path(__file__).parent.parent.parent

class Settings(BaseSettings):
    app_name: str = "DocStatus"
    env: str = "local"
    DATABASE_URL: str = "sqlite:///./docstatus.db"

    # Celery (reprocess dispatch only; the pipeline itself runs elsewhere)
    REDIS_BROKER_URL: str = "redis://localhost:6379/0"
    CELERY_RESULT_BACKEND: str | None = None
    INGESTION_TASK_NAME: str = "ingestion.document_uploaded"
    INGESTION_QUEUE: str = "ingest_q"

    # =========================
    # Status policy
    # =========================
    STALLED_THRESHOLD_MS: int = statuses.STALLED_THRESHOLD_MS   # 5 minutes without heartbeat
    POLLING_INTERVAL_MS: int = statuses.POLLING_INTERVAL_MS     # consumed by the client poller
    REPROCESSABLE_STATUSES: list[str] = ["uploaded", "failed"]

    # HTTP
    CORS_ALLOW_ORIGINS: str | None = None

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

settings = Settings()
