# docstatus/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docstatus.core.config import settings
from docstatus.core.logging_config import configure_logging
from docstatus.middleware.request_logging import RequestLoggingMiddleware
from docstatus.routers.health import router as health_router
from docstatus.routers.root import router as root_router
from docstatus.routers.documents import router as documents_router
from docstatus.routers.chatbots import router as chatbots_router
from docstatus.routers.status_config import router as status_config_router
from docstatus.core.exception_handlers import app_error_handler, unhandled_exception_handler
from docstatus.core import AppError

configure_logging()


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)

    app.add_middleware(RequestLoggingMiddleware)

    # CORS_ALLOW_ORIGINS="http://localhost:3000,https://console.example.com"
    allow_origins = _split_csv(settings.CORS_ALLOW_ORIGINS) or ["http://localhost:3000"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(status_config_router)
    app.include_router(documents_router)
    app.include_router(chatbots_router)

    return app


app = create_app()
