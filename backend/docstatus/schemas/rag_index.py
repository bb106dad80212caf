from typing import Any, Literal
from uuid import UUID

from docstatus.schemas.base import CamelModel


class RagIndexStatusResponse(CamelModel):
    chatbot_id: UUID
    status: Literal["idle", "running", "succeeded", "failed"]
    # Passed through exactly as the build job stored it (ISO string or null).
    last_generated_at: Any = None
    needs_regeneration: bool
    poll_after_ms: int | None = None
