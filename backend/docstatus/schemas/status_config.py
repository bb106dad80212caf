from docstatus.schemas.base import CamelModel


class StatusConfigResponse(CamelModel):
    stalled_threshold_ms: int
    polling_interval_ms: int
    reprocessable_statuses: list[str]
