from fastapi import APIRouter, Depends

from docstatus.api.deps import get_status_policy
from docstatus.schemas.status_config import StatusConfigResponse
from docstatus.status import StatusPolicy

router = APIRouter(prefix="/api/status", tags=["Status"])


@router.get("/config", response_model=StatusConfigResponse)
def get_status_config(policy: StatusPolicy = Depends(get_status_policy)):
    return StatusConfigResponse(
        stalled_threshold_ms=int(policy.stalled_threshold.total_seconds() * 1000),
        polling_interval_ms=policy.polling_interval_ms,
        reprocessable_statuses=sorted(policy.reprocessable_statuses),
    )
