import logging
from typing import Callable

from fastapi import APIRouter, Depends, Request

from auth.dependencies import require_token
from models.dashboard import DashboardSnapshot

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["dashboard"])


def get_snapshot_provider(request: Request) -> Callable[[], DashboardSnapshot]:
    return request.app.state.snapshot_provider


# ---------- Endpoint ----------

@router.get(
    "/dashboard-data",
    response_model=DashboardSnapshot,
    dependencies=[Depends(require_token)],
)
def get_dashboard_data(provider: Callable[[], DashboardSnapshot] = Depends(get_snapshot_provider)):
    """Returns a freshly generated (mock) dashboard snapshot."""
    logger.info("Authenticated request received for dashboard data.")
    return provider()
