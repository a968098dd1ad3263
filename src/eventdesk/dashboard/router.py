"""
Dashboard API router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eventdesk.auth.middleware import CurrentUser
from eventdesk.auth.rbac import can_read_dashboard
from eventdesk.dashboard.repository import DashboardRepository
from eventdesk.dashboard.schemas import DashboardResponse
from eventdesk.dashboard.service import DashboardService
from eventdesk.shared.database import get_db_session

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def get_dashboard_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> DashboardService:
    return DashboardService(DashboardRepository(session))


@router.get(
    "",
    response_model=DashboardResponse,
    summary="Dashboard overview",
    responses={401: {"description": "Not authenticated"}},
)
async def get_dashboard(
    current_user: Annotated[CurrentUser, Depends(can_read_dashboard)],
    service: Annotated[DashboardService, Depends(get_dashboard_service)],
) -> DashboardResponse:
    """Counts over the caller's data plus their five most recently created events."""
    return await service.get_overview(current_user)
