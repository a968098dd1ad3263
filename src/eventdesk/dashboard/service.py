"""
Dashboard overview service.
"""

import datetime as dt
from typing import Callable

from eventdesk.auth.middleware import CurrentUser
from eventdesk.auth.rbac import Action, authorize
from eventdesk.dashboard.repository import DashboardRepository
from eventdesk.dashboard.schemas import DashboardResponse, DashboardStats, RecentEvent
from eventdesk.shared.logging import get_logger

logger = get_logger(__name__)

RECENT_EVENTS_LIMIT = 5


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class DashboardService:
    """Computes the caller's dashboard on every request."""

    def __init__(
        self,
        repository: DashboardRepository,
        now: Callable[[], dt.datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._now = now

    async def get_overview(self, user: CurrentUser) -> DashboardResponse:
        """
        Build the dashboard overview for ``user``.

        Args:
            user: Authenticated caller; all counts cover only their data.

        Returns:
            DashboardResponse with stats and the most recently created events.
        """
        authorize(user, Action.READ_DASHBOARD)

        stats = DashboardStats(
            total_events=await self._repository.count_events(user.id),
            upcoming_events=await self._repository.count_upcoming_events(user.id, self._now()),
            completed_events=await self._repository.count_completed_events(user.id),
            total_guests=await self._repository.count_guests(user.id),
            pending_tasks=await self._repository.count_open_tasks(user.id),
        )
        recent = await self._repository.recent_events(user.id, limit=RECENT_EVENTS_LIMIT)

        logger.debug(
            "Dashboard computed",
            extra={"user_id": str(user.id), "total_events": stats.total_events},
        )
        return DashboardResponse(
            stats=stats,
            recent_events=[RecentEvent.model_validate(e) for e in recent],
        )
