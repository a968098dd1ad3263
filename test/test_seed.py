"""
Tests for the demo data loader.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy import func, select

from eventdesk.auth.models import User, UserRole
from eventdesk.auth.passwords import verify_password
from eventdesk.events.models import Event, EventStatus
from eventdesk.guests.models import Guest
from eventdesk.seed import DEMO_EVENTS, run_seed
from eventdesk.shared.database import DatabaseManager
from eventdesk.tasks.models import Task, TaskStatus


@pytest_asyncio.fixture
async def seeded_manager() -> AsyncGenerator[DatabaseManager, None]:
    manager = DatabaseManager("sqlite+aiosqlite:///:memory:")
    yield manager
    await manager.close()


class TestSeed:
    @pytest.mark.asyncio
    async def test_seeds_accounts_events_guests_and_tasks(self, seeded_manager: DatabaseManager) -> None:
        created = await run_seed(seeded_manager, password_rounds=4)

        assert created == len(DEMO_EVENTS) == 5
        async with seeded_manager.session() as session:
            users = (await session.execute(select(User))).scalars().all()
            assert {u.role for u in users} == set(UserRole)
            admin = next(u for u in users if u.role == UserRole.ADMIN)
            assert admin.email == "admin@palazzoversace.com"
            assert verify_password("admin123", admin.password_hash)

            assert (await session.execute(select(func.count(Guest.id)))).scalar() == 15
            assert (await session.execute(select(func.count(Task.id)))).scalar() == 10

            summit = (
                await session.execute(select(Event).where(Event.title == "Corporate Leadership Summit"))
            ).scalar_one()
            assert summit.status == EventStatus.COMPLETED
            assert {t.status for t in summit.tasks} == {TaskStatus.COMPLETED}
            assert all(t.user_id == admin.id for t in summit.tasks)

    @pytest.mark.asyncio
    async def test_running_twice_adds_nothing(self, seeded_manager: DatabaseManager) -> None:
        await run_seed(seeded_manager, password_rounds=4)

        created = await run_seed(seeded_manager, password_rounds=4)

        assert created == 0
        async with seeded_manager.session() as session:
            assert (await session.execute(select(func.count(User.id)))).scalar() == 3
            assert (await session.execute(select(func.count(Event.id)))).scalar() == 5

    @pytest.mark.asyncio
    async def test_reset_rebuilds(self, seeded_manager: DatabaseManager) -> None:
        await run_seed(seeded_manager, password_rounds=4)

        created = await run_seed(seeded_manager, reset=True, password_rounds=4)

        assert created == 5
