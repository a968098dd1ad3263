"""
Demo data loader.

Creates the demo accounts and a handful of events with guests and tasks.
Running it twice does not duplicate anything: accounts are matched by email
and events by owner and title.
"""

import argparse
import asyncio
import datetime as dt
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventdesk.auth.models import User, UserRole
from eventdesk.auth.passwords import hash_password
from eventdesk.auth.repository import UserRepository
from eventdesk.events.models import Event, EventStatus
from eventdesk.guests.models import Guest, RsvpStatus
from eventdesk.shared.database import Base, DatabaseManager, get_database_manager
from eventdesk.shared.logging import get_logger, setup_logging
from eventdesk.tasks.models import Task, TaskStatus

logger = get_logger(__name__)

IMAGE_BASE = "https://storage.googleapis.com/workspace-0f70711f-8b4e-4d94-86f1-2a93ccde5887/image"


@dataclass(frozen=True)
class DemoAccount:
    email: str
    name: str
    password: str
    role: UserRole


DEMO_ACCOUNTS = (
    DemoAccount("admin@palazzoversace.com", "Admin User", "admin123", UserRole.ADMIN),
    DemoAccount("manager@palazzoversace.com", "Event Manager", "manager123", UserRole.MANAGER),
    DemoAccount("viewer@palazzoversace.com", "Event Viewer", "viewer123", UserRole.VIEWER),
)

# Owner is given by role; the viewer owns nothing.
DEMO_EVENTS = (
    {
        "owner": UserRole.ADMIN,
        "title": "Palazzo Versace Grand Gala",
        "description": (
            "An exclusive evening of luxury dining and entertainment featuring "
            "world-class performers and exquisite cuisine."
        ),
        "date": dt.date(2024, 12, 15),
        "time": "19:00",
        "venue": "Grand Ballroom",
        "organizer": "Palazzo Versace Events Team",
        "status": EventStatus.PUBLISHED,
        "images": f"{IMAGE_BASE}/3e96deed-e77e-4afd-847b-b11dc75f5236.png",
    },
    {
        "owner": UserRole.MANAGER,
        "title": "New Year's Eve Celebration",
        "description": (
            "Ring in the new year with style at our spectacular rooftop "
            "celebration with panoramic views of Dubai."
        ),
        "date": dt.date(2024, 12, 31),
        "time": "21:00",
        "venue": "Rooftop Terrace",
        "organizer": "Special Events Department",
        "status": EventStatus.PUBLISHED,
        "images": f"{IMAGE_BASE}/a3c35d7f-3518-43f3-93e2-e5774691f53b.png",
    },
    {
        "owner": UserRole.ADMIN,
        "title": "Corporate Leadership Summit",
        "description": (
            "A high-level business conference bringing together industry "
            "leaders and innovators."
        ),
        "date": dt.date(2024, 11, 20),
        "time": "09:00",
        "venue": "Conference Center",
        "organizer": "Business Development Team",
        "status": EventStatus.COMPLETED,
        "images": f"{IMAGE_BASE}/ad3e9127-5d53-4c39-be96-d7d11d422c04.png",
    },
    {
        "owner": UserRole.MANAGER,
        "title": "Luxury Fashion Show",
        "description": (
            "Showcase of the latest haute couture collections in an intimate "
            "luxury setting."
        ),
        "date": dt.date(2024, 12, 8),
        "time": "20:00",
        "venue": "Atrium Gallery",
        "organizer": "Fashion Events Coordinator",
        "status": EventStatus.DRAFT,
        "images": f"{IMAGE_BASE}/eb175ca7-fba2-4323-8332-37e2a3f82e83.png",
    },
    {
        "owner": UserRole.ADMIN,
        "title": "Wine Tasting Evening",
        "description": (
            "An exclusive wine tasting experience featuring rare vintages and "
            "expert sommeliers."
        ),
        "date": dt.date(2024, 11, 25),
        "time": "18:30",
        "venue": "Wine Cellar",
        "organizer": "Culinary Team",
        "status": EventStatus.PUBLISHED,
        "images": f"{IMAGE_BASE}/727c9912-898c-4716-9d88-32faa68c329b.png",
    },
)

DEMO_GUESTS = (
    ("John Smith", "john.smith@example.com", "+971-50-123-4567", RsvpStatus.CONFIRMED),
    ("Sarah Johnson", "sarah.johnson@example.com", "+971-50-234-5678", RsvpStatus.CONFIRMED),
    ("Michael Brown", "michael.brown@example.com", "+971-50-345-6789", RsvpStatus.PENDING),
)


def _event_start(event_data: dict) -> dt.datetime:
    return dt.datetime.combine(event_data["date"], dt.time(), tzinfo=dt.timezone.utc)


def build_demo_tasks(event_data: dict) -> list[Task]:
    """Two preparation tasks due before the event; done if the event is."""
    done = event_data["status"] == EventStatus.COMPLETED
    start = _event_start(event_data)
    return [
        Task(
            title="Setup venue decorations",
            description="Arrange floral displays and lighting according to event theme",
            due_date=start - dt.timedelta(days=1),
            status=TaskStatus.COMPLETED if done else TaskStatus.PENDING,
            assigned_to="Decoration Team",
        ),
        Task(
            title="Coordinate catering services",
            description="Ensure all dietary requirements are met and service timing is perfect",
            due_date=start - dt.timedelta(hours=12),
            status=TaskStatus.COMPLETED if done else TaskStatus.IN_PROGRESS,
            assigned_to="Catering Manager",
        ),
    ]


async def seed_users(session: AsyncSession, password_rounds: int | None = None) -> dict[UserRole, User]:
    """Create the demo accounts that do not exist yet."""
    repository = UserRepository(session)
    users: dict[UserRole, User] = {}
    for account in DEMO_ACCOUNTS:
        user = await repository.get_by_email(account.email)
        if user is None:
            user = await repository.create(
                User(
                    email=account.email,
                    name=account.name,
                    password_hash=hash_password(account.password, rounds=password_rounds),
                    role=account.role,
                )
            )
            logger.info("Demo user created", extra={"email": account.email, "role": account.role.value})
        users[account.role] = user
    return users


async def seed_events(session: AsyncSession, users: dict[UserRole, User]) -> int:
    """Create the demo events with their guests and tasks; returns how many were new."""
    created = 0
    for event_data in DEMO_EVENTS:
        owner = users[event_data["owner"]]
        existing = await session.execute(
            select(Event.id).where(Event.user_id == owner.id, Event.title == event_data["title"])
        )
        if existing.first() is not None:
            continue

        fields = {k: v for k, v in event_data.items() if k != "owner"}
        tasks = build_demo_tasks(event_data)
        for task in tasks:
            task.user_id = owner.id
        event = Event(
            **fields,
            user_id=owner.id,
            guests=[
                Guest(name=name, email=email, phone=phone, rsvp_status=rsvp)
                for name, email, phone, rsvp in DEMO_GUESTS
            ],
            tasks=tasks,
        )
        session.add(event)
        created += 1

    await session.flush()
    return created


async def run_seed(
    db_manager: DatabaseManager,
    reset: bool = False,
    password_rounds: int | None = None,
) -> int:
    """Seed the database behind ``db_manager``; returns the number of new events."""
    if reset:
        import eventdesk.models  # noqa: F401

        async with db_manager.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.info("Database tables dropped")
    await db_manager.create_all()

    async with db_manager.session() as session:
        users = await seed_users(session, password_rounds=password_rounds)
        created = await seed_events(session, users)

    logger.info("Demo data seeded", extra={"events_created": created})
    return created


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="eventdesk-seed", description="Load EventDesk demo accounts and events"
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop and recreate all tables before seeding.",
    )
    args = parser.parse_args(argv)

    setup_logging()
    db_manager = get_database_manager()

    async def _run() -> None:
        try:
            await run_seed(db_manager, reset=args.reset)
        finally:
            await db_manager.close()

    asyncio.run(_run())

    print("Demo login credentials:")
    for account in DEMO_ACCOUNTS:
        print(f"  {account.role.value.title()}: {account.email} / {account.password}")


if __name__ == "__main__":
    main()
