"""
Shared pytest fixtures.

Every test gets a fresh in-memory SQLite database. API tests talk to the real
application through httpx's ASGI transport, with the database session
dependency pointed at that database.
"""

import datetime as dt
import os
from collections.abc import AsyncGenerator
from typing import Annotated, Any

# Cheap hashes for every code path that reads settings on its own.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-testing-only")

import pytest
import pytest_asyncio
from fastapi import Depends
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

import eventdesk.models  # noqa: F401
from eventdesk.auth.jwt import JWTService
from eventdesk.auth.middleware import CurrentUser, get_jwt_service
from eventdesk.auth.models import User, UserRole
from eventdesk.auth.passwords import hash_password
from eventdesk.auth.router import get_auth_service
from eventdesk.auth.service import AuthService
from eventdesk.config import Settings
from eventdesk.events.models import Event, EventStatus
from eventdesk.main import app
from eventdesk.shared.database import Base, build_engine, get_db_session

TEST_PASSWORD = "secret123"


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return Settings(
        app_env="dev",
        debug=False,
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret_key="test-secret-key-for-testing-only",
        jwt_access_token_expire_minutes=60,
        bcrypt_rounds=4,
    )


@pytest_asyncio.fixture
async def db_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Create test database engine with all tables."""
    engine = build_engine(test_settings.database_url)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_factory() as session:
        yield session


async def _create_user(
    session_factory: async_sessionmaker[AsyncSession],
    email: str,
    name: str,
    role: UserRole,
) -> User:
    async with session_factory() as session:
        user = User(
            email=email,
            name=name,
            password_hash=hash_password(TEST_PASSWORD, rounds=4),
            role=role,
        )
        session.add(user)
        await session.commit()
        await session.refresh(user)
        return user


@pytest_asyncio.fixture
async def admin_user(session_factory: async_sessionmaker[AsyncSession]) -> User:
    return await _create_user(session_factory, "admin@example.com", "Admin User", UserRole.ADMIN)


@pytest_asyncio.fixture
async def manager_user(session_factory: async_sessionmaker[AsyncSession]) -> User:
    return await _create_user(session_factory, "manager@example.com", "Event Manager", UserRole.MANAGER)


@pytest_asyncio.fixture
async def viewer_user(session_factory: async_sessionmaker[AsyncSession]) -> User:
    return await _create_user(session_factory, "viewer@example.com", "Event Viewer", UserRole.VIEWER)


def as_current_user(user: User) -> CurrentUser:
    return CurrentUser(id=user.id, email=user.email, name=user.name, role=user.role)


@pytest.fixture
def admin_actor(admin_user: User) -> CurrentUser:
    return as_current_user(admin_user)


@pytest.fixture
def manager_actor(manager_user: User) -> CurrentUser:
    return as_current_user(manager_user)


@pytest.fixture
def viewer_actor(viewer_user: User) -> CurrentUser:
    return as_current_user(viewer_user)


@pytest.fixture
def jwt_service(test_settings: Settings) -> JWTService:
    """Create JWT service with test settings."""
    return JWTService(settings=test_settings)


def bearer(jwt_service: JWTService, user: User) -> dict[str, str]:
    token = jwt_service.create_access_token(
        user_id=user.id,
        email=user.email,
        name=user.name,
        role=user.role.value,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(jwt_service: JWTService, admin_user: User) -> dict[str, str]:
    return bearer(jwt_service, admin_user)


@pytest.fixture
def manager_headers(jwt_service: JWTService, manager_user: User) -> dict[str, str]:
    return bearer(jwt_service, manager_user)


@pytest.fixture
def viewer_headers(jwt_service: JWTService, viewer_user: User) -> dict[str, str]:
    return bearer(jwt_service, viewer_user)


@pytest.fixture
def make_event(session_factory: async_sessionmaker[AsyncSession]):
    """Factory inserting an event directly, bypassing the API."""

    async def _make_event(owner: User, **overrides: Any) -> Event:
        fields: dict[str, Any] = {
            "title": "Summer Reception",
            "description": "Drinks on the terrace",
            "date": dt.datetime.now(dt.timezone.utc).date() + dt.timedelta(days=30),
            "time": "18:00",
            "venue": "Rooftop Terrace",
            "organizer": "Events Team",
            "status": EventStatus.DRAFT,
        }
        fields.update(overrides)
        async with session_factory() as session:
            event = Event(**fields, user_id=owner.id, guests=[], tasks=[])
            session.add(event)
            await session.commit()
            await session.refresh(event)
            return event

    return _make_event


@pytest.fixture
def gala_payload() -> dict[str, Any]:
    return {
        "title": "Gala",
        "date": "2025-12-15",
        "time": "19:00",
        "venue": "Grand Ballroom",
        "organizer": "Team",
    }


@pytest_asyncio.fixture
async def async_client(
    session_factory: async_sessionmaker[AsyncSession],
    jwt_service: JWTService,
    test_settings: Settings,
) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API tests."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    def override_get_auth_service(
        session: Annotated[AsyncSession, Depends(get_db_session)],
    ) -> AuthService:
        return AuthService(session=session, settings=test_settings, jwt_service=jwt_service)

    app.dependency_overrides[get_db_session] = override_get_db
    app.dependency_overrides[get_jwt_service] = lambda: jwt_service
    app.dependency_overrides[get_auth_service] = override_get_auth_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
