"""
API tests for registration, login and the current-user endpoint.
"""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest
from fastapi import status
from httpx import AsyncClient
from sqlalchemy import select

from eventdesk.auth.models import User, UserRole
from eventdesk.auth.service import AuthService
from eventdesk.auth.schemas import RegisterRequest
from eventdesk.config import Settings
from eventdesk.shared.exceptions import ConflictError

TEST_PASSWORD = "secret123"


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_creates_viewer(self, async_client: AsyncClient, session_factory) -> None:
        response = await async_client.post(
            "/api/auth/register",
            json={"email": "New.User@Example.com", "name": " New User ", "password": "abcdef"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["email"] == "new.user@example.com"
        assert data["name"] == "New User"
        assert data["role"] == "VIEWER"
        assert "createdAt" in data
        assert "password" not in data and "passwordHash" not in data

        async with session_factory() as session:
            user = (await session.execute(select(User))).scalar_one()
        assert user.password_hash != "abcdef"

    @pytest.mark.asyncio
    async def test_requested_role_ignored_by_default(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/auth/register",
            json={"email": "boss@example.com", "name": "Boss", "password": "abcdef", "role": "ADMIN"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["role"] == "VIEWER"

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(
        self,
        async_client: AsyncClient,
        manager_user: User,
    ) -> None:
        response = await async_client.post(
            "/api/auth/register",
            json={"email": "MANAGER@example.com", "name": "Again", "password": "abcdef"},
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["detail"]["code"] == "EMAIL_TAKEN"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "a@example.com", "name": "A", "password": "12345"},
            {"email": "not-an-email", "name": "A", "password": "abcdef"},
            {"email": "a@example.com", "name": "   ", "password": "abcdef"},
            {"email": "a@example.com", "password": "abcdef"},
        ],
    )
    async def test_invalid_payload(self, async_client: AsyncClient, payload: dict) -> None:
        response = await async_client.post("/api/auth/register", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"]["code"] == "VALIDATION_ERROR"


class TestRegisterService:
    @pytest.mark.asyncio
    async def test_role_selection_when_enabled(self, db_session, test_settings: Settings) -> None:
        settings = test_settings.model_copy(update={"allow_registration_role_selection": True})
        service = AuthService(session=db_session, settings=settings)

        profile = await service.register(
            RegisterRequest(email="m@example.com", name="M", password="abcdef", role=UserRole.MANAGER)
        )

        assert profile.role == UserRole.MANAGER

    @pytest.mark.asyncio
    async def test_duplicate_raises_conflict(self, db_session, test_settings: Settings) -> None:
        service = AuthService(session=db_session, settings=test_settings)
        await service.register(RegisterRequest(email="x@example.com", name="X", password="abcdef"))

        with pytest.raises(ConflictError):
            await service.register(RegisterRequest(email="X@example.com", name="X2", password="abcdef"))


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_success(self, async_client: AsyncClient, manager_user: User) -> None:
        response = await async_client.post(
            "/api/auth/login",
            json={"email": "manager@example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["token_type"] == "Bearer"
        assert data["expires_in"] == 60 * 60
        assert data["user"]["id"] == str(manager_user.id)
        assert data["user"]["role"] == "MANAGER"

        me = await async_client.get(
            "/api/auth/me",
            headers={"Authorization": f"Bearer {data['access_token']}"},
        )
        assert me.status_code == status.HTTP_200_OK
        assert me.json()["email"] == "manager@example.com"

    @pytest.mark.asyncio
    async def test_email_is_case_insensitive(self, async_client: AsyncClient, manager_user: User) -> None:
        response = await async_client.post(
            "/api/auth/login",
            json={"email": "Manager@Example.com", "password": TEST_PASSWORD},
        )

        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.asyncio
    async def test_unknown_email_and_wrong_password_look_the_same(
        self,
        async_client: AsyncClient,
        manager_user: User,
    ) -> None:
        wrong_password = await async_client.post(
            "/api/auth/login",
            json={"email": "manager@example.com", "password": "wrong-password"},
        )
        unknown_email = await async_client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": TEST_PASSWORD},
        )

        assert wrong_password.status_code == status.HTTP_401_UNAUTHORIZED
        assert unknown_email.status_code == status.HTTP_401_UNAUTHORIZED
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["detail"]["message"] == "Invalid email or password"


class TestCurrentUser:
    @pytest.mark.asyncio
    async def test_missing_token(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/auth/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"]["code"] == "MISSING_TOKEN"

    @pytest.mark.asyncio
    async def test_invalid_token(self, async_client: AsyncClient) -> None:
        response = await async_client.get(
            "/api/auth/me",
            headers={"Authorization": "Bearer not.a.token"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"]["code"] == "INVALID_TOKEN"

    @pytest.mark.asyncio
    async def test_expired_token(
        self,
        async_client: AsyncClient,
        manager_user: User,
        test_settings: Settings,
    ) -> None:
        now = datetime.now(timezone.utc)
        token = pyjwt.encode(
            {
                "sub": str(manager_user.id),
                "email": manager_user.email,
                "name": manager_user.name,
                "role": "MANAGER",
                "type": "access",
                "iat": now - timedelta(hours=2),
                "exp": now - timedelta(hours=1),
            },
            test_settings.jwt_secret_key,
            algorithm=test_settings.jwt_algorithm,
        )

        response = await async_client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"]["code"] == "TOKEN_EXPIRED"
