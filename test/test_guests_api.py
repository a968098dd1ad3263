"""
API tests for guest endpoints.
"""

from uuid import uuid4

import pytest
from fastapi import status
from httpx import AsyncClient

from eventdesk.auth.models import User


class TestGuests:
    @pytest.mark.asyncio
    async def test_add_and_list_guests(
        self,
        async_client: AsyncClient,
        manager_user: User,
        manager_headers: dict[str, str],
        make_event,
    ) -> None:
        event = await make_event(manager_user)
        base = f"/api/events/{event.id}/guests"

        created = await async_client.post(
            base,
            json={"name": "Sarah Johnson", "email": "sarah.johnson@example.com", "phone": "+971-50-234-5678"},
            headers=manager_headers,
        )
        await async_client.post(
            base,
            json={"name": "John Smith", "rsvpStatus": "CONFIRMED"},
            headers=manager_headers,
        )

        assert created.status_code == status.HTTP_201_CREATED
        guest = created.json()
        assert guest["rsvpStatus"] == "PENDING"
        assert guest["eventId"] == str(event.id)

        listed = await async_client.get(base, headers=manager_headers)
        data = listed.json()
        assert [g["name"] for g in data["guests"]] == ["John Smith", "Sarah Johnson"]
        assert data["pagination"]["total"] == 2

        confirmed = await async_client.get(f"{base}?rsvpStatus=CONFIRMED", headers=manager_headers)
        assert [g["name"] for g in confirmed.json()["guests"]] == ["John Smith"]

        event_view = await async_client.get(f"/api/events/{event.id}", headers=manager_headers)
        assert len(event_view.json()["guests"]) == 2

    @pytest.mark.asyncio
    async def test_record_rsvp(
        self,
        async_client: AsyncClient,
        manager_user: User,
        manager_headers: dict[str, str],
        make_event,
    ) -> None:
        event = await make_event(manager_user)
        guest = (
            await async_client.post(
                f"/api/events/{event.id}/guests", json={"name": "Ann"}, headers=manager_headers
            )
        ).json()

        response = await async_client.put(
            f"/api/events/{event.id}/guests/{guest['id']}",
            json={"rsvpStatus": "DECLINED"},
            headers=manager_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["rsvpStatus"] == "DECLINED"
        assert response.json()["name"] == "Ann"

    @pytest.mark.asyncio
    async def test_remove_guest(
        self,
        async_client: AsyncClient,
        manager_user: User,
        manager_headers: dict[str, str],
        make_event,
    ) -> None:
        event = await make_event(manager_user)
        guest = (
            await async_client.post(
                f"/api/events/{event.id}/guests", json={"name": "Ann"}, headers=manager_headers
            )
        ).json()
        url = f"/api/events/{event.id}/guests/{guest['id']}"

        deleted = await async_client.delete(url, headers=manager_headers)
        fetched = await async_client.get(url, headers=manager_headers)

        assert deleted.status_code == status.HTTP_204_NO_CONTENT
        assert fetched.status_code == status.HTTP_404_NOT_FOUND
        assert fetched.json()["detail"]["code"] == "GUEST_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_viewer_reads_but_cannot_add(
        self,
        async_client: AsyncClient,
        viewer_user: User,
        viewer_headers: dict[str, str],
        make_event,
    ) -> None:
        event = await make_event(viewer_user)
        base = f"/api/events/{event.id}/guests"

        listed = await async_client.get(base, headers=viewer_headers)
        added = await async_client.post(base, json={"name": "Ann"}, headers=viewer_headers)

        assert listed.status_code == status.HTTP_200_OK
        assert added.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.asyncio
    async def test_guests_of_foreign_event_are_hidden(
        self,
        async_client: AsyncClient,
        admin_user: User,
        manager_headers: dict[str, str],
        make_event,
    ) -> None:
        event = await make_event(admin_user)

        listed = await async_client.get(f"/api/events/{event.id}/guests", headers=manager_headers)
        added = await async_client.post(
            f"/api/events/{event.id}/guests", json={"name": "Ann"}, headers=manager_headers
        )

        assert listed.status_code == status.HTTP_404_NOT_FOUND
        assert added.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_unknown_event(self, async_client: AsyncClient, manager_headers: dict[str, str]) -> None:
        response = await async_client.get(f"/api/events/{uuid4()}/guests", headers=manager_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["code"] == "EVENT_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_invalid_guest_email(
        self,
        async_client: AsyncClient,
        manager_user: User,
        manager_headers: dict[str, str],
        make_event,
    ) -> None:
        event = await make_event(manager_user)

        response = await async_client.post(
            f"/api/events/{event.id}/guests",
            json={"name": "Ann", "email": "not-an-email"},
            headers=manager_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
