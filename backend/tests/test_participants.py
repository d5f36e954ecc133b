"""
Tests for event registration and participant listings.
"""

import pytest
from httpx import AsyncClient

from app.core.config import get_settings
from app.services.participation_service import register_for_event


@pytest.mark.asyncio
async def test_register_for_event(client: AsyncClient, test_event, other_headers):
    response = await client.post(f"/api/events/{test_event.id}/register", headers=other_headers)
    assert response.status_code == 200
    assert response.text == "Registered for event successfully"


@pytest.mark.asyncio
async def test_register_unauthenticated(client: AsyncClient, test_event):
    response = await client.post(f"/api/events/{test_event.id}/register")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_register_for_missing_event_is_accepted(client: AsyncClient, other_headers):
    """No existence check: the row is stored but never joins to an event."""
    response = await client.post("/api/events/424242/register", headers=other_headers)
    assert response.status_code == 200

    mine = await client.get("/api/events/my-registrations", headers=other_headers)
    assert mine.json() == []


@pytest.mark.asyncio
async def test_my_registrations(client: AsyncClient, test_event, other_headers):
    await client.post(f"/api/events/{test_event.id}/register", headers=other_headers)

    response = await client.get("/api/events/my-registrations", headers=other_headers)
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["id"] == test_event.id
    assert data[0]["title"] == "Test Concert"


@pytest.mark.asyncio
async def test_my_registrations_requires_token(client: AsyncClient):
    response = await client.get("/api/events/my-registrations")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_duplicate_registration_allowed_by_default(client: AsyncClient, test_event, other_headers):
    """Default policy stores every registration."""
    for _ in range(2):
        response = await client.post(f"/api/events/{test_event.id}/register", headers=other_headers)
        assert response.status_code == 200

    mine = await client.get("/api/events/my-registrations", headers=other_headers)
    assert [e["id"] for e in mine.json()] == [test_event.id, test_event.id]


@pytest.mark.asyncio
async def test_duplicate_registration_rejected_by_policy(
    client: AsyncClient, test_event, other_headers, monkeypatch
):
    monkeypatch.setattr(get_settings(), "DUPLICATE_REGISTRATION_POLICY", "reject")

    first = await client.post(f"/api/events/{test_event.id}/register", headers=other_headers)
    second = await client.post(f"/api/events/{test_event.id}/register", headers=other_headers)
    assert first.status_code == 200
    assert second.status_code == 409


@pytest.mark.asyncio
async def test_duplicate_registration_ignored_by_policy(db_session, test_event, other_user):
    first = await register_for_event(db_session, test_event.id, other_user.id, policy="ignore")
    second = await register_for_event(db_session, test_event.id, other_user.id, policy="ignore")

    assert first.id == second.id
    assert first.status == "registered"
    assert first.registration_date is not None


@pytest.mark.asyncio
async def test_participants_visible_to_owner(
    client: AsyncClient, test_user, other_user, test_event, auth_headers, other_headers
):
    """The owner sees exactly the registered users, id/name/email only."""
    await client.post(f"/api/events/{test_event.id}/register", headers=other_headers)
    await client.post(f"/api/events/{test_event.id}/register", headers=auth_headers)

    response = await client.get(f"/api/events/{test_event.id}/participants", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == [
        {"id": other_user.id, "name": "Bob", "email": "bob@example.com"},
        {"id": test_user.id, "name": "Alice", "email": "alice@example.com"},
    ]


@pytest.mark.asyncio
async def test_participants_forbidden_for_non_owner(client: AsyncClient, test_event, other_headers):
    await client.post(f"/api/events/{test_event.id}/register", headers=other_headers)

    response = await client.get(f"/api/events/{test_event.id}/participants", headers=other_headers)
    assert response.status_code == 403
    assert response.json()["detail"] == "You are not authorized to view participants of this event"


@pytest.mark.asyncio
async def test_participants_of_missing_event_forbidden(client: AsyncClient, auth_headers):
    response = await client.get("/api/events/99999/participants", headers=auth_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_deleting_event_keeps_registrations_out_of_listings(
    client: AsyncClient, test_event, auth_headers, other_headers
):
    """Participations are not cascaded; they just stop joining to an event."""
    await client.post(f"/api/events/{test_event.id}/register", headers=other_headers)
    await client.delete(f"/api/events/{test_event.id}", headers=auth_headers)

    mine = await client.get("/api/events/my-registrations", headers=other_headers)
    assert mine.status_code == 200
    assert mine.json() == []
