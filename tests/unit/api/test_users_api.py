"""Tests for the users API router."""

import uuid
from datetime import timedelta

from linkhub.security.jwt import create_access_token


async def test_public_profile_without_login(async_client, test_user):
    resp = await async_client.get(f"/api/users/{test_user.id}")
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Alice Example"
    assert data["profileViews"] == 1
    assert data["connectionCount"] == 0
    assert "email" not in data


async def test_owner_viewing_own_profile_is_not_counted(async_client, test_user, auth_headers):
    resp = await async_client.get(f"/api/users/{test_user.id}", headers=auth_headers)
    assert resp.json()["profileViews"] == 0


async def test_public_profile_with_expired_token_counts_as_anonymous(
    async_client, test_user, other_user
):
    stale = create_access_token({"sub": str(other_user.id)}, expires_delta=timedelta(seconds=-5))

    resp = await async_client.get(
        f"/api/users/{test_user.id}", headers={"Authorization": f"Bearer {stale}"}
    )
    assert resp.status_code == 200
    assert resp.json()["profileViews"] == 1


async def test_unknown_profile_404(async_client):
    resp = await async_client.get(f"/api/users/{uuid.uuid4()}")
    assert resp.status_code == 404
    assert resp.json()["message"] == "User not found"


async def test_malformed_user_id_400(async_client):
    resp = await async_client.get("/api/users/not-a-uuid")
    assert resp.status_code == 400


async def test_update_profile(async_client, auth_headers):
    resp = await async_client.put(
        "/api/users/profile",
        headers=auth_headers,
        json={"jobTitle": "Staff Engineer", "skills": ["Python", "SQL"]},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["jobTitle"] == "Staff Engineer"
    assert data["skills"] == ["Python", "SQL"]
    assert data["name"] == "Alice Example"


async def test_update_profile_requires_auth(async_client):
    resp = await async_client.put("/api/users/profile", json={"bio": "x"})
    assert resp.status_code == 401


async def test_connect_and_accept(async_client, test_user, other_user, headers_for):
    resp = await async_client.post(
        f"/api/users/{other_user.id}/connect", headers=headers_for(test_user)
    )
    assert resp.status_code == 201
    assert resp.json()["status"] == "pending"
    assert resp.json()["isRequester"] is True
    assert resp.json()["user"]["id"] == str(other_user.id)

    resp = await async_client.put(
        f"/api/users/connections/{test_user.id}/accept", headers=headers_for(other_user)
    )
    assert resp.status_code == 200
    assert resp.json()["status"] == "accepted"

    resp = await async_client.get(
        "/api/users/connections", params={"status": "accepted"}, headers=headers_for(test_user)
    )
    assert [c["user"]["name"] for c in resp.json()] == ["Bob Example"]


async def test_connect_to_self_400(async_client, test_user, auth_headers):
    resp = await async_client.post(f"/api/users/{test_user.id}/connect", headers=auth_headers)
    assert resp.status_code == 400


async def test_accept_missing_request_404(async_client, other_user, auth_headers):
    resp = await async_client.put(
        f"/api/users/connections/{other_user.id}/accept", headers=auth_headers
    )
    assert resp.status_code == 404


async def test_connections_bad_status_filter_400(async_client, auth_headers):
    resp = await async_client.get(
        "/api/users/connections", params={"status": "blocked"}, headers=auth_headers
    )
    assert resp.status_code == 400
