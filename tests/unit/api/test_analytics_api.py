"""Tests for the analytics API router."""


async def test_dashboard_forbidden_for_members(async_client, auth_headers):
    resp = await async_client.get("/api/analytics/dashboard", headers=auth_headers)
    assert resp.status_code == 403
    assert resp.json() == {"message": "Admin access required", "error": None}


async def test_dashboard_for_admin(async_client, admin_user, test_user, headers_for):
    await async_client.post(
        "/api/posts", headers=headers_for(test_user), json={"content": "hello"}
    )

    resp = await async_client.get("/api/analytics/dashboard", headers=headers_for(admin_user))
    assert resp.status_code == 200
    data = resp.json()
    assert data["overview"]["totalUsers"] == 2
    assert data["overview"]["totalPosts"] == 1
    assert set(data["engagement"]) >= {"avgLikes", "totalLikes", "totalShares"}
    assert isinstance(data["userGrowth"], list)


async def test_dashboard_requires_auth(async_client):
    resp = await async_client.get("/api/analytics/dashboard")
    assert resp.status_code == 401


async def test_personal(async_client, auth_headers):
    await async_client.post("/api/posts", headers=auth_headers, json={"content": "hello"})

    resp = await async_client.get("/api/analytics/personal", headers=auth_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["summary"]["totalPosts"] == 1
    assert len(data["profileViews"]) == 7
    assert data["topPosts"][0]["content"] == "hello"
    assert data["engagementOverTime"][0]["postCount"] == 1
