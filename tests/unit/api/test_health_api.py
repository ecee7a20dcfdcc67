"""Tests for the health and root endpoints."""


async def test_root(async_client):
    resp = await async_client.get("/")
    assert resp.json() == {"message": "LinkHub API"}


async def test_api_root_lists_endpoints(async_client):
    resp = await async_client.get("/api/")
    data = resp.json()
    assert data["version"] == "1.0.0"
    assert data["endpoints"]["posts"] == "/api/posts"


async def test_health_without_redis_is_degraded(async_client):
    resp = await async_client.get("/api/health/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "degraded"
    assert data["checks"]["database"]["connected"] is True


async def test_health_with_redis(async_client, fake_redis):
    resp = await async_client.get("/api/health/")
    assert resp.json()["status"] == "healthy"


async def test_component_checks(async_client):
    db = await async_client.get("/api/health/database")
    assert db.json()["status"] == "healthy"

    redis = await async_client.get("/api/health/redis")
    assert redis.json() == {"connected": False, "status": "unavailable"}
