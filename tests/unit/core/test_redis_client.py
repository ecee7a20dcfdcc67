"""Unit tests for RedisClient behaviour with and without a connection."""

from datetime import datetime, timezone

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from linkhub.core import redis_client as redis_module
from linkhub.core.redis_client import RedisClient, normalize_query


class BrokenRedis:
    async def exists(self, key):
        raise RedisConnectionError("gone")

    async def zunion(self, keys, withscores=False):
        raise RedisConnectionError("gone")


@pytest.fixture
def client(fake_redis):
    c = RedisClient()
    c.redis = fake_redis
    return c


def test_normalize_query():
    assert normalize_query("  React   Developer ") == "react developer"
    assert normalize_query("x" * 300) == "x" * 100


async def test_disconnected_client_is_a_no_op():
    c = RedisClient()
    assert not c.is_connected
    assert await c.get("k") is None
    assert await c.set("k", "v") is False
    assert await c.exists("k") is False
    assert await c.record_search_query("react") is False
    assert await c.get_trending(5) == []


async def test_set_get_delete(client):
    assert await client.set("k", "v") is True
    assert await client.get("k") == "v"
    assert await client.exists("k") is True
    assert await client.delete("k") is True
    assert await client.exists("k") is False


async def test_set_with_expiry_uses_setex(client):
    await client.set("k", "v", expire=30)
    assert client.redis.ttls["k"] == 30


async def test_blacklist(client):
    assert not await client.is_token_blacklisted("jti-1")
    await client.add_to_blacklist("jti-1", 60)
    assert await client.is_token_blacklisted("jti-1")


async def test_record_search_goes_into_hourly_bucket(client):
    await client.record_search_query("  Python ")

    key = RedisClient._bucket_key(datetime.now(timezone.utc))
    assert key.startswith("search:trending:")
    assert client.redis.zsets[key] == {"python": 1}
    assert client.redis.ttls[key] == client.settings.trending_window_hours * 3600


async def test_blank_query_not_recorded(client):
    assert await client.record_search_query("   ") is False
    assert client.redis.zsets == {}


async def test_trending_merges_window_and_ranks(client):
    now = datetime.now(timezone.utc)
    current, previous = client._window_keys(now)[:2]
    client.redis.zsets[current] = {"go": 2, "rust": 1}
    client.redis.zsets[previous] = {"rust": 2, "java": 3}
    client.redis.zsets["search:trending:1999010100"] = {"cobol": 50}

    assert await client.get_trending(10) == [("java", 3), ("rust", 3), ("go", 2)]
    assert await client.get_trending(1) == [("java", 3)]


def test_window_covers_configured_hours(client):
    keys = client._window_keys(datetime(2024, 1, 2, 1, tzinfo=timezone.utc))
    assert len(keys) == client.settings.trending_window_hours
    assert keys[0] == "search:trending:2024010201"
    assert keys[2] == "search:trending:2024010123"


async def test_errors_degrade_gracefully():
    c = RedisClient()
    c.redis = BrokenRedis()
    assert await c.is_token_blacklisted("jti") is False
    assert await c.get_trending(5) == []


def test_singleton():
    assert redis_module.get_redis_client() is redis_module.get_redis_client()
