"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os
from typing import Optional

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Tell app lifespan to skip real DB init
os.environ.setdefault("LINKHUB_SKIP_LIFESPAN_DB", "1")
# Cheap hashes keep the suite fast
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")

from linkhub.core import models  # noqa: E402,F401
from linkhub.core.models.base import BaseModel  # noqa: E402
from linkhub.core.models.user import User, UserRole  # noqa: E402
from linkhub.core.redis_client import get_redis_client  # noqa: E402
from linkhub.database import get_db_session  # noqa: E402
from linkhub.main import app  # noqa: E402
from linkhub.security.jwt import create_access_token  # noqa: E402
from linkhub.security.password import hash_password  # noqa: E402

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_PASSWORD = "TestPassword123!"


@pytest.fixture
async def test_engine():
    """Fresh SQLite in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite only enforces foreign keys (CASCADE/SET NULL) when asked to
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest.fixture
async def test_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def test_app(session_factory):
    """App with the DB dependency pointed at the test database."""

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Async HTTP client running in the test's event loop."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_user(test_session):
    """Factory creating users directly in the database."""
    counter = {"n": 0}

    async def _make_user(
        name: str = "Test User",
        email: Optional[str] = None,
        role: UserRole = UserRole.MEMBER,
        is_active: bool = True,
        **fields,
    ) -> User:
        counter["n"] += 1
        user = User(
            name=name,
            email=email or f"user{counter['n']}@example.com",
            password_hash=hash_password(TEST_PASSWORD),
            role=role.value,
            is_active=is_active,
            skills=fields.pop("skills", []),
            **fields,
        )
        test_session.add(user)
        await test_session.commit()
        await test_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
async def test_user(make_user):
    return await make_user(name="Alice Example", email="alice@example.com")


@pytest.fixture
async def other_user(make_user):
    return await make_user(name="Bob Example", email="bob@example.com")


@pytest.fixture
async def admin_user(make_user):
    return await make_user(name="Site Admin", email="admin@example.com", role=UserRole.ADMIN)


def bearer(user: User) -> dict:
    """Authorization header for ``user``. Built per request, never shared."""
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(test_user):
    return bearer(test_user)


class FakePipeline:
    def __init__(self, redis):
        self.redis = redis
        self.calls = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def zincrby(self, key, amount, member):
        self.calls.append(("zincrby", key, amount, member))
        return self

    def expire(self, key, seconds):
        self.calls.append(("expire", key, seconds))
        return self

    async def execute(self):
        results = []
        for name, *args in self.calls:
            results.append(await getattr(self.redis, name)(*args))
        self.calls = []
        return results


class FakeRedis:
    """In-memory stand-in for the handful of redis.asyncio calls the app makes."""

    def __init__(self):
        self.storage = {}
        self.zsets = {}
        self.ttls = {}

    async def ping(self):
        return True

    async def get(self, key):
        return self.storage.get(key)

    async def set(self, key, value):
        self.storage[key] = value
        return True

    async def setex(self, key, seconds, value):
        self.storage[key] = value
        self.ttls[key] = seconds
        return True

    async def delete(self, key):
        return 1 if self.storage.pop(key, None) is not None else 0

    async def exists(self, key):
        return 1 if key in self.storage or key in self.zsets else 0

    async def zincrby(self, key, amount, member):
        zset = self.zsets.setdefault(key, {})
        zset[member] = zset.get(member, 0) + amount
        return zset[member]

    async def expire(self, key, seconds):
        self.ttls[key] = seconds
        return True

    async def zunion(self, keys, withscores=False):
        merged = {}
        for key in keys:
            for member, score in self.zsets.get(key, {}).items():
                merged[member] = merged.get(member, 0) + score
        rows = sorted(merged.items(), key=lambda r: r[1])
        return [(m, float(s)) for m, s in rows] if withscores else [m for m, _ in rows]

    def pipeline(self):
        return FakePipeline(self)

    async def aclose(self):
        return None


@pytest.fixture
def fake_redis():
    """Attach an in-memory Redis to the shared client for one test."""
    client = get_redis_client()
    previous = client.redis
    client.redis = FakeRedis()
    try:
        yield client.redis
    finally:
        client.redis = previous


@pytest.fixture
def headers_for():
    return bearer
