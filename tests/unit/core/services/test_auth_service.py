"""Unit tests for AuthService (src/linkhub/core/services/auth_service.py)."""

import uuid
from datetime import datetime, timezone

import pytest

from linkhub.config import Settings
from linkhub.core.exceptions import AuthError, NotFoundError, ValidationError
from linkhub.core.schemas.auth import LoginRequest, RegisterRequest
from linkhub.core.services import auth_service as auth_module
from linkhub.core.services.auth_service import AuthService
from linkhub.security import decode_access_token


class DummyUser:
    def __init__(self, **kwargs):
        defaults = dict(
            id=uuid.uuid4(),
            name="Alice",
            email="alice@example.com",
            bio=None,
            job_title=None,
            company=None,
            location=None,
            skills=[],
            role="member",
            profile_views=0,
            is_active=True,
            password_hash="hashed",
            created_at=datetime.now(timezone.utc),
        )
        defaults.update(kwargs)
        self.__dict__.update(defaults)

    def can_login(self):
        return self.is_active


class FakeUserRepo:
    def __init__(self, users=()):
        self.users = {u.email: u for u in users}
        self.created = []
        self.touched = []
        self.updates = []

    async def is_email_taken(self, email):
        return email in self.users

    async def create_user(self, user_data):
        user = DummyUser(**user_data)
        self.users[user.email] = user
        self.created.append(user_data)
        return user

    async def get_by_email(self, email):
        return self.users.get(email.strip().lower())

    async def get_active_by_id(self, user_id):
        for user in self.users.values():
            if user.id == user_id and user.is_active:
                return user
        return None

    async def update_user(self, user_id, data):
        self.updates.append(data)
        user = next(u for u in self.users.values() if u.id == user_id)
        user.__dict__.update(data)
        return user

    async def touch(self, user_id):
        self.touched.append(user_id)


@pytest.fixture
def fake_repo(monkeypatch):
    repo = FakeUserRepo()
    monkeypatch.setattr(auth_module, "UserRepository", lambda s: repo)
    monkeypatch.setattr(auth_module, "hash_password", lambda p: f"hashed:{p}")
    monkeypatch.setattr(auth_module, "verify_password", lambda p, h: h == f"hashed:{p}")
    monkeypatch.setattr(auth_module, "needs_update", lambda h: False)
    return repo


@pytest.mark.asyncio
async def test_register_user(fake_repo):
    svc = AuthService(session=None)
    res = await svc.register_user(
        RegisterRequest(name="Alice", email="Alice@Example.com", password="secret1")
    )

    assert res.user.email == "alice@example.com"
    assert res.user.role == "member"
    assert res.token_type == "bearer"
    assert fake_repo.created[0]["password_hash"] == "hashed:secret1"

    payload = await decode_access_token(res.token)
    assert payload["sub"] == str(res.user.id)


@pytest.mark.asyncio
async def test_register_duplicate_email(fake_repo):
    fake_repo.users["alice@example.com"] = DummyUser()
    svc = AuthService(session=None)
    with pytest.raises(ValidationError) as exc:
        await svc.register_user(
            RegisterRequest(name="Alice", email="alice@example.com", password="secret1")
        )
    assert exc.value.message == "User already exists"
    assert fake_repo.created == []


@pytest.mark.asyncio
async def test_register_admin_email_gets_admin_role(fake_repo):
    svc = AuthService(session=None)
    svc.settings = Settings(_env_file=None, admin_emails=["Boss@Example.com"])
    res = await svc.register_user(
        RegisterRequest(name="Boss", email="boss@example.com", password="secret1")
    )
    assert res.user.role == "admin"


@pytest.mark.asyncio
async def test_authenticate_success_touches_user(fake_repo):
    user = DummyUser(password_hash="hashed:secret1")
    fake_repo.users[user.email] = user
    svc = AuthService(session=None)

    res = await svc.authenticate_user(LoginRequest(email="alice@example.com", password="secret1"))
    assert res.user.id == user.id
    assert fake_repo.touched == [user.id]
    assert fake_repo.updates == []


@pytest.mark.asyncio
async def test_authenticate_rehashes_outdated_hash(fake_repo, monkeypatch):
    user = DummyUser(password_hash="hashed:secret1")
    fake_repo.users[user.email] = user
    monkeypatch.setattr(auth_module, "needs_update", lambda h: True)

    await AuthService(session=None).authenticate_user(
        LoginRequest(email="alice@example.com", password="secret1")
    )
    assert fake_repo.updates == [{"password_hash": "hashed:secret1"}]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email,password,active",
    [
        ("alice@example.com", "wrong", True),
        ("nobody@example.com", "secret1", True),
        ("alice@example.com", "secret1", False),
    ],
)
async def test_authenticate_failures_share_one_message(fake_repo, email, password, active):
    user = DummyUser(password_hash="hashed:secret1", is_active=active)
    fake_repo.users[user.email] = user

    with pytest.raises(AuthError) as exc:
        await AuthService(session=None).authenticate_user(
            LoginRequest(email=email, password=password)
        )
    assert exc.value.message == "Invalid credentials"
    assert fake_repo.touched == []


@pytest.mark.asyncio
async def test_get_current_user(fake_repo):
    user = DummyUser()
    fake_repo.users[user.email] = user
    svc = AuthService(session=None)

    assert (await svc.get_current_user(user.id)).email == "alice@example.com"
    with pytest.raises(NotFoundError):
        await svc.get_current_user(uuid.uuid4())


@pytest.mark.asyncio
async def test_logout_revokes_token(fake_repo, fake_redis):
    svc = AuthService(session=None)
    res = await svc.register_user(
        RegisterRequest(name="Alice", email="alice@example.com", password="secret1")
    )

    assert await svc.logout_user(res.user.id, res.token) is True
    assert await decode_access_token(res.token) is None
