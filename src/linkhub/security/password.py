"""Password hashing for LinkHub accounts.

Hashes use passlib's ``bcrypt_sha256``: the password is pre-hashed with
SHA-256, so characters past bcrypt's 72-byte limit still count.
"""

from passlib.context import CryptContext

from ..config import get_settings

pwd_context = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
    bcrypt_sha256__rounds=get_settings().password_hash_rounds,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a login attempt. Unrecognised stored hashes never match."""
    if not pwd_context.identify(hashed_password):
        return False
    return pwd_context.verify(plain_password, hashed_password)


def needs_update(hashed_password: str) -> bool:
    """True when the stored hash was made with outdated settings and should be redone."""
    return pwd_context.needs_update(hashed_password)
