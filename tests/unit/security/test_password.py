"""
Unit tests for password hashing.
"""

from linkhub.security.password import hash_password, needs_update, verify_password


def test_hash_and_verify():
    hashed = hash_password("correct horse battery staple")
    assert hashed != "correct horse battery staple"
    assert verify_password("correct horse battery staple", hashed)
    assert not verify_password("wrong", hashed)


def test_hashes_are_salted():
    assert hash_password("same") != hash_password("same")


def test_long_passwords_are_not_truncated():
    base = "a" * 80
    hashed = hash_password(base + "1")
    # plain bcrypt would ignore everything past 72 bytes
    assert not verify_password(base + "2", hashed)


def test_fresh_hash_needs_no_update():
    assert needs_update(hash_password("pw123456")) is False


def test_unrecognised_hash_never_matches():
    assert verify_password("anything", "not-a-hash") is False
    assert verify_password("", "") is False
