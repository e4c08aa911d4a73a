import hashlib
import hmac

import pytest

from auth.passwords import hash_password, verify_password

PASSWORDS = ["pw1", "mypassword", "secret123", "ünïcödé ✓", " spaces inside ", "x" * 500]


@pytest.mark.parametrize("password", PASSWORDS)
def test_hash_then_verify(password):
    salt, pw_hash = hash_password(password)
    assert verify_password(password, salt, pw_hash), "Password must verify against its own hash"


@pytest.mark.parametrize("password", PASSWORDS)
def test_other_password_rejected(password):
    salt, pw_hash = hash_password(password)
    assert not verify_password(password + "!", salt, pw_hash)
    assert not verify_password("", salt, pw_hash)


def test_salt_is_128_bit_hex():
    salt, pw_hash = hash_password("pw1")
    assert len(salt) == 32
    int(salt, 16)
    # sha256 hex digest
    assert len(pw_hash) == 64


def test_fresh_salt_per_call():
    first = hash_password("same")
    second = hash_password("same")
    assert first[0] != second[0], "Each call must draw a new salt"
    assert first[1] != second[1]


def test_deterministic_for_given_salt():
    salt, pw_hash = hash_password("pw1")
    assert verify_password("pw1", salt, pw_hash)
    assert not verify_password("pw1", "00" * 16, pw_hash)


def test_matches_hmac_sha256_keyed_with_hex_salt():
    # existing documents store HMAC-SHA256(key=hex salt, msg=password)
    salt = "000102030405060708090a0b0c0d0e0f"
    expected = hmac.new(salt.encode(), b"hunter2", hashlib.sha256).hexdigest()
    assert verify_password("hunter2", salt, expected)
