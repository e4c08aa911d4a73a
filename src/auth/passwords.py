import hashlib
import hmac
import os

SALT_BYTES = 16  # 128 bits


def _digest(password: str, salt: str) -> str:
    # the hex salt string itself is the HMAC key
    return hmac.new(
        salt.encode("utf-8"),
        password.encode("utf-8"),
        hashlib.sha256
    ).hexdigest()


def hash_password(password: str) -> tuple[str, str]:
    """
    Returns (salt, hash), both hex encoded.
    A fresh salt is drawn on every call.
    """
    salt = os.urandom(SALT_BYTES).hex()
    return salt, _digest(password, salt)


def verify_password(password: str, salt: str, expected_hash: str) -> bool:
    check = _digest(password, salt)
    return hmac.compare_digest(check, expected_hash)
