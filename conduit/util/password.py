"""Password hashing utilities.

Passwords are stored as a random salt and a PBKDF2-HMAC-SHA512 digest of
the password keyed with that salt. The KDF parameters are fixed: changing
any of them invalidates every stored credential.
"""

import hashlib
import hmac
import secrets

from pydantic import BaseModel

KDF_ALGORITHM = "sha512"
KDF_ITERATIONS = 10000
KDF_KEY_LENGTH = 512
SALT_BYTES = 16


class PasswordCredentials(BaseModel):
    """Salt and hash pair stored for a user."""

    salt: str
    hash: str


def _derive(password: str, salt: str) -> str:
    return hashlib.pbkdf2_hmac(
        KDF_ALGORITHM,
        password.encode("utf-8"),
        salt.encode("utf-8"),
        KDF_ITERATIONS,
        dklen=KDF_KEY_LENGTH,
    ).hex()


def hash_password(password: str) -> PasswordCredentials:
    """Derive credentials for a plaintext password with a fresh salt.

    Args:
        password: Plaintext password

    Returns:
        Hex-encoded salt and hash

    Raises:
        TypeError: If password is not a string
    """
    if not isinstance(password, str):
        raise TypeError("password must be a string")

    salt = secrets.token_bytes(SALT_BYTES).hex()
    return PasswordCredentials(salt=salt, hash=_derive(password, salt))


def verify_password(password: str, salt: str | None, stored_hash: str | None) -> bool:
    """Check a plaintext password against stored credentials.

    Args:
        password: Plaintext password to check
        salt: Stored hex salt
        stored_hash: Stored hex hash

    Returns:
        True if the password matches, False otherwise (including when
        salt or hash are missing)

    Raises:
        TypeError: If password is not a string
    """
    if not isinstance(password, str):
        raise TypeError("password must be a string")
    if not salt or not stored_hash:
        return False

    return hmac.compare_digest(
        _derive(password, salt).encode("ascii"),
        stored_hash.encode("ascii", errors="replace"),
    )
