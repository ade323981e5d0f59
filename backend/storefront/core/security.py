"""
Password digests, session tokens and shared-secret checks
"""
import hashlib
import hmac
import secrets
from typing import Optional

SESSION_TOKEN_BYTES = 32


def hash_password(password: str) -> str:
    """
    Hash a password using SHA-256 (hex digest).

    Unsalted and deterministic so digests stay compatible with users.json
    files written by earlier deployments. Not a password-hardening KDF.
    """
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison of a password against a stored digest"""
    return hmac.compare_digest(hash_password(password), password_hash or "")


def generate_token() -> str:
    """
    Issue an opaque session token (64 hex chars).

    Tokens are handed to the client only; nothing stores or checks them.
    """
    return secrets.token_hex(SESSION_TOKEN_BYTES)


def is_admin_key_valid(expected: Optional[str], provided: Optional[str]) -> bool:
    """
    Check a provided admin key against the configured one.

    An unset or empty configured key denies everything.
    """
    if not expected or not provided:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))
