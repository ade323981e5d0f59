"""
Unit tests for password digests, tokens and the admin key check
"""
import hashlib

import pytest

from storefront.core.security import (
    generate_token,
    hash_password,
    is_admin_key_valid,
    verify_password,
)


class TestPasswords:

    def test_hash_is_deterministic_sha256_hex(self):
        assert hash_password("fish") == hashlib.sha256(b"fish").hexdigest()
        assert hash_password("fish") == hash_password("fish")

    def test_verify_password(self):
        digest = hash_password("fish")

        assert verify_password("fish", digest) is True
        assert verify_password("Fish", digest) is False
        assert verify_password("fish", "") is False


class TestTokens:

    def test_tokens_are_unique_hex(self):
        tokens = {generate_token() for _ in range(100)}

        assert len(tokens) == 100
        assert all(len(token) == 64 for token in tokens)


class TestAdminKey:

    @pytest.mark.parametrize("expected, provided, allowed", [
        ("secret", "secret", True),
        ("secret", "wrong", False),
        ("secret", "", False),
        ("secret", None, False),
        ("secret", "secret ", False),
        ("", "", False),
        ("", None, False),
        (None, None, False),
    ])
    def test_is_admin_key_valid(self, expected, provided, allowed):
        assert is_admin_key_valid(expected, provided) is allowed
