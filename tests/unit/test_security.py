"""인증/입력 검증 테스트"""
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from tradelink.core.config import settings
from tradelink.core.exceptions import (
    AuthenticationException,
    AuthorizationException,
    InvalidIdentifierException,
)
from tradelink.core.logging import sanitize_for_log
from tradelink.core.security import (
    CurrentUser,
    SecurityValidator,
    create_access_token,
    decode_access_token,
    hash_password,
    require_role,
    verify_password,
)


class TestTokens:
    def test_round_trip(self):
        token = create_access_token("u-1", "buyer")
        assert decode_access_token(token) == CurrentUser(id="u-1", role="buyer")

    def test_missing_token(self):
        with pytest.raises(AuthenticationException) as exc_info:
            decode_access_token(None)
        assert exc_info.value.http_status == 401

    def test_expired_token(self):
        token = create_access_token("u-1", "buyer", expires_minutes=-1)
        with pytest.raises(AuthenticationException, match="expired"):
            decode_access_token(token)

    def test_wrong_secret(self):
        token = jwt.encode({"user": {"id": "u-1", "role": "buyer"}}, "other-secret", algorithm="HS256")
        with pytest.raises(AuthenticationException):
            decode_access_token(token)

    @pytest.mark.parametrize("payload", [
        {"user": {"id": "u-1", "role": "superuser"}},
        {"user": {"role": "buyer"}},
        {"user": "u-1"},
        {"sub": "u-1"},
    ])
    def test_malformed_payload(self, payload):
        payload["exp"] = datetime.now(timezone.utc) + timedelta(minutes=5)
        token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
        with pytest.raises(AuthenticationException, match="malformed"):
            decode_access_token(token)


class TestRequireRole:
    @pytest.mark.asyncio
    async def test_allowed_role(self):
        dependency = require_role("buyer")
        user = CurrentUser(id="u-1", role="buyer")
        assert await dependency(user=user) == user

    @pytest.mark.asyncio
    async def test_forbidden_role(self):
        dependency = require_role("buyer")
        with pytest.raises(AuthorizationException) as exc_info:
            await dependency(user=CurrentUser(id="u-1", role="seller"))
        assert exc_info.value.http_status == 403


class TestSecurityValidator:
    @pytest.mark.parametrize("value", ["42", "user_1", "3f2a-bc19", "A" * 64])
    def test_valid_identifier(self, value):
        assert SecurityValidator.validate_identifier(value) == value

    def test_identifier_trimmed(self):
        assert SecurityValidator.validate_identifier("  abc ") == "abc"

    @pytest.mark.parametrize("value", [None, "", "  ", "a b", "a/b", "1 OR 1=1", "A" * 65, 42])
    def test_invalid_identifier(self, value):
        with pytest.raises(InvalidIdentifierException):
            SecurityValidator.validate_identifier(value, "buyer_id")


class TestSanitizeForLog:
    def test_masks_secrets(self):
        assert "abc123" not in sanitize_for_log("password=abc123")

    def test_truncates(self):
        assert len(sanitize_for_log("x" * 500, max_length=20)) <= 23


class TestPasswordHashing:
    def test_hash_and_verify(self):
        hashed = hash_password("Str0ng!pass")

        assert hashed != "Str0ng!pass"
        assert verify_password("Str0ng!pass", hashed)
        assert not verify_password("str0ng!pass", hashed)

    def test_salted(self):
        assert hash_password("Str0ng!pass") != hash_password("Str0ng!pass")

    @pytest.mark.parametrize("stored", [None, "", "not-a-bcrypt-hash"])
    def test_missing_or_malformed_hash(self, stored):
        assert verify_password("Str0ng!pass", stored) is False
