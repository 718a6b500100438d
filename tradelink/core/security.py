"""
인증/인가 및 입력 검증

- JWT Bearer 토큰 발급/검증 (payload: {"user": {"id", "role"}})
- 비밀번호 해시 (bcrypt)
- 역할 기반 접근 제어
- 식별자 입력 검증
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tradelink.core.config import settings
from tradelink.core.exceptions import (
    AuthenticationException,
    AuthorizationException,
    InvalidIdentifierException,
)
from tradelink.core.logging import logger, sanitize_for_log

ROLES = ("buyer", "seller", "admin")


@dataclass(frozen=True)
class CurrentUser:
    """인증된 호출자 (이후 레이어는 재검증 없이 신뢰)"""
    id: str
    role: str


class SecurityValidator:
    """입력 보안 검증"""

    MAX_IDENTIFIER_LENGTH = 64
    IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

    @staticmethod
    def validate_identifier(value: Optional[str], field: str = "id") -> str:
        """사용자/엔티티 ID 검증

        Raises:
            InvalidIdentifierException: 비어 있거나 허용되지 않는 형식
        """
        if value is None or not isinstance(value, str) or not value.strip():
            raise InvalidIdentifierException(field, "identifier is required")

        value = value.strip()
        if len(value) > SecurityValidator.MAX_IDENTIFIER_LENGTH:
            raise InvalidIdentifierException(
                field, f"identifier must be at most {SecurityValidator.MAX_IDENTIFIER_LENGTH} characters"
            )
        if not SecurityValidator.IDENTIFIER_PATTERN.match(value):
            logger.warning(f"Rejected identifier for '{field}': {sanitize_for_log(value, max_length=20)}")
            raise InvalidIdentifierException(field, "identifier contains invalid characters")
        return value


def hash_password(password: str) -> str:
    """bcrypt 해시 (salt 포함, cost는 settings.bcrypt_rounds)"""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=settings.bcrypt_rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    """비밀번호 검증 (해시가 없거나 형식이 깨졌으면 False)"""
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False


def create_access_token(user_id: str, role: str, expires_minutes: Optional[int] = None) -> str:
    """액세스 토큰 발급

    Args:
        user_id: 사용자 ID
        role: buyer | seller | admin
        expires_minutes: 만료 (기본: settings.jwt_expire_minutes)
    """
    if role not in ROLES:
        raise ValueError(f"Unknown role: {role}")

    expire_at = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes if expires_minutes is not None else settings.jwt_expire_minutes
    )
    payload = {"user": {"id": user_id, "role": role}, "exp": expire_at}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: Optional[str]) -> CurrentUser:
    """토큰 검증 후 호출자 반환

    Raises:
        AuthenticationException: 토큰 없음/만료/서명 불일치/payload 형식 오류
    """
    if not token:
        raise AuthenticationException("token missing")

    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        raise AuthenticationException("token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Token verification error: {type(e).__name__}")
        raise AuthenticationException("token is not valid")

    user = payload.get("user")
    if not isinstance(user, dict) or not user.get("id") or user.get("role") not in ROLES:
        raise AuthenticationException("token payload is malformed")

    return CurrentUser(id=str(user["id"]), role=user["role"])


bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentUser:
    """FastAPI Dependency: Authorization: Bearer <token> 검증"""
    if credentials is None:
        raise AuthenticationException("no token, authorization denied")
    if credentials.scheme.lower() != "bearer":
        raise AuthenticationException("token format is invalid")
    return decode_access_token(credentials.credentials)


def require_role(*roles: str):
    """역할 제한 Dependency 팩토리

    Example:
        user: CurrentUser = Depends(require_role("buyer"))
    """

    async def _dependency(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if roles and user.role not in roles:
            logger.warning(f"User with role {user.role} attempted to access a route for {roles}")
            raise AuthorizationException(f"only {', '.join(roles)} can access this resource")
        return user

    return _dependency
