"""회원가입/로그인 엔드포인트"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tradelink.core.database import get_db
from tradelink.core.exceptions import AuthenticationException
from tradelink.core.logging import logger, sanitize_for_log
from tradelink.core.security import create_access_token, hash_password, verify_password
from tradelink.repositories.impl.user_repository import UserRepository
from tradelink.schemas.auth_schema import LoginRequest, RegisterRequest, RegisterResponse, TokenResponse

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    """회원가입 (username/email 중복 시 409)"""
    user = UserRepository(db).create(
        username=payload.username,
        email=payload.email,
        password_hash=hash_password(payload.password),
        role=payload.role,
        full_name=payload.full_name,
        company_name=payload.company_name,
        phone_number=payload.phone_number,
        address=payload.address,
    )
    return RegisterResponse(message="User registered successfully", user_id=user.id)


@router.post("/login", response_model=TokenResponse)
async def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """로그인 → Bearer 토큰

    사용자 없음과 비밀번호 불일치는 같은 응답(401)으로 처리합니다.
    """
    user = UserRepository(db).get_by_username(payload.username.strip())
    if user is None or not user.is_active or not verify_password(payload.password, user.password_hash):
        logger.info(f"[Auth] Invalid credentials for username: {sanitize_for_log(payload.username, max_length=32)}")
        raise AuthenticationException("invalid credentials")

    return TokenResponse(token=create_access_token(user.id, user.role), user_id=user.id, role=user.role)
