"""회원가입/로그인 스키마"""
import re
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")
SPECIAL_CHARS = set('!@#$%^&*(),.?":{}|<>')

# bcrypt는 72바이트까지만 사용
MAX_PASSWORD_BYTES = 72


class RegisterRequest(BaseModel):
    """회원가입 요청

    비밀번호 정책: 8자 이상, 숫자/대문자/특수문자 각 1개 이상
    """
    username: str = Field(..., min_length=3, max_length=64)
    password: str = Field(..., min_length=8)
    email: str = Field(..., max_length=255)
    full_name: str = Field(..., min_length=1, max_length=255)
    role: Literal["buyer", "seller"]
    company_name: Optional[str] = Field(None, max_length=255)
    phone_number: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=255)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        v = v.strip()
        if not USERNAME_PATTERN.match(v):
            raise ValueError("Username may only contain letters, digits, '_', '.' and '-'")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        if not any(c.isdigit() for c in v):
            raise ValueError("Password must contain at least one number")
        if not any(c.isupper() for c in v):
            raise ValueError("Password must contain at least one uppercase letter")
        if not any(c in SPECIAL_CHARS for c in v):
            raise ValueError("Password must contain at least one special character")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip().lower()
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Valid email is required")
        return v

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Full name is required")
        return v.strip()


class LoginRequest(BaseModel):
    """로그인 요청"""
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)


class RegisterResponse(BaseModel):
    message: str
    user_id: str


class TokenResponse(BaseModel):
    """로그인 응답 (Bearer 토큰)"""
    token: str
    token_type: str = "bearer"
    user_id: str
    role: str
