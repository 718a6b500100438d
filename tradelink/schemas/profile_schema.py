"""프로필 스키마 (입력 검증 강화)"""
import re
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_INTERESTS = 100
MAX_TERM_LENGTH = 100
DANGEROUS_CHARS = ['<', '>', '\\', '\0', '\n', '\r']
E164_PATTERN = re.compile(r"^\+?[1-9]\d{1,14}$")


def _check_text(value: str, field: str) -> str:
    for char in DANGEROUS_CHARS:
        if char in value:
            raise ValueError(f"{field} contains a disallowed character")
    return value.strip()


class BuyerProfileUpdate(BaseModel):
    """바이어 프로필 수정 요청"""
    model_config = ConfigDict(populate_by_name=True)

    product_interests: List[str] = Field(..., alias="productInterests", max_length=MAX_INTERESTS)
    location: Optional[str] = Field(None, max_length=255)

    @field_validator("product_interests")
    @classmethod
    def validate_interests(cls, v: List[str]) -> List[str]:
        cleaned = []
        for term in v:
            if len(term) > MAX_TERM_LENGTH:
                raise ValueError(f"interest terms must be at most {MAX_TERM_LENGTH} characters")
            term = _check_text(term, "productInterests")
            if term:
                cleaned.append(term)
        return cleaned

    @field_validator("location")
    @classmethod
    def validate_location(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return _check_text(v, "location")


class BuyerProfileResponse(BaseModel):
    """바이어 프로필 응답"""
    model_config = ConfigDict(populate_by_name=True)

    user_id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    product_interests: List[str] = Field(default_factory=list, alias="productInterests")
    location: str = ""


class SellerProfileUpdate(BaseModel):
    """셀러 프로필 부분 수정 요청 (보낸 필드만 반영)"""
    company_name: Optional[str] = Field(None, max_length=255)
    years_of_experience: Optional[int] = Field(None, ge=0, le=100)
    location: Optional[str] = Field(None, max_length=255)
    phone_number: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=255)

    @field_validator("company_name", "location", "address")
    @classmethod
    def validate_text(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return _check_text(v, "text field")

    @field_validator("phone_number")
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        if not E164_PATTERN.match(v):
            raise ValueError("Phone Number must be a valid E.164 format")
        return v


class SellerProfileResponse(BaseModel):
    """셀러 프로필 응답"""
    seller_id: str
    company_name: str = ""
    years_of_experience: int = 0
    location: str = ""
    phone_number: str = ""
    address: str = ""
