"""상품/주문 스키마"""
from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

OrderStatus = Literal["Pending", "Accepted", "Shipped", "Completed", "Cancelled"]


class ProductCreate(BaseModel):
    """상품 등록 요청"""
    name: str = Field(..., min_length=1, max_length=255)
    category: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=2000)
    price: float = Field(..., gt=0, description="단가 (0 초과)")
    stock: int = Field(..., ge=0, description="재고 (0 이상)")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Product name must not be blank")
        for char in ['<', '>', '\\', '\0', '\n', '\r']:
            if char in v:
                raise ValueError(f"Product name contains a disallowed character: {char!r}")
        return v.strip()


class ProductOut(BaseModel):
    """상품 응답"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    seller_id: str
    name: str
    category: Optional[str] = None
    description: Optional[str] = None
    price: float
    stock: int


class OrderCreate(BaseModel):
    """주문 요청"""
    product_id: str = Field(..., min_length=1, max_length=64)
    quantity: int = Field(..., ge=1, le=1_000_000)


class OrderStatusUpdate(BaseModel):
    """주문 상태 변경 요청"""
    status: OrderStatus


class OrderOut(BaseModel):
    """주문 응답"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    buyer_id: str
    seller_id: str
    product_id: str
    quantity: int
    total_amount: float
    status: str
    response_time_hours: Optional[float] = None
    created_at: Optional[datetime] = None


class CatalogProductOut(BaseModel):
    """공개 상품 목록/상세 응답"""
    id: str
    seller_id: str
    seller_name: Optional[str] = None
    company_name: Optional[str] = None
    name: str
    category: Optional[str] = None
    description: Optional[str] = None
    price: float
    stock: int


class ProductSellerOut(BaseModel):
    """상품 공급 셀러"""
    seller_id: str
    seller_name: Optional[str] = None
    company_name: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    product_id: str
    price: float
    stock: int


class QuoteCreate(BaseModel):
    """견적 요청 (productId 별칭 허용)"""
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId", min_length=1, max_length=64)
    quantity: int = Field(..., ge=1, le=1_000_000)


class QuoteOut(BaseModel):
    """견적 응답

    counterpart_name: 바이어에게는 셀러 이름, 셀러에게는 바이어 이름
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    product_id: str
    product_name: Optional[str] = None
    buyer_id: str
    seller_id: str
    counterpart_name: Optional[str] = None
    quantity: int
    status: str
    requested_at: Optional[datetime] = None
