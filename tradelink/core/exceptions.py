"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class TradeLinkException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모

    http_status는 API 경계(app.py 예외 핸들러)에서 응답 코드로 사용됩니다.
    """
    http_status: int = 500

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


# 유효성 검증 관련 예외
class ValidationException(TradeLinkException):
    """유효성 검증 예외"""
    http_status = 400

    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidIdentifierException(ValidationException):
    """유효하지 않은 사용자/엔티티 ID"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__(field, reason, details)


class EmptyUpdateException(ValidationException):
    """수정할 필드가 없음"""
    def __init__(self, details: Optional[dict[str, Any]] = None):
        super().__init__("body", "No valid fields provided for update", details)


# 인증/인가 관련 예외
class AuthenticationException(TradeLinkException):
    """토큰 누락/검증 실패"""
    http_status = 401

    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__(f"Authentication failed: {reason}", "AUTHENTICATION_ERROR", details)


class AuthorizationException(TradeLinkException):
    """권한 없음 (역할 불일치, 소유자 아님)"""
    http_status = 403

    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__(f"Access denied: {reason}", "FORBIDDEN", details)


# 조회 실패 관련 예외
class NotFoundException(TradeLinkException):
    """리소스를 찾을 수 없음"""
    http_status = 404

    def __init__(self, resource: str, identifier: str, error_code: str = "NOT_FOUND", details: Optional[dict[str, Any]] = None):
        message = f"{resource} not found: {identifier}"
        super().__init__(message, error_code, details or {"resource": resource, "id": identifier})


class BuyerProfileNotFoundException(NotFoundException):
    """바이어 프로필 없음"""
    def __init__(self, buyer_id: str, details: Optional[dict[str, Any]] = None):
        super().__init__("Buyer profile", buyer_id, "BUYER_PROFILE_NOT_FOUND", details)


class SellerNotFoundException(NotFoundException):
    """셀러 없음"""
    def __init__(self, seller_id: str, details: Optional[dict[str, Any]] = None):
        super().__init__("Seller", seller_id, "SELLER_NOT_FOUND", details)


class ProductNotFoundException(NotFoundException):
    """상품 없음"""
    def __init__(self, product_id: str, details: Optional[dict[str, Any]] = None):
        super().__init__("Product", product_id, "PRODUCT_NOT_FOUND", details)


class OrderNotFoundException(NotFoundException):
    """주문 없음"""
    def __init__(self, order_id: str, details: Optional[dict[str, Any]] = None):
        super().__init__("Order", order_id, "ORDER_NOT_FOUND", details)


class ConflictException(TradeLinkException):
    """중복 생성 등 상태 충돌"""
    http_status = 409

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, "CONFLICT", details)


# 캐시 관련 예외
class CacheException(TradeLinkException):
    """캐시 관련 예외"""
    def __init__(self, message: str, error_code: str = "CACHE_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CACHE_ERROR", details)


class CacheConnectionException(CacheException):
    """캐시 연결 실패"""
    def __init__(self, message: str, error_code: str = "CACHE_CONNECTION_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class CacheSerializationException(CacheException):
    """캐시 직렬화/역직렬화 오류"""
    def __init__(self, operation: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Cache {operation} failed: {reason}"
        super().__init__(message, "CACHE_SERIALIZATION_ERROR",
                        details or {"operation": operation, "reason": reason})


# 데이터베이스 관련 예외 (재시도 가능한 서비스 오류)
class DatabaseException(TradeLinkException):
    """데이터베이스 관련 예외"""
    http_status = 503

    def __init__(self, message: str, error_code: str = "DB_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "DB_ERROR", details)


class DatabaseQueryException(DatabaseException):
    """DB 쿼리 실행 오류"""
    def __init__(self, operation: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Database query failed during '{operation}': {reason}"
        super().__init__(message, "DB_QUERY_ERROR",
                        details or {"operation": operation})


class TimeoutException(TradeLinkException):
    """타임아웃 예외"""
    http_status = 503

    def __init__(self, operation: str, timeout_s: float, error_code: str = "TIMEOUT", details: Optional[dict[str, Any]] = None):
        message = f"Operation '{operation}' timed out after {timeout_s}s"
        super().__init__(message, error_code,
                        details or {"operation": operation, "timeout_s": timeout_s, "retryable": True})


class CatalogTimeoutException(TimeoutException):
    """셀러 카탈로그 조회 타임아웃"""
    def __init__(self, timeout_s: float, details: Optional[dict[str, Any]] = None):
        super().__init__("catalog_fetch", timeout_s, "CATALOG_TIMEOUT", details)
