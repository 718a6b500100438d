"""셀러 카탈로그 자산

카탈로그 쿼리는 (셀러, 상품) 조합마다 한 행을 반환하므로
같은 셀러의 실적 값이 행마다 반복됩니다.
"""

BUYER_INTERESTS = ["Coffee", "Tea"]

# 관심 품목 Coffee/Tea 기준: S2(2개) > S1(1개), S3 제외
CATALOG_ROWS = [
    {"seller_id": "S1", "company_name": "Bean Traders", "product_name": "coffee",
     "years_of_experience": 3, "average_rating": 4.2,
     "total_orders": 10, "successful_orders": 8, "avg_response_time": 12.0},
    {"seller_id": "S1", "company_name": "Bean Traders", "product_name": "spices",
     "years_of_experience": 3, "average_rating": 4.2,
     "total_orders": 10, "successful_orders": 8, "avg_response_time": 12.0},
    {"seller_id": "S2", "company_name": "Leaf & Bean", "product_name": "tea",
     "years_of_experience": 7, "average_rating": 4.8,
     "total_orders": None, "successful_orders": None, "avg_response_time": None},
    {"seller_id": "S2", "company_name": "Leaf & Bean", "product_name": "coffee",
     "years_of_experience": 7, "average_rating": 4.8,
     "total_orders": None, "successful_orders": None, "avg_response_time": None},
    {"seller_id": "S3", "company_name": None, "product_name": "flowers",
     "years_of_experience": None, "average_rating": None,
     "total_orders": 0, "successful_orders": 0, "avg_response_time": None},
]

# 상품명이 비어 있는 셀러는 Fold 결과에서 제외
EMPTY_NAME_ROWS = [
    {"seller_id": "S9", "company_name": "Ghost Co", "product_name": "   "},
    {"seller_id": "S9", "company_name": "Ghost Co", "product_name": None},
]
