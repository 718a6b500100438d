"""테스트 정적 데이터 자산"""
