"""데이터 액세스 레이어 - export only."""
