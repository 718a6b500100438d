"""TradeLink - B2B 무역 매칭 백엔드"""

__version__ = "1.0.0"
