"""
타입 정의 모듈

핵심 Enum 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class TradingMode(str, Enum):
    """거래 모드 (실거래 / 테스트 서버)"""

    PRODUCTION = "production"
    TESTNET = "testnet"


class OrderType(str, Enum):
    """주문 방향 (BtcTurk는 orderType 필드에 매수/매도를 담음)"""

    BUY = "buy"
    SELL = "sell"


class OrderMethod(str, Enum):
    """주문 방식"""

    MARKET = "market"
    LIMIT = "limit"
    STOP_MARKET = "stopMarket"
    STOP_LIMIT = "stopLimit"
