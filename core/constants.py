"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class BtcTurkEndpoints:
    """BtcTurk API 호스트 (고정값)

    공식 문서: https://docs.btcturk.com
    """

    # Production
    PROD_REST_URL: str = "https://api.btcturk.com"

    # Test
    TEST_REST_URL: str = "https://api-dev.btcturk.com"


class ApiPaths:
    """BtcTurk REST 경로"""

    # Public (인증 불필요)
    TICKER: str = "/api/v2/ticker"
    ORDER_BOOK: str = "/api/v2/orderbook"
    TRADES: str = "/api/v2/trades"
    OHLC: str = "/api/v2/ohlc"

    # Private (인증 필요)
    ACCOUNT_BALANCE: str = "/api/v1/users/balances"
    USER_TRANSACTIONS: str = "/api/v1/users/transactions/trade"
    OPEN_ORDERS: str = "/api/v1/openOrders"
    ALL_ORDERS: str = "/api/v1/allOrders"
    ORDER: str = "/api/v1/order"


class AuthHeaders:
    """인증 헤더 이름"""

    API_KEY: str = "X-PCK"
    STAMP: str = "X-Stamp"
    SIGNATURE: str = "X-Signature"


class Defaults:
    """기본값 상수"""

    REQUEST_TIMEOUT_SEC: float = 30.0
    ORDER_BOOK_COUNT: int = 10
    OHLC_COUNT: int = 10

    LOG_LEVEL: str = "INFO"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # 설정 파일
    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"
