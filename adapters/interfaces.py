"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from adapters.models import Amount, OrderRequest


@runtime_checkable
class IExchangeRestClient(Protocol):
    """거래소 REST API 클라이언트 인터페이스

    거래쌍은 'BASE-QUOTE' 형식 (예: BTC-TRY).
    반환값은 응답 envelope에서 꺼낸 data (cancel_order만 본문 전체).
    """

    # -------------------------------------------------------------------------
    # 시장 데이터 (Public)
    # -------------------------------------------------------------------------

    async def get_pair(self, pair: str | None = None) -> Any:
        """티커 조회

        Args:
            pair: 거래쌍 (None 또는 빈 문자열이면 전체)
        """
        ...

    async def get_order_book(self, pair: str, count: int = 10) -> Any:
        """호가창 조회

        Args:
            pair: 거래쌍
            count: 호가 개수
        """
        ...

    async def get_trades(self, pair: str) -> Any:
        """최근 체결 조회"""
        ...

    async def get_ohlc(self, pair: str, count: int = 10) -> Any:
        """OHLC 캔들 조회"""
        ...

    # -------------------------------------------------------------------------
    # 계좌 조회 (Private)
    # -------------------------------------------------------------------------

    async def get_account_balance(self) -> Any:
        """계좌 잔고 조회

        Raises:
            CredentialsMissingError: 인증 정보가 없는 경우
        """
        ...

    async def get_transactions(self) -> Any:
        """체결 거래 내역 조회"""
        ...

    async def get_open_orders(self, pair: str) -> Any:
        """미체결 주문 조회"""
        ...

    async def get_all_orders(self, pair: str) -> Any:
        """전체 주문 내역 조회"""
        ...

    # -------------------------------------------------------------------------
    # 주문 실행 (Private)
    # -------------------------------------------------------------------------

    async def place_order(self, request: "OrderRequest") -> Any:
        """주문 생성

        Args:
            request: 주문 요청 정보

        Raises:
            RemoteError: 거래소가 주문을 거부한 경우
        """
        ...

    async def submit_market_order(
        self,
        pair: str,
        order_type: str,
        quantity: "Amount",
    ) -> Any:
        """시장가 주문"""
        ...

    async def submit_limit_order(
        self,
        pair: str,
        order_type: str,
        price: "Amount",
        quantity: "Amount",
    ) -> Any:
        """지정가 주문"""
        ...

    async def submit_stop_market_order(
        self,
        pair: str,
        order_type: str,
        stop_price: "Amount",
        quantity: "Amount",
    ) -> Any:
        """스탑 마켓 주문"""
        ...

    async def submit_stop_limit_order(
        self,
        pair: str,
        order_type: str,
        stop_price: "Amount",
        limit_price: "Amount",
        quantity: "Amount",
    ) -> Any:
        """스탑 리밋 주문"""
        ...

    async def cancel_order(self, order_id: int | str) -> Any:
        """주문 취소

        Returns:
            응답 본문 전체
        """
        ...

    async def close(self) -> None:
        """리소스 정리"""
        ...
