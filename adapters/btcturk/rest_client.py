"""
BtcTurk REST API 클라이언트

Public 시세 조회와 Private 계좌/주문 엔드포인트 제공.
IExchangeRestClient Protocol 준수.

거래쌍은 'BTC-TRY' 형식으로 받고, 거래소 표기 변환은 내부에서 처리.
"""

import logging
from typing import Any, Callable

import httpx

from adapters.btcturk.dispatcher import RequestDispatcher
from adapters.btcturk.symbols import to_compact, to_delimited
from adapters.models import Amount, Credentials, OrderRequest, format_amount
from core.config.loader import ExchangeConfig
from core.constants import ApiPaths, BtcTurkEndpoints, Defaults
from core.utils.clock import now_ms

logger = logging.getLogger(__name__)


class BtcTurkRestClient:
    """BtcTurk REST API 클라이언트

    모든 메서드는 상태가 없으며 요청 1건 = 코루틴 1개.
    같은 인스턴스에서 동시에 여러 요청을 보내도 됨.

    Args:
        api_key: API 공개 키 (없으면 Public 전용)
        api_secret: Base64 인코딩된 API 시크릿 (없으면 Public 전용)
        base_url: REST API 베이스 URL
        timeout: 요청 타임아웃 (초)
        transport: httpx 전송 계층 (테스트용 주입)
        clock: 밀리초 타임스탬프 함수

    사용 예시:
    ```python
    async with BtcTurkRestClient(api_key="xxx", api_secret="xxx") as client:
        ticker = await client.get_pair("BTC-TRY")
        balances = await client.get_account_balance()
    ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        api_secret: str | None = None,
        base_url: str = BtcTurkEndpoints.PROD_REST_URL,
        timeout: float = Defaults.REQUEST_TIMEOUT_SEC,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], int] = now_ms,
    ):
        self.credentials = Credentials(api_key=api_key, api_secret=api_secret)
        self.dispatcher = RequestDispatcher(
            base_url=base_url,
            credentials=self.credentials,
            timeout=timeout,
            transport=transport,
            clock=clock,
        )

    @classmethod
    def from_config(
        cls,
        config: ExchangeConfig,
        timeout: float = Defaults.REQUEST_TIMEOUT_SEC,
    ) -> "BtcTurkRestClient":
        """ExchangeConfig로부터 생성"""
        return cls(
            api_key=config.api_key,
            api_secret=config.api_secret,
            base_url=config.rest_url,
            timeout=timeout,
        )

    @property
    def base_url(self) -> str:
        return self.dispatcher.base_url

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        await self.dispatcher.close()

    async def __aenter__(self) -> "BtcTurkRestClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # 시장 데이터 (Public)
    # -------------------------------------------------------------------------

    async def get_pair(self, pair: str | None = None) -> Any:
        """티커 조회

        Args:
            pair: 거래쌍 (예: BTC-TRY, None 또는 빈 문자열이면 전체)
        """
        params = {"pairSymbol": to_delimited(pair)} if pair else None
        return await self.dispatcher.get(ApiPaths.TICKER, params=params)

    async def get_order_book(
        self,
        pair: str,
        count: int = Defaults.ORDER_BOOK_COUNT,
    ) -> Any:
        """호가창 조회"""
        params = {"pairSymbol": to_delimited(pair), "limit": str(count)}
        return await self.dispatcher.get(ApiPaths.ORDER_BOOK, params=params)

    async def get_trades(self, pair: str) -> Any:
        """최근 체결 조회"""
        params = {"pairSymbol": to_delimited(pair)}
        return await self.dispatcher.get(ApiPaths.TRADES, params=params)

    async def get_ohlc(
        self,
        pair: str,
        count: int = Defaults.OHLC_COUNT,
    ) -> Any:
        """OHLC 캔들 조회

        Args:
            pair: 거래쌍
            count: 최근 캔들 개수 (last 파라미터)
        """
        params = {"pairSymbol": to_delimited(pair), "last": str(count)}
        return await self.dispatcher.get(ApiPaths.OHLC, params=params)

    # -------------------------------------------------------------------------
    # 계좌 조회 (Private)
    # -------------------------------------------------------------------------

    async def get_account_balance(self) -> Any:
        """계좌 잔고 조회"""
        return await self.dispatcher.get_authenticated(ApiPaths.ACCOUNT_BALANCE)

    async def get_transactions(self) -> Any:
        """체결 거래 내역 조회"""
        return await self.dispatcher.get_authenticated(ApiPaths.USER_TRANSACTIONS)

    async def get_open_orders(self, pair: str) -> Any:
        """미체결 주문 조회"""
        params = {"pairSymbol": to_delimited(pair)}
        return await self.dispatcher.get_authenticated(ApiPaths.OPEN_ORDERS, params=params)

    async def get_all_orders(self, pair: str) -> Any:
        """전체 주문 내역 조회"""
        params = {"pairSymbol": to_delimited(pair)}
        return await self.dispatcher.get_authenticated(ApiPaths.ALL_ORDERS, params=params)

    # -------------------------------------------------------------------------
    # 주문 실행 (Private)
    # -------------------------------------------------------------------------

    async def place_order(self, request: OrderRequest) -> Any:
        """주문 생성"""
        body = request.to_body()
        data = await self.dispatcher.post(ApiPaths.ORDER, body)

        logger.info(
            "주문 생성 완료",
            extra={
                "pair_symbol": request.pair_symbol,
                "order_type": request.order_type,
                "order_method": request.order_method,
                "quantity": format_amount(request.quantity),
            },
        )
        return data

    async def submit_market_order(
        self,
        pair: str,
        order_type: str,
        quantity: Amount,
    ) -> Any:
        """시장가 주문"""
        request = OrderRequest.market(to_compact(pair), order_type, quantity)
        return await self.place_order(request)

    async def submit_limit_order(
        self,
        pair: str,
        order_type: str,
        price: Amount,
        quantity: Amount,
    ) -> Any:
        """지정가 주문"""
        request = OrderRequest.limit(to_compact(pair), order_type, price, quantity)
        return await self.place_order(request)

    async def submit_stop_market_order(
        self,
        pair: str,
        order_type: str,
        stop_price: Amount,
        quantity: Amount,
    ) -> Any:
        """스탑 마켓 주문"""
        request = OrderRequest.stop_market(to_compact(pair), order_type, stop_price, quantity)
        return await self.place_order(request)

    async def submit_stop_limit_order(
        self,
        pair: str,
        order_type: str,
        stop_price: Amount,
        limit_price: Amount,
        quantity: Amount,
    ) -> Any:
        """스탑 리밋 주문"""
        request = OrderRequest.stop_limit(
            to_compact(pair),
            order_type,
            stop_price,
            limit_price,
            quantity,
        )
        return await self.place_order(request)

    async def cancel_order(self, order_id: int | str) -> Any:
        """주문 취소

        Returns:
            응답 본문 전체 (다른 메서드와 달리 data만 꺼내지 않음)
        """
        data = await self.dispatcher.delete(ApiPaths.ORDER, params={"id": str(order_id)})
        logger.info("주문 취소 완료", extra={"order_id": str(order_id)})
        return data
