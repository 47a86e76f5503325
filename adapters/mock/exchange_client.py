"""
Mock 거래소 클라이언트

테스트용 Mock REST 클라이언트.
IExchangeRestClient Protocol 준수.

실제 클라이언트와 같은 거래쌍 검증/인증 정보 검사를 거치며,
응답은 BtcTurk envelope의 data와 같은 형태의 dict.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from adapters.btcturk.errors import CredentialsMissingError, RemoteError
from adapters.btcturk.symbols import parse_pair, to_compact, to_delimited
from adapters.models import Amount, Credentials, OrderRequest, format_amount
from core.types import OrderType
from core.utils.clock import now_ms


@dataclass
class MockState:
    """Mock 상태 (메모리 내 저장)"""

    # 티커 (pair 'BTC-TRY' -> 최근가 문자열)
    last_prices: dict[str, str] = field(default_factory=dict)

    # 잔고 (asset -> (free, locked))
    balances: dict[str, tuple[str, str]] = field(default_factory=dict)

    # 주문 (order_id -> 주문 dict)
    orders: dict[int, dict[str, Any]] = field(default_factory=dict)

    # 오픈 주문 ID 목록
    open_order_ids: set[int] = field(default_factory=set)

    # 호출 기록 (메서드 이름, 인자)
    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    # 시뮬레이션 옵션
    should_fail_next_order: bool = False
    next_order_status_code: int = 400
    next_order_status_text: str = "Bad Request"

    # 주문 카운터
    order_counter: int = 0


class MockBtcTurkRestClient:
    """Mock REST 클라이언트

    IExchangeRestClient Protocol 구현.
    메모리 내 상태 관리로 테스트 시나리오 지원.

    사용 예시:
    ```python
    client = MockBtcTurkRestClient()

    # 시세/잔고 설정
    client.set_last_price("BTC-TRY", "100000")
    client.set_balance("TRY", "5000")

    # 주문 테스트
    order = await client.submit_limit_order("BTC-TRY", "buy", "100000", "0.01")
    await client.cancel_order(order["id"])
    ```
    """

    def __init__(
        self,
        state: MockState | None = None,
        credentials: Credentials | None = None,
    ):
        self.state = state or MockState()
        self.credentials = credentials or Credentials(api_key="mock_key", api_secret="bW9jaw==")
        self.closed = False

        # 기본 시세/잔고 설정
        if not self.state.last_prices:
            self.state.last_prices["BTC-TRY"] = "100000"
        if not self.state.balances:
            self.state.balances["TRY"] = ("10000", "0")

    # -------------------------------------------------------------------------
    # 상태 조작 메서드 (테스트용)
    # -------------------------------------------------------------------------

    def set_last_price(self, pair: str, price: str) -> None:
        """최근가 설정"""
        parse_pair(pair)
        self.state.last_prices[pair] = price

    def set_balance(self, asset: str, free: str, locked: str = "0") -> None:
        """잔고 설정"""
        self.state.balances[asset] = (free, locked)

    def set_fail_next_order(
        self,
        status_code: int = 400,
        status_text: str = "Bad Request",
    ) -> None:
        """다음 주문 실패 설정"""
        self.state.should_fail_next_order = True
        self.state.next_order_status_code = status_code
        self.state.next_order_status_text = status_text

    def _record(self, name: str, *args: Any) -> None:
        self.state.calls.append((name, args))

    def _require_credentials(self) -> None:
        if not self.credentials.is_complete:
            raise CredentialsMissingError()

    def _ticker(self, pair: str) -> dict[str, Any]:
        last = self.state.last_prices[pair]
        return {
            "pair": to_compact(pair),
            "pairNormalized": to_delimited(pair),
            "timestamp": now_ms(),
            "last": last,
            "bid": last,
            "ask": last,
        }

    # -------------------------------------------------------------------------
    # 시장 데이터 (Public)
    # -------------------------------------------------------------------------

    async def get_pair(self, pair: str | None = None) -> Any:
        """티커 조회"""
        self._record("get_pair", pair)
        if not pair:
            return [self._ticker(p) for p in self.state.last_prices]

        parse_pair(pair)
        if pair not in self.state.last_prices:
            return []
        return [self._ticker(pair)]

    async def get_order_book(self, pair: str, count: int = 10) -> Any:
        """호가창 조회 (최근가 한 단계)"""
        self._record("get_order_book", pair, count)
        parse_pair(pair)
        last = self.state.last_prices.get(pair)
        levels = [[last, "1"]] if last is not None else []
        return {
            "timestamp": now_ms(),
            "bids": levels[:count],
            "asks": levels[:count],
        }

    async def get_trades(self, pair: str) -> Any:
        """최근 체결 조회 (Mock은 항상 빈 목록)"""
        self._record("get_trades", pair)
        parse_pair(pair)
        return []

    async def get_ohlc(self, pair: str, count: int = 10) -> Any:
        """OHLC 캔들 조회 (Mock은 항상 빈 목록)"""
        self._record("get_ohlc", pair, count)
        parse_pair(pair)
        return []

    # -------------------------------------------------------------------------
    # 계좌 조회 (Private)
    # -------------------------------------------------------------------------

    async def get_account_balance(self) -> Any:
        """계좌 잔고 조회"""
        self._record("get_account_balance")
        self._require_credentials()
        result = []
        for asset, (free, locked) in self.state.balances.items():
            total = str(Decimal(free) + Decimal(locked))
            result.append({
                "asset": asset,
                "assetname": asset,
                "balance": total,
                "locked": locked,
                "free": free,
            })
        return result

    async def get_transactions(self) -> Any:
        """체결 거래 내역 조회 (Mock은 항상 빈 목록)"""
        self._record("get_transactions")
        self._require_credentials()
        return []

    async def get_open_orders(self, pair: str) -> Any:
        """미체결 주문 조회"""
        self._record("get_open_orders", pair)
        self._require_credentials()
        compact = to_compact(pair)
        orders = [
            self.state.orders[oid]
            for oid in sorted(self.state.open_order_ids)
            if self.state.orders[oid]["pairSymbol"] == compact
        ]
        return {
            "bids": [o for o in orders if o["type"] == OrderType.BUY.value],
            "asks": [o for o in orders if o["type"] == OrderType.SELL.value],
        }

    async def get_all_orders(self, pair: str) -> Any:
        """전체 주문 내역 조회"""
        self._record("get_all_orders", pair)
        self._require_credentials()
        compact = to_compact(pair)
        return [o for o in self.state.orders.values() if o["pairSymbol"] == compact]

    # -------------------------------------------------------------------------
    # 주문 실행 (Private)
    # -------------------------------------------------------------------------

    async def place_order(self, request: OrderRequest) -> Any:
        """주문 생성"""
        self._record("place_order", request)
        self._require_credentials()

        # 실패 시뮬레이션
        if self.state.should_fail_next_order:
            self.state.should_fail_next_order = False
            raise RemoteError(
                status_code=self.state.next_order_status_code,
                status_text=self.state.next_order_status_text,
            )

        self.state.order_counter += 1
        order_id = self.state.order_counter

        order = {
            "id": order_id,
            "datetime": now_ms(),
            "type": request.order_type,
            "method": request.order_method,
            "price": format_amount(request.price) if request.price is not None else None,
            "stopPrice": format_amount(request.stop_price) if request.stop_price is not None else None,
            "quantity": format_amount(request.quantity),
            "pairSymbol": request.pair_symbol,
            "status": "Untouched",
        }

        self.state.orders[order_id] = order
        self.state.open_order_ids.add(order_id)

        return dict(order)

    async def submit_market_order(
        self,
        pair: str,
        order_type: str,
        quantity: Amount,
    ) -> Any:
        """시장가 주문"""
        return await self.place_order(OrderRequest.market(to_compact(pair), order_type, quantity))

    async def submit_limit_order(
        self,
        pair: str,
        order_type: str,
        price: Amount,
        quantity: Amount,
    ) -> Any:
        """지정가 주문"""
        return await self.place_order(
            OrderRequest.limit(to_compact(pair), order_type, price, quantity)
        )

    async def submit_stop_market_order(
        self,
        pair: str,
        order_type: str,
        stop_price: Amount,
        quantity: Amount,
    ) -> Any:
        """스탑 마켓 주문"""
        return await self.place_order(
            OrderRequest.stop_market(to_compact(pair), order_type, stop_price, quantity)
        )

    async def submit_stop_limit_order(
        self,
        pair: str,
        order_type: str,
        stop_price: Amount,
        limit_price: Amount,
        quantity: Amount,
    ) -> Any:
        """스탑 리밋 주문"""
        return await self.place_order(
            OrderRequest.stop_limit(to_compact(pair), order_type, stop_price, limit_price, quantity)
        )

    async def cancel_order(self, order_id: int | str) -> Any:
        """주문 취소 (실제 API처럼 본문 전체 반환)"""
        self._record("cancel_order", order_id)
        self._require_credentials()

        oid = int(order_id)
        if oid not in self.state.open_order_ids:
            raise RemoteError(status_code=404, status_text="Not Found")

        self.state.open_order_ids.discard(oid)
        self.state.orders[oid]["status"] = "Canceled"

        return {
            "success": True,
            "message": "SUCCESS",
            "code": 0,
        }

    async def close(self) -> None:
        """리소스 정리"""
        self.closed = True
