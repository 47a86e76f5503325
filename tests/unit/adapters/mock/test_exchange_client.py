"""
Mock 거래소 클라이언트 테스트

MockBtcTurkRestClient 테스트.
"""

import pytest

from adapters.btcturk.errors import CredentialsMissingError, InvalidSymbolError, RemoteError
from adapters.mock.exchange_client import MockBtcTurkRestClient, MockState
from adapters.models import Credentials, OrderRequest


class TestMockBtcTurkRestClient:
    """MockBtcTurkRestClient 테스트"""

    @pytest.fixture
    def client(self) -> MockBtcTurkRestClient:
        """클라이언트 픽스처"""
        return MockBtcTurkRestClient()

    # -------------------------------------------------------------------------
    # 시장 데이터
    # -------------------------------------------------------------------------

    @pytest.mark.asyncio
    async def test_get_pair_default(self, client: MockBtcTurkRestClient) -> None:
        """기본 티커 조회"""
        tickers = await client.get_pair("BTC-TRY")

        assert len(tickers) == 1
        assert tickers[0]["pair"] == "BTCTRY"
        assert tickers[0]["pairNormalized"] == "BTC_TRY"
        assert tickers[0]["last"] == "100000"

    @pytest.mark.asyncio
    async def test_get_pair_all(self, client: MockBtcTurkRestClient) -> None:
        """pair 없이 전체 티커 조회"""
        client.set_last_price("ETH-TRY", "50000")

        tickers = await client.get_pair()

        assert {t["pair"] for t in tickers} == {"BTCTRY", "ETHTRY"}

    @pytest.mark.asyncio
    async def test_get_pair_empty_string(self, client: MockBtcTurkRestClient) -> None:
        """빈 문자열도 전체 티커"""
        tickers = await client.get_pair("")

        assert [t["pair"] for t in tickers] == ["BTCTRY"]

    @pytest.mark.asyncio
    async def test_get_pair_unknown(self, client: MockBtcTurkRestClient) -> None:
        """등록되지 않은 거래쌍은 빈 목록"""
        assert await client.get_pair("XRP-TRY") == []

    @pytest.mark.asyncio
    async def test_invalid_pair_rejected(self, client: MockBtcTurkRestClient) -> None:
        """잘못된 거래쌍 표기"""
        with pytest.raises(InvalidSymbolError):
            await client.get_order_book("BTCTRY")

    @pytest.mark.asyncio
    async def test_get_order_book(self, client: MockBtcTurkRestClient) -> None:
        """호가창 조회"""
        book = await client.get_order_book("BTC-TRY", count=5)

        assert book["bids"] == [["100000", "1"]]
        assert book["asks"] == [["100000", "1"]]

    @pytest.mark.asyncio
    async def test_trades_and_ohlc_empty(self, client: MockBtcTurkRestClient) -> None:
        """체결/캔들은 빈 목록"""
        assert await client.get_trades("BTC-TRY") == []
        assert await client.get_ohlc("BTC-TRY") == []

    # -------------------------------------------------------------------------
    # 계좌 조회
    # -------------------------------------------------------------------------

    @pytest.mark.asyncio
    async def test_get_account_balance_default(self, client: MockBtcTurkRestClient) -> None:
        """기본 잔고 조회"""
        balances = await client.get_account_balance()

        assert balances == [
            {
                "asset": "TRY",
                "assetname": "TRY",
                "balance": "10000",
                "locked": "0",
                "free": "10000",
            }
        ]

    @pytest.mark.asyncio
    async def test_set_balance(self, client: MockBtcTurkRestClient) -> None:
        """잔고 설정 및 조회"""
        client.set_balance("BTC", "1.5", "0.5")

        balances = await client.get_account_balance()
        btc = next(b for b in balances if b["asset"] == "BTC")

        assert btc["balance"] == "2.0"
        assert btc["free"] == "1.5"

    @pytest.mark.asyncio
    async def test_private_requires_credentials(self) -> None:
        """인증 정보 없으면 Private 호출 거부"""
        client = MockBtcTurkRestClient(credentials=Credentials())

        with pytest.raises(CredentialsMissingError):
            await client.get_account_balance()

        with pytest.raises(CredentialsMissingError):
            await client.submit_market_order("BTC-TRY", "buy", "1")

        # Public은 허용
        assert await client.get_pair("BTC-TRY")

    # -------------------------------------------------------------------------
    # 주문
    # -------------------------------------------------------------------------

    @pytest.mark.asyncio
    async def test_submit_limit_order(self, client: MockBtcTurkRestClient) -> None:
        """지정가 주문 생성"""
        order = await client.submit_limit_order("BTC-TRY", "buy", "100000", "0.01")

        assert order["id"] == 1
        assert order["pairSymbol"] == "BTCTRY"
        assert order["method"] == "limit"
        assert order["price"] == "100000"
        assert order["status"] == "Untouched"

    @pytest.mark.asyncio
    async def test_submit_stop_limit_order(self, client: MockBtcTurkRestClient) -> None:
        """스탑 리밋 주문 생성"""
        order = await client.submit_stop_limit_order("BTC-TRY", "sell", "90000", "89000", "0.01")

        assert order["method"] == "stopLimit"
        assert order["stopPrice"] == "90000"
        assert order["price"] == "89000"

    @pytest.mark.asyncio
    async def test_open_orders_split_by_side(self, client: MockBtcTurkRestClient) -> None:
        """미체결 주문은 bids/asks로 분리"""
        await client.submit_limit_order("BTC-TRY", "buy", "99000", "0.01")
        await client.submit_stop_market_order("BTC-TRY", "sell", "90000", "0.01")
        await client.submit_market_order("ETH-TRY", "buy", "1")

        open_orders = await client.get_open_orders("BTC-TRY")

        assert len(open_orders["bids"]) == 1
        assert len(open_orders["asks"]) == 1
        assert len(await client.get_all_orders("ETH-TRY")) == 1

    @pytest.mark.asyncio
    async def test_place_order_request(self, client: MockBtcTurkRestClient) -> None:
        """OrderRequest 직접 전달"""
        order = await client.place_order(OrderRequest.market("BTCTRY", "sell", "0.2"))

        assert order["type"] == "sell"
        assert order["quantity"] == "0.2"

    @pytest.mark.asyncio
    async def test_fail_next_order(self, client: MockBtcTurkRestClient) -> None:
        """주문 실패 시뮬레이션 (1회)"""
        client.set_fail_next_order(422, "Unprocessable Entity")

        with pytest.raises(RemoteError) as exc_info:
            await client.submit_market_order("BTC-TRY", "buy", "1")

        assert exc_info.value.status_code == 422
        assert exc_info.value.status_text == "Unprocessable Entity"

        # 다음 주문은 성공
        order = await client.submit_market_order("BTC-TRY", "buy", "1")
        assert order["id"] == 1

    @pytest.mark.asyncio
    async def test_cancel_order(self, client: MockBtcTurkRestClient) -> None:
        """주문 취소는 본문 전체 반환"""
        order = await client.submit_limit_order("BTC-TRY", "buy", "99000", "0.01")

        result = await client.cancel_order(order["id"])

        assert result == {"success": True, "message": "SUCCESS", "code": 0}
        assert client.state.orders[order["id"]]["status"] == "Canceled"
        assert (await client.get_open_orders("BTC-TRY"))["bids"] == []

    @pytest.mark.asyncio
    async def test_cancel_unknown_order(self, client: MockBtcTurkRestClient) -> None:
        """없는 주문 취소"""
        with pytest.raises(RemoteError) as exc_info:
            await client.cancel_order(999)

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_cancel_accepts_string_id(self, client: MockBtcTurkRestClient) -> None:
        """문자열 주문 ID 허용"""
        order = await client.submit_market_order("BTC-TRY", "buy", "1")

        result = await client.cancel_order(str(order["id"]))

        assert result["success"] is True

    # -------------------------------------------------------------------------
    # 상태
    # -------------------------------------------------------------------------

    @pytest.mark.asyncio
    async def test_calls_recorded(self, client: MockBtcTurkRestClient) -> None:
        """호출 기록"""
        await client.get_trades("BTC-TRY")
        await client.get_ohlc("BTC-TRY", 3)

        assert client.state.calls == [
            ("get_trades", ("BTC-TRY",)),
            ("get_ohlc", ("BTC-TRY", 3)),
        ]

    def test_shared_state(self) -> None:
        """외부 상태 주입"""
        state = MockState(last_prices={"ETH-TRY": "50000"})
        client = MockBtcTurkRestClient(state=state)

        assert client.state is state
        assert "BTC-TRY" not in state.last_prices

    @pytest.mark.asyncio
    async def test_close(self, client: MockBtcTurkRestClient) -> None:
        """close 호출"""
        await client.close()

        assert client.closed is True
