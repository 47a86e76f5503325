"""
어댑터 테스트 픽스처

공통 테스트 설정 및 픽스처 제공.
"""

import json
from typing import Any, Callable

import httpx
import pytest

from adapters.models import Credentials, OrderRequest
from adapters.mock.exchange_client import MockBtcTurkRestClient
from core.types import OrderType


# 서명 검증용 고정값 (secret = base64("secret-key-bytes"))
FIXED_API_KEY = "myapikey"
FIXED_API_SECRET = "c2VjcmV0LWtleS1ieXRlcw=="
FIXED_TIMESTAMP = 1700000000000
FIXED_SIGNATURE = "6rwE0zEkNW2iDl+J1CiQ9TBElcHtooNk1zxqPgsLM1w="


# -------------------------------------------------------------------------
# 공통 데이터 픽스처
# -------------------------------------------------------------------------

@pytest.fixture
def credentials() -> Credentials:
    """서명 검증용 인증 정보"""
    return Credentials(api_key=FIXED_API_KEY, api_secret=FIXED_API_SECRET)


@pytest.fixture
def fixed_clock() -> Callable[[], int]:
    """고정 시각 함수"""
    return lambda: FIXED_TIMESTAMP


@pytest.fixture
def sample_limit_request() -> OrderRequest:
    """샘플 지정가 주문 요청"""
    return OrderRequest.limit("BTCTRY", OrderType.BUY, "100000", "0.01")


@pytest.fixture
def ticker_envelope() -> dict[str, Any]:
    """티커 응답 envelope"""
    return {
        "data": [
            {
                "pair": "BTCTRY",
                "pairNormalized": "BTC_TRY",
                "timestamp": FIXED_TIMESTAMP,
                "last": "1000000",
                "bid": "999990",
                "ask": "1000010",
            }
        ],
        "success": True,
        "message": None,
        "code": 0,
    }


@pytest.fixture
def cancel_envelope() -> dict[str, Any]:
    """주문 취소 응답 (data 없음)"""
    return {"success": True, "message": "SUCCESS", "code": 0}


# -------------------------------------------------------------------------
# Mock 픽스처
# -------------------------------------------------------------------------

@pytest.fixture
def mock_rest_client() -> MockBtcTurkRestClient:
    """Mock REST 클라이언트"""
    return MockBtcTurkRestClient()


class RecordingTransport:
    """httpx.MockTransport 기반 요청 기록기

    handler가 반환할 응답을 지정하고, 받은 요청을 requests에 저장.
    """

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        content: bytes | None = None,
    ):
        self.status_code = status_code
        self.payload = payload if payload is not None else {"data": None}
        self.content = content
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    """RecordingTransport 팩토리"""
    return RecordingTransport
