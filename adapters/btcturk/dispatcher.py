"""
BtcTurk 요청 디스패처

GET / 인증 GET / POST / DELETE 요청 실행과 응답 정규화.
- 2xx: envelope의 data 반환 (DELETE는 본문 전체 반환)
- 그 외: RemoteError(status_code, status_text)
- 응답 전 실패: TransportError

재시도/백오프 없음. 인증 헤더는 요청마다 새로 생성.
"""

import logging
from typing import Any, Callable

import httpx

from adapters.btcturk.errors import (
    InvalidResponseError,
    RemoteError,
    TransportError,
)
from adapters.btcturk.signer import build_auth_headers
from adapters.models import Credentials
from core.constants import AuthHeaders, Defaults
from core.utils.clock import now_ms

logger = logging.getLogger(__name__)


def _mask(value: str | None) -> str:
    """로그용 키 마스킹"""
    if not value:
        return ""
    return f"{value[:4]}***"


class RequestDispatcher:
    """BtcTurk HTTP 요청 디스패처

    Args:
        base_url: REST API 베이스 URL
        credentials: API 인증 정보 (Public 전용이면 빈 Credentials)
        timeout: 요청 타임아웃 (초)
        transport: httpx 전송 계층 (테스트용 주입)
        clock: 밀리초 타임스탬프 함수 (서명 nonce)
    """

    def __init__(
        self,
        base_url: str,
        credentials: Credentials | None = None,
        timeout: float = Defaults.REQUEST_TIMEOUT_SEC,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], int] = now_ms,
    ):
        self.base_url = base_url.rstrip("/")
        self.credentials = credentials or Credentials()
        self.timeout = timeout
        self._transport = transport
        self._clock = clock
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    def _auth_headers(self) -> dict[str, str]:
        """인증 헤더 생성 (캐시하지 않음)"""
        return build_auth_headers(self.credentials, self._clock)

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        signed: bool = False,
        unwrap: bool = True,
    ) -> Any:
        """API 요청 실행

        Args:
            method: HTTP 메서드 (GET, POST, DELETE)
            path: API 경로 (예: /api/v2/ticker)
            params: 쿼리 파라미터
            body: JSON 본문
            signed: 인증 헤더 필요 여부
            unwrap: envelope의 data만 반환할지 여부

        Returns:
            data 필드 또는 응답 본문 전체

        Raises:
            CredentialsMissingError: 인증 정보 없이 signed 요청 시 (네트워크 호출 전)
            TransportError: 응답 수신 전 실패 시
            RemoteError: 2xx가 아닌 응답 시
            InvalidResponseError: 2xx 응답이 envelope 형식이 아닐 때
        """
        # 인증 정보 확인이 네트워크 호출보다 먼저
        headers = self._auth_headers() if signed else {}
        url = f"{self.base_url}{path}"
        client = await self._get_client()

        logger.debug(
            "BtcTurk request",
            extra={
                "method": method,
                "path": path,
                "params": params,
                "signed": signed,
                "api_key": _mask(headers.get(AuthHeaders.API_KEY)),
            },
        )

        try:
            response = await client.request(
                method,
                url,
                params=params,
                json=body,
                headers=headers,
            )
        except httpx.TimeoutException as e:
            logger.warning(
                "Request timeout",
                extra={"method": method, "path": path},
            )
            raise TransportError(
                f"Request timed out: {method} {path}",
                method=method,
                path=path,
            ) from e
        except httpx.RequestError as e:
            logger.error(
                "Request error",
                extra={"method": method, "path": path, "error": str(e)},
            )
            raise TransportError(
                f"Request failed: {method} {path}: {e}",
                method=method,
                path=path,
            ) from e

        if not 200 <= response.status_code < 300:
            logger.warning(
                "BtcTurk error response",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                },
            )
            raise RemoteError(
                status_code=response.status_code,
                status_text=response.reason_phrase,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise InvalidResponseError(
                f"Response body is not JSON: {method} {path}"
            ) from e

        if not unwrap:
            return payload

        if not isinstance(payload, dict) or "data" not in payload:
            raise InvalidResponseError(
                f"Response envelope has no 'data' field: {method} {path}"
            )
        return payload["data"]

    # -------------------------------------------------------------------------
    # 공개 메서드
    # -------------------------------------------------------------------------

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Public GET 요청 (인증 헤더 없음)"""
        return await self._request("GET", path, params=params)

    async def get_authenticated(
        self,
        path: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Private GET 요청"""
        return await self._request("GET", path, params=params, signed=True)

    async def post(self, path: str, body: dict[str, Any]) -> Any:
        """Private POST 요청 (항상 인증)"""
        return await self._request("POST", path, body=body, signed=True)

    async def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Private DELETE 요청 (항상 인증)

        주의: 다른 메서드와 달리 envelope의 data가 아니라 본문 전체를 반환.
        거래소 응답 계약을 그대로 유지하기 위함.
        """
        return await self._request(
            "DELETE",
            path,
            params=params,
            signed=True,
            unwrap=False,
        )
