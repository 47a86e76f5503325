"""
BtcTurk 클라이언트 에러

호출자에게는 httpx 예외 대신 아래의 작은 에러 객체만 전달.
- CredentialsMissingError: 인증 정보 없이 Private 엔드포인트 호출
- InvalidSymbolError: 잘못된 거래쌍 표기
- TransportError: 응답 수신 전 실패 (DNS, 연결 거부, 타임아웃)
- RemoteError: 2xx가 아닌 HTTP 응답
"""

from typing import Any


class BtcTurkError(Exception):
    """BtcTurk 클라이언트 에러 기본 클래스"""


class CredentialsError(BtcTurkError):
    """인증 정보 관련 에러"""


class CredentialsMissingError(CredentialsError):
    """인증 정보 없음

    네트워크 호출 전에 발생하는 호출자 오류.
    """

    def __init__(self, message: str = "API key and secret are required for private endpoints"):
        self.message = message
        super().__init__(message)


class InvalidCredentialsError(CredentialsError):
    """API 시크릿이 Base64 형식이 아님"""


class InvalidSymbolError(BtcTurkError, ValueError):
    """잘못된 거래쌍 표기

    'BASE-QUOTE' 형식이 아닌 경우 발생.
    """

    def __init__(self, pair: Any, reason: str):
        self.pair = pair
        self.reason = reason
        super().__init__(f"Invalid pair symbol {pair!r}: {reason}")


class TransportError(BtcTurkError):
    """전송 계층 에러

    응답을 받기 전에 실패한 경우 (DNS, 연결 거부, 타임아웃).
    원본 httpx 예외는 __cause__로 연결됨.
    """

    def __init__(self, message: str, method: str | None = None, path: str | None = None):
        self.message = message
        self.method = method
        self.path = path
        super().__init__(message)


class RemoteError(BtcTurkError):
    """거래소 에러 응답

    2xx가 아닌 HTTP 응답을 상태 코드와 상태 텍스트만 남겨 정규화.
    """

    def __init__(self, status_code: int, status_text: str):
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"BtcTurk API Error [{status_code}]: {status_text}")

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            "statusCode": self.status_code,
            "statusText": self.status_text,
        }


class InvalidResponseError(BtcTurkError):
    """2xx 응답이지만 JSON envelope 형식이 아님"""
