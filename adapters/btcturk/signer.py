"""
BtcTurk 요청 서명

HMAC-SHA256 서명과 인증 헤더 생성.

서명 절차 (각 단계는 독립적으로 테스트 가능한 순수 함수):
1. decode_secret: Base64 시크릿 → 원본 키 바이트
2. build_message: api_key + 밀리초 타임스탬프 (구분자 없음) → UTF-8 바이트
3. compute_digest: HMAC-SHA256 원본 다이제스트
4. encode_signature: 다이제스트 → Base64 문자열

타임스탬프가 nonce 역할을 하므로 인증 헤더는 요청마다 새로 생성해야 함.
"""

import base64
import binascii
import hashlib
import hmac
from typing import Callable

from adapters.btcturk.errors import CredentialsMissingError, InvalidCredentialsError
from adapters.models import Credentials, SignedRequest
from core.constants import AuthHeaders
from core.utils.clock import now_ms


def decode_secret(api_secret: str) -> bytes:
    """Base64 시크릿을 HMAC 키 바이트로 디코딩

    Raises:
        InvalidCredentialsError: Base64 형식이 아닌 경우
    """
    try:
        return base64.b64decode(api_secret, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidCredentialsError("API secret is not valid base64") from e


def build_message(api_key: str, timestamp_ms: int) -> bytes:
    """서명 대상 메시지 생성

    Args:
        api_key: API 공개 키
        timestamp_ms: Unix 밀리초 타임스탬프 (정수, 소수부 없음)

    Returns:
        f"{api_key}{timestamp_ms}"의 UTF-8 바이트
    """
    if isinstance(timestamp_ms, bool) or not isinstance(timestamp_ms, int):
        raise ValueError(f"timestamp_ms must be an int, got {type(timestamp_ms).__name__}")
    if timestamp_ms < 0:
        raise ValueError("timestamp_ms must not be negative")
    return f"{api_key}{timestamp_ms}".encode("utf-8")


def compute_digest(key: bytes, message: bytes) -> bytes:
    """HMAC-SHA256 원본 다이제스트 (32바이트)"""
    return hmac.new(key, message, hashlib.sha256).digest()


def encode_signature(digest: bytes) -> str:
    """다이제스트를 Base64 문자열로 인코딩"""
    return base64.b64encode(digest).decode("ascii")


def sign(api_key: str, api_secret: str, timestamp_ms: int) -> str:
    """HMAC-SHA256 서명 생성

    Args:
        api_key: API 공개 키
        api_secret: Base64 인코딩된 API 시크릿
        timestamp_ms: 서명 시각 (Unix 밀리초)

    Returns:
        Base64 서명 문자열 (X-Signature 헤더 값)
    """
    key = decode_secret(api_secret)
    message = build_message(api_key, timestamp_ms)
    return encode_signature(compute_digest(key, message))


def sign_request(
    credentials: Credentials,
    clock: Callable[[], int] = now_ms,
) -> SignedRequest:
    """현재 시각으로 서명 1건 생성

    clock은 정확히 한 번만 호출하며, 그 값이 서명 대상이자 X-Stamp 값.

    Raises:
        CredentialsMissingError: 키 또는 시크릿이 없는 경우
        InvalidCredentialsError: 키가 HTTP 헤더에 담을 수 없는 문자를 포함한 경우
    """
    if not credentials.is_complete:
        raise CredentialsMissingError()

    # X-PCK 헤더 값은 ASCII만 가능
    if not credentials.api_key.isascii():
        raise InvalidCredentialsError("API key must contain only ASCII characters")

    timestamp = clock()
    signature = sign(credentials.api_key, credentials.api_secret, timestamp)
    return SignedRequest(timestamp=timestamp, signature=signature)


def build_auth_headers(
    credentials: Credentials,
    clock: Callable[[], int] = now_ms,
) -> dict[str, str]:
    """인증 헤더 생성 (X-PCK, X-Stamp, X-Signature)

    캐시하지 않음. 인증 요청마다 호출해야 함.
    """
    signed = sign_request(credentials, clock)
    return {
        AuthHeaders.API_KEY: credentials.api_key,
        AuthHeaders.STAMP: str(signed.timestamp),
        AuthHeaders.SIGNATURE: signed.signature,
    }
