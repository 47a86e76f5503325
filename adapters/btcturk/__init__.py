"""
BtcTurk 어댑터

BtcTurk REST API 연동을 담당.
요청 서명, 거래쌍 표기 변환, 응답/에러 정규화 포함.
"""

from adapters.btcturk.rest_client import BtcTurkRestClient
from adapters.btcturk.dispatcher import RequestDispatcher
from adapters.btcturk.signer import build_auth_headers, sign, sign_request
from adapters.btcturk.symbols import (
    parse_pair,
    split_compact,
    to_compact,
    to_delimited,
    to_wire_form,
)
from adapters.btcturk.errors import (
    BtcTurkError,
    CredentialsError,
    CredentialsMissingError,
    InvalidCredentialsError,
    InvalidResponseError,
    InvalidSymbolError,
    RemoteError,
    TransportError,
)

__all__ = [
    "BtcTurkRestClient",
    "RequestDispatcher",
    "build_auth_headers",
    "sign",
    "sign_request",
    "parse_pair",
    "split_compact",
    "to_compact",
    "to_delimited",
    "to_wire_form",
    "BtcTurkError",
    "CredentialsError",
    "CredentialsMissingError",
    "InvalidCredentialsError",
    "InvalidResponseError",
    "InvalidSymbolError",
    "RemoteError",
    "TransportError",
]
