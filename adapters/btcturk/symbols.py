"""
거래쌍 표기 변환

라이브러리 표기 'BASE-QUOTE' (예: BTC-TRY)를 거래소 표기로 변환.
- 쿼리 파라미터: 'BASE_QUOTE' (BTC_TRY)
- 주문 본문: 'BASEQUOTE' (BTCTRY)
"""

import re

from adapters.btcturk.errors import InvalidSymbolError

PAIR_SEPARATOR = "-"
DELIMITED = "_"
COMPACT = ""

# 1INCH 처럼 숫자로 시작하는 티커가 있으므로 숫자 허용
_TICKER_RE = re.compile(r"^[A-Z0-9]+$")


def parse_pair(pair: str) -> tuple[str, str]:
    """'BASE-QUOTE'를 (base, quote)로 분리

    Raises:
        InvalidSymbolError: '-'가 정확히 하나가 아니거나 한쪽이 비었거나
            대문자/숫자 이외 문자가 있는 경우
    """
    if not isinstance(pair, str):
        raise InvalidSymbolError(pair, "pair must be a string")

    count = pair.count(PAIR_SEPARATOR)
    if count != 1:
        raise InvalidSymbolError(
            pair, f"expected exactly one '{PAIR_SEPARATOR}', found {count}"
        )

    base, quote = pair.split(PAIR_SEPARATOR)
    if not base or not quote:
        raise InvalidSymbolError(pair, "base and quote must not be empty")

    for ticker in (base, quote):
        if not _TICKER_RE.match(ticker):
            raise InvalidSymbolError(
                pair, f"ticker {ticker!r} must be uppercase letters or digits"
            )

    return base, quote


def to_wire_form(pair: str, delimiter: str) -> str:
    """거래소 표기로 변환

    Args:
        pair: 'BASE-QUOTE' 형식 거래쌍
        delimiter: '_' (쿼리 파라미터) 또는 '' (주문 본문)

    Returns:
        base + delimiter + quote
    """
    if delimiter not in (DELIMITED, COMPACT):
        raise ValueError(f"delimiter must be '{DELIMITED}' or empty, got {delimiter!r}")

    base, quote = parse_pair(pair)
    return f"{base}{delimiter}{quote}"


def to_delimited(pair: str) -> str:
    """'BTC-TRY' → 'BTC_TRY'"""
    return to_wire_form(pair, DELIMITED)


def to_compact(pair: str) -> str:
    """'BTC-TRY' → 'BTCTRY'"""
    return to_wire_form(pair, COMPACT)


def split_compact(compact: str, base_length: int) -> str:
    """구분자 없는 표기를 'BASE-QUOTE'로 복원

    compact 표기만으로는 경계를 알 수 없으므로 base 길이가 필요.

    Example:
        >>> split_compact("BTCTRY", 3)
        'BTC-TRY'
    """
    if not 0 < base_length < len(compact):
        raise InvalidSymbolError(
            compact, f"base_length {base_length} out of range for {len(compact)} characters"
        )

    pair = f"{compact[:base_length]}{PAIR_SEPARATOR}{compact[base_length:]}"
    parse_pair(pair)
    return pair
