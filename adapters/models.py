"""
어댑터 공통 데이터 모델

인증 정보, 서명 결과, 주문 요청 등 요청 구성에 쓰이는 값 객체.
금액/수량은 호출자가 넘긴 문자열 또는 Decimal 그대로 전달.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from core.types import OrderMethod, OrderType


@dataclass(frozen=True)
class Credentials:
    """API 인증 정보

    클라이언트 생성 시 한 번 주입되며 이후 변경 불가.
    둘 다 없으면 Public 엔드포인트만 사용 가능.

    Attributes:
        api_key: API 공개 키 (X-PCK 헤더 값)
        api_secret: Base64 인코딩된 API 시크릿
    """

    api_key: str | None = None
    api_secret: str | None = field(default=None, repr=False)

    @property
    def is_complete(self) -> bool:
        """키와 시크릿이 모두 있는지 여부"""
        return bool(self.api_key) and bool(self.api_secret)


@dataclass(frozen=True)
class SignedRequest:
    """요청 1건에 대한 서명 결과

    요청마다 새로 생성하며 재사용하지 않음.

    Attributes:
        timestamp: 서명 시각 (Unix 밀리초)
        signature: Base64 인코딩된 HMAC-SHA256 서명
    """

    timestamp: int
    signature: str


Amount = Decimal | str


def format_amount(value: Amount) -> str:
    """금액/수량을 요청 본문용 문자열로 변환

    Decimal은 지수 표기 없이 고정 소수점으로 (1E-8 → 0.00000001),
    문자열은 그대로 전달.
    """
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _to_decimal(value: Amount, name: str) -> Decimal:
    try:
        number = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"{name} must be numeric: {value!r}") from e
    if not number.is_finite():
        raise ValueError(f"{name} must be finite: {value!r}")
    return number


@dataclass(frozen=True)
class OrderRequest:
    """주문 요청

    POST /api/v1/order 본문으로 변환되는 주문 의도.
    제출할 때마다 새로 생성.

    Attributes:
        pair_symbol: 거래쌍 (구분자 없는 형식, 예: BTCTRY)
        order_type: 주문 방향 (buy / sell)
        order_method: 주문 방식 (market / limit / stopMarket / stopLimit)
        quantity: 주문 수량
        price: 지정가 (limit, stopLimit 필수)
        stop_price: 트리거 가격 (stopMarket, stopLimit 필수)
    """

    pair_symbol: str
    order_type: str  # buy / sell
    order_method: str  # market / limit / stopMarket / stopLimit
    quantity: Amount
    price: Amount | None = None
    stop_price: Amount | None = None

    def __post_init__(self) -> None:
        """유효성 검증"""
        if not self.pair_symbol:
            raise ValueError("pair_symbol is required")

        # 주문 방향/방식은 Enum 값이어야 함
        OrderType(self.order_type)
        method = OrderMethod(self.order_method)

        # 수량은 양수여야 함
        if _to_decimal(self.quantity, "quantity") <= Decimal("0"):
            raise ValueError("quantity must be positive")

        # 지정가 주문은 가격 필수
        if method in (OrderMethod.LIMIT, OrderMethod.STOP_LIMIT) and self.price is None:
            raise ValueError(f"price is required for {method.value} orders")

        # 스탑 주문은 stop_price 필수
        if (
            method in (OrderMethod.STOP_MARKET, OrderMethod.STOP_LIMIT)
            and self.stop_price is None
        ):
            raise ValueError(f"stop_price is required for {method.value} orders")

        if self.price is not None:
            _to_decimal(self.price, "price")
        if self.stop_price is not None:
            _to_decimal(self.stop_price, "stop_price")

    @classmethod
    def market(
        cls,
        pair_symbol: str,
        order_type: str,
        quantity: Amount,
    ) -> "OrderRequest":
        """시장가 주문 생성"""
        return cls(
            pair_symbol=pair_symbol,
            order_type=_enum_value(order_type),
            order_method=OrderMethod.MARKET.value,
            quantity=quantity,
        )

    @classmethod
    def limit(
        cls,
        pair_symbol: str,
        order_type: str,
        price: Amount,
        quantity: Amount,
    ) -> "OrderRequest":
        """지정가 주문 생성"""
        return cls(
            pair_symbol=pair_symbol,
            order_type=_enum_value(order_type),
            order_method=OrderMethod.LIMIT.value,
            quantity=quantity,
            price=price,
        )

    @classmethod
    def stop_market(
        cls,
        pair_symbol: str,
        order_type: str,
        stop_price: Amount,
        quantity: Amount,
    ) -> "OrderRequest":
        """스탑 마켓 주문 생성"""
        return cls(
            pair_symbol=pair_symbol,
            order_type=_enum_value(order_type),
            order_method=OrderMethod.STOP_MARKET.value,
            quantity=quantity,
            stop_price=stop_price,
        )

    @classmethod
    def stop_limit(
        cls,
        pair_symbol: str,
        order_type: str,
        stop_price: Amount,
        limit_price: Amount,
        quantity: Amount,
    ) -> "OrderRequest":
        """스탑 리밋 주문 생성 (limit_price는 price 필드로 전송)"""
        return cls(
            pair_symbol=pair_symbol,
            order_type=_enum_value(order_type),
            order_method=OrderMethod.STOP_LIMIT.value,
            quantity=quantity,
            price=limit_price,
            stop_price=stop_price,
        )

    def to_body(self) -> dict[str, Any]:
        """딕셔너리로 변환 (API 요청 본문용)"""
        result: dict[str, Any] = {
            "quantity": format_amount(self.quantity),
            "orderMethod": self.order_method,
            "orderType": self.order_type,
            "pairSymbol": self.pair_symbol,
        }

        if self.price is not None:
            result["price"] = format_amount(self.price)

        if self.stop_price is not None:
            result["stopPrice"] = format_amount(self.stop_price)

        return result


def _enum_value(value: str) -> str:
    """Enum 또는 문자열을 문자열 값으로 변환"""
    return value.value if isinstance(value, OrderType) else value
