"""
시각 유틸리티

서명 nonce로 사용하는 Unix 밀리초 타임스탬프 헬퍼
"""

from datetime import datetime, timezone


def to_timestamp_ms(dt: datetime) -> int:
    """datetime을 밀리초 타임스탬프로 변환

    Args:
        dt: datetime 객체 (naive면 UTC로 간주)

    Returns:
        Unix 타임스탬프 (밀리초, 정수)

    Example:
        >>> to_timestamp_ms(datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc))
        1700000000000
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    # 부동소수점 오차를 피하기 위해 정수 연산
    delta = dt - datetime(1970, 1, 1, tzinfo=timezone.utc)
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def now_ms() -> int:
    """현재 시각의 Unix 밀리초 타임스탬프"""
    return to_timestamp_ms(datetime.now(timezone.utc))
