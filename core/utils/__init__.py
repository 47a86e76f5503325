"""
유틸리티 패키지

시각/타임스탬프 처리 등 공통 유틸리티
"""

from core.utils.clock import now_ms, to_timestamp_ms

__all__ = [
    "now_ms",
    "to_timestamp_ms",
]
