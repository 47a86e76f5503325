#!/usr/bin/env python3
"""
시장 스냅샷 스크립트

BtcTurk 연결 확인용 최소 흐름:
1. secrets.yaml 로드 (없으면 Public 전용, Production 호스트)
2. 티커 / 호가창 / OHLC 조회
3. API 키가 있으면 잔고와 미체결 주문 조회

사용법:
    python scripts/market_snapshot.py --pair BTC-TRY
    python scripts/market_snapshot.py --pair ETH-TRY --secrets config/secrets.yaml --depth 5
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adapters.btcturk.errors import BtcTurkError
from adapters.btcturk.rest_client import BtcTurkRestClient
from core.config.loader import ExchangeConfig, SecretsLoadError, get_settings
from core.constants import BtcTurkEndpoints, Defaults, Paths
from core.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """명령행 인자 파싱"""
    parser = argparse.ArgumentParser(description="BtcTurk 시장 스냅샷")
    parser.add_argument("--pair", default="BTC-TRY", help="거래쌍 (예: BTC-TRY)")
    parser.add_argument(
        "--depth",
        type=int,
        default=Defaults.ORDER_BOOK_COUNT,
        help="호가 / 캔들 개수",
    )
    parser.add_argument(
        "--secrets",
        type=Path,
        default=Paths.SECRETS_FILE,
        help="secrets.yaml 경로",
    )
    parser.add_argument("--verbose", action="store_true", help="DEBUG 로그 출력")
    return parser.parse_args(argv)


def resolve_config(secrets_path: Path) -> ExchangeConfig:
    """설정 로드 (파일이 없으면 Public 전용 Production 설정)"""
    try:
        settings = get_settings(secrets_path)
    except SecretsLoadError as e:
        logger.warning(f"secrets 로드 실패, Public 전용으로 진행: {e}")
        return ExchangeConfig(rest_url=BtcTurkEndpoints.PROD_REST_URL)
    return settings.exchange_config


def dump(title: str, data: Any) -> None:
    print(f"\n=== {title} ===")
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


async def run(args: argparse.Namespace) -> int:
    config = resolve_config(args.secrets)

    async with BtcTurkRestClient.from_config(config) as client:
        try:
            dump("ticker", await client.get_pair(args.pair))
            dump("orderbook", await client.get_order_book(args.pair, args.depth))
            dump("ohlc", await client.get_ohlc(args.pair, args.depth))

            if client.credentials.is_complete:
                dump("balances", await client.get_account_balance())
                dump("open orders", await client.get_open_orders(args.pair))
            else:
                logger.info("API 키 없음, Private 조회 생략")
        except BtcTurkError as e:
            logger.error(f"조회 실패: {e}")
            return 1

    return 0


def main() -> None:
    args = parse_args()
    setup_logging(
        "snapshot",
        console_level=logging.DEBUG if args.verbose else logging.INFO,
    )
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
