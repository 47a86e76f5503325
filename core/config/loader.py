"""
설정 로더

secrets.yaml 로드 및 거래소 설정 생성.
API 키는 선택 사항 (없으면 Public 엔드포인트만 사용 가능).
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from adapters.models import Credentials
from core.constants import BtcTurkEndpoints, Paths
from core.types import TradingMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Secrets:
    """보안 설정 (secrets.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    mode: TradingMode
    api_key: str | None = None
    api_secret: str | None = field(default=None, repr=False)

    @property
    def has_credentials(self) -> bool:
        """API 키/시크릿이 모두 있는지 여부"""
        return bool(self.api_key) and bool(self.api_secret)


@dataclass(frozen=True)
class ExchangeConfig:
    """거래소 연결 설정

    REST 호스트와 (선택적) API 키 정보를 포함
    """

    rest_url: str
    api_key: str | None = None
    api_secret: str | None = field(default=None, repr=False)

    @property
    def credentials(self) -> Credentials:
        """클라이언트에 전달할 인증 정보"""
        return Credentials(api_key=self.api_key, api_secret=self.api_secret)


class SecretsLoadError(Exception):
    """Secrets 로드 실패 예외"""

    pass


def load_secrets(path: Path | None = None) -> Secrets:
    """secrets.yaml 파일 로드

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Secrets 인스턴스

    Raises:
        SecretsLoadError: 파일이 없거나 형식이 잘못된 경우
        ValueError: 유효하지 않은 mode인 경우
    """
    if path is None:
        path = Paths.SECRETS_FILE

    if not path.exists():
        raise SecretsLoadError(f"secrets.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SecretsLoadError(f"secrets.yaml 파싱 실패: {e}") from e

    if data is None:
        raise SecretsLoadError("secrets.yaml이 비어 있습니다")

    if not isinstance(data, dict):
        raise SecretsLoadError("secrets.yaml 최상위는 매핑이어야 합니다")

    # mode 검증
    mode_str = data.get("mode")
    if mode_str is None:
        raise SecretsLoadError("secrets.yaml에 'mode' 필드가 없습니다")

    try:
        mode = TradingMode(mode_str)
    except ValueError as e:
        valid_modes = [m.value for m in TradingMode]
        raise ValueError(
            f"유효하지 않은 mode입니다: '{mode_str}'. "
            f"유효한 값: {valid_modes}"
        ) from e

    # 해당 모드의 API 키 로드 (없으면 Public 전용)
    mode_config = data.get(mode.value) or {}
    if not isinstance(mode_config, dict):
        raise SecretsLoadError(
            f"secrets.yaml의 '{mode.value}' 섹션은 매핑이어야 합니다"
        )

    api_key = mode_config.get("api_key") or None
    api_secret = mode_config.get("api_secret") or None

    if api_key is None or api_secret is None:
        logger.info(
            "API 키가 설정되지 않음, Public 엔드포인트만 사용 가능",
            extra={"mode": mode.value},
        )

    return Secrets(
        mode=mode,
        api_key=api_key,
        api_secret=api_secret,
    )


def get_exchange_config(secrets: Secrets) -> ExchangeConfig:
    """모드에 따른 거래소 설정 반환

    Args:
        secrets: Secrets 인스턴스

    Returns:
        ExchangeConfig 인스턴스 (Production 또는 Test 호스트)
    """
    if secrets.mode == TradingMode.PRODUCTION:
        rest_url = BtcTurkEndpoints.PROD_REST_URL
    else:
        rest_url = BtcTurkEndpoints.TEST_REST_URL

    return ExchangeConfig(
        rest_url=rest_url,
        api_key=secrets.api_key,
        api_secret=secrets.api_secret,
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    secrets.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _secrets: Secrets | None = None

    def __new__(cls, secrets_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, secrets_path: Path | None = None) -> None:
        if self._secrets is None:
            self._secrets = load_secrets(secrets_path)

    @property
    def mode(self) -> TradingMode:
        """현재 거래 모드"""
        assert self._secrets is not None
        return self._secrets.mode

    @property
    def has_credentials(self) -> bool:
        """Private 엔드포인트 사용 가능 여부"""
        assert self._secrets is not None
        return self._secrets.has_credentials

    @property
    def exchange_config(self) -> ExchangeConfig:
        """현재 모드의 거래소 설정"""
        assert self._secrets is not None
        return get_exchange_config(self._secrets)

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._secrets = None


def get_settings(secrets_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        secrets_path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(secrets_path)
