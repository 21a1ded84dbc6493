"""
core/config.py - 중앙 설정 관리

체크 전체에서 사용하는 상수와 환경변수 헬퍼를 한 곳에 모읍니다.

Usage:
    from core.config import settings, get_default_region, LogConfig

    period = settings.DEFAULT_PERIOD          # 60
    region = get_default_region()             # "us-east-1" 또는 None
    log_config = LogConfig.from_env()         # LOG_LEVEL / LOG_FORMAT 반영
"""

from __future__ import annotations

import os
from dataclasses import dataclass

__version__ = "1.0.0"

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


@dataclass(frozen=True)
class Settings:
    """체크 기본 설정 (불변)

    Attributes:
        PROG_NAME: 사용법/파싱 오류 출력에 쓰이는 프로그램 이름
        DEFAULT_PERIOD: 집계 주기 기본값 (초)
        SERVICE_NAME: boto3 서비스 이름
        OPERATION_NAME: 호출하는 CloudWatch API
        ENDPOINT_TEMPLATE: 일반 리전 CloudWatch 엔드포인트
        CHINA_ENDPOINT_TEMPLATE: 중국 리전(cn-*) CloudWatch 엔드포인트
        VERBOSE_ENV: verbose 로깅을 켜는 환경변수 이름
    """

    PROG_NAME: str = "check_cloudwatch"
    DEFAULT_PERIOD: int = 60
    SERVICE_NAME: str = "cloudwatch"
    OPERATION_NAME: str = "get_metric_statistics"
    ENDPOINT_TEMPLATE: str = "https://monitoring.{region}.amazonaws.com"
    CHINA_ENDPOINT_TEMPLATE: str = "https://monitoring.{region}.amazonaws.com.cn"
    VERBOSE_ENV: str = "CHECK_CLOUDWATCH_VERBOSE"


settings = Settings()


def get_version() -> str:
    """패키지 버전 문자열 반환"""
    return __version__


# =============================================================================
# 환경변수 헬퍼
# =============================================================================


def get_default_region() -> str | None:
    """환경변수에서 기본 리전 조회

    AWS_REGION → AWS_DEFAULT_REGION 순서로 확인하며, 둘 다 없으면 None.
    None이면 리전은 빈 값으로 남고, 실패는 메트릭 조회 시점에 드러납니다.
    """
    return os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or None


def get_default_profile() -> str | None:
    """환경변수에서 기본 AWS 프로파일 조회"""
    return os.environ.get("AWS_PROFILE") or os.environ.get("AWS_DEFAULT_PROFILE") or None


def get_env_bool(name: str, default: bool = False) -> bool:
    """환경변수를 bool로 변환

    인식할 수 없는 값이면 default를 반환합니다.
    """
    value = os.environ.get(name)
    if value is None:
        return default

    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


# =============================================================================
# 로깅 설정
# =============================================================================


@dataclass
class LogConfig:
    """로깅 설정

    Attributes:
        level: 로그 레벨 이름 (기본 WARNING, stdout 한 줄 계약을 지키기 위해 조용하게)
        format: 로그 포맷 문자열 (시각/레벨은 RichHandler가 출력)
        date_format: 날짜 포맷
    """

    level: str = "WARNING"
    format: str = "%(name)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> LogConfig:
        """LOG_LEVEL / LOG_FORMAT 환경변수에서 로드"""
        default = cls()
        return cls(
            level=os.environ.get("LOG_LEVEL", default.level).upper(),
            format=os.environ.get("LOG_FORMAT", default.format),
            date_format=default.date_format,
        )
