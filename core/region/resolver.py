"""
core/region/resolver.py - 리전 식별자 → 리전 정보 변환

알 수 없는 식별자는 즉시 실패하지 않고 빈 Region을 반환합니다.
실패는 빈 엔드포인트로 CloudWatch를 호출하려는 시점(ServiceError)에 드러납니다.

Usage:
    from core.region.resolver import resolve_region

    region = resolve_region("ap-northeast-2")
    region.endpoint  # "https://monitoring.ap-northeast-2.amazonaws.com"

    resolve_region("mars-1").is_resolved  # False
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.config import settings

from .data import REGION_NAMES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Region:
    """리전 정보

    Attributes:
        name: 리전 코드 (예: "us-east-1"), 미해결이면 ""
        endpoint: CloudWatch 서비스 엔드포인트 URL, 미해결이면 ""
        display_name: 표시용 이름
    """

    name: str = ""
    endpoint: str = ""
    display_name: str = ""

    @property
    def is_resolved(self) -> bool:
        return bool(self.endpoint)

    def __str__(self) -> str:
        return self.name


def cloudwatch_endpoint(region_name: str) -> str:
    """리전 코드에 해당하는 CloudWatch 엔드포인트 URL"""
    if region_name.startswith("cn-"):
        return settings.CHINA_ENDPOINT_TEMPLATE.format(region=region_name)
    return settings.ENDPOINT_TEMPLATE.format(region=region_name)


def resolve_region(identifier: str | None) -> Region:
    """리전 식별자를 Region으로 변환

    Args:
        identifier: 리전 코드 (예: "ap-northeast-2")

    Returns:
        Region. 테이블에 없는 식별자면 빈 Region()
    """
    if not identifier or identifier not in REGION_NAMES:
        if identifier:
            logger.debug(f"알 수 없는 리전: {identifier!r}")
        return Region()

    return Region(
        name=identifier,
        endpoint=cloudwatch_endpoint(identifier),
        display_name=REGION_NAMES[identifier],
    )
