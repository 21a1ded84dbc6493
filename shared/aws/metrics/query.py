"""
shared/aws/metrics/query.py - GetMetricStatistics 쿼리 구성

네임스페이스, 메트릭 이름, 차원, 통계 종류와 시간 범위를 하나의
불변 MetricQuery로 묶습니다.

시간 범위:
    end_time = 호출 시점 (UTC)
    start_time = end_time - period 초

Usage:
    from shared.aws.metrics.query import build_query

    query = build_query("AWS/EC2", "CPUUtilization", dims, "Average", period=300)
    cloudwatch.get_metric_statistics(**query.to_request())
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

from core.config import settings
from core.exceptions import UnknownStatisticError

from .dimensions import Dimension

logger = logging.getLogger(__name__)


class Statistic(str, Enum):
    """CloudWatch 통계 종류"""

    MINIMUM = "Minimum"
    MAXIMUM = "Maximum"
    SUM = "Sum"
    AVERAGE = "Average"
    SAMPLE_COUNT = "SampleCount"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str | Statistic) -> Statistic:
        """문자열을 Statistic으로 변환 (대소문자 구분)

        Raises:
            UnknownStatisticError: 다섯 가지 종류에 속하지 않는 경우
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownStatisticError(str(value)) from None

    @classmethod
    def names(cls) -> list[str]:
        return [s.value for s in cls]


@dataclass(frozen=True)
class MetricQuery:
    """CloudWatch 메트릭 통계 쿼리

    Attributes:
        namespace: AWS 네임스페이스 (예: "AWS/EC2")
        metric_name: 메트릭 이름 (예: "CPUUtilization")
        dimensions: 차원 (입력 순서 유지)
        statistic: 통계 종류
        period: 집계 주기 (초)
        start_time: 조회 시작 시간
        end_time: 조회 종료 시간
    """

    namespace: str
    metric_name: str
    dimensions: tuple[Dimension, ...]
    statistic: Statistic
    period: int
    start_time: datetime
    end_time: datetime

    def to_request(self) -> dict[str, Any]:
        """get_metric_statistics() 키워드 인자"""
        return {
            "Namespace": self.namespace,
            "MetricName": self.metric_name,
            "Dimensions": [d.to_api() for d in self.dimensions],
            "StartTime": self.start_time,
            "EndTime": self.end_time,
            "Period": self.period,
            "Statistics": [self.statistic.value],
        }


def build_query(
    namespace: str,
    metric_name: str,
    dimensions: Iterable[Dimension],
    statistic: str | Statistic,
    period: int = settings.DEFAULT_PERIOD,
    now: datetime | None = None,
) -> MetricQuery:
    """MetricQuery 생성

    period는 검증하지 않습니다. 0 이하의 값도 그대로 서비스에 전달됩니다.

    Args:
        namespace: AWS 네임스페이스
        metric_name: 메트릭 이름
        dimensions: 차원 목록
        statistic: 통계 종류
        period: 집계 주기 (초, 기본 60)
        now: 기준 시각 (기본: 현재 UTC 시각)

    Raises:
        UnknownStatisticError: statistic이 알 수 없는 종류인 경우
    """
    end_time = now if now is not None else datetime.now(timezone.utc)
    start_time = end_time - timedelta(seconds=period)

    query = MetricQuery(
        namespace=namespace,
        metric_name=metric_name,
        dimensions=tuple(dimensions),
        statistic=Statistic.parse(statistic),
        period=period,
        start_time=start_time,
        end_time=end_time,
    )
    logger.debug(
        f"쿼리: {namespace}/{metric_name} {query.statistic} period={period} "
        f"dimensions=[{', '.join(str(d) for d in query.dimensions)}]"
    )
    return query
