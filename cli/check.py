"""
cli/check.py - 체크 실행 흐름

옵션 → 쿼리 구성 → CloudWatch 조회 → 값 추출 → 임계값 평가.
프로세스를 종료하지 않고 CheckResult를 반환하므로 그대로 테스트할 수 있습니다.
CheckError와 예상치 못한 예외는 모두 UNKNOWN 결과로 변환됩니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from core.auth.credentials import ensure_credentials, get_session
from core.config import settings
from core.exceptions import CheckError
from core.region.resolver import Region
from core.status import Status
from core.threshold import evaluate
from shared.aws.metrics.dimensions import Dimension
from shared.aws.metrics.query import Statistic, build_query
from shared.aws.metrics.statistics import (
    create_cloudwatch_client,
    fetch_datapoints,
    first_datapoint,
    select_statistic,
)

from .report import format_line, format_value

logger = logging.getLogger(__name__)


@dataclass
class CheckOptions:
    """명령줄 옵션

    statistic이 비어 있으면 알 수 없는 통계 종류로 취급되어 UNKNOWN이 됩니다.
    """

    namespace: str = ""
    metric_name: str = ""
    statistic: str | Statistic = ""
    dimensions: list[Dimension] = field(default_factory=list)
    period: int = settings.DEFAULT_PERIOD
    region: Region = field(default_factory=Region)
    warning: float = 0.0
    critical: float = 0.0
    profile: str | None = None


@dataclass
class CheckResult:
    """체크 결과"""

    metric_name: str
    status: Status
    message: str

    @property
    def line(self) -> str:
        return format_line(self.metric_name, self.status, self.message)


def _measure(
    options: CheckOptions,
    cloudwatch_client: Any,
    now: datetime | None,
) -> tuple[float, str]:
    """첫 데이터포인트의 (값, 단위)"""
    if cloudwatch_client is None:
        session = get_session(options.profile)
        ensure_credentials(session)
        cloudwatch_client = create_cloudwatch_client(session, options.region)

    query = build_query(
        options.namespace,
        options.metric_name,
        options.dimensions,
        options.statistic,
        period=options.period,
        now=now,
    )
    datapoint = first_datapoint(fetch_datapoints(cloudwatch_client, query), query)
    return select_statistic(datapoint, query.statistic), datapoint.unit


def run_check(
    options: CheckOptions,
    cloudwatch_client: Any = None,
    now: datetime | None = None,
) -> CheckResult:
    """체크 실행

    Args:
        options: 명령줄 옵션
        cloudwatch_client: 주입할 CloudWatch 클라이언트 (None이면 기본 자격 증명 체인으로 생성)
        now: 조회 기준 시각 (기본: 현재 UTC)

    Returns:
        CheckResult
    """
    try:
        value, unit = _measure(options, cloudwatch_client, now)
    except CheckError as e:
        logger.warning(f"{type(e).__name__}: {e}")
        return CheckResult(options.metric_name, Status.UNKNOWN, str(e))
    except Exception as e:
        logger.exception(f"예상치 못한 오류: {e}")
        return CheckResult(options.metric_name, Status.UNKNOWN, f"{type(e).__name__}: {e}")

    status = evaluate(value, options.warning, options.critical)
    logger.debug(f"value={value} warning={options.warning} critical={options.critical} → {status}")
    return CheckResult(options.metric_name, status, format_value(value, unit))
