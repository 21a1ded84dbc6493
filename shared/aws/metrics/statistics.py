"""
shared/aws/metrics/statistics.py - CloudWatch 통계 조회 및 값 추출

GetMetricStatistics를 한 번 호출해 데이터포인트를 가져오고,
요청한 통계 종류에 해당하는 값을 꺼냅니다.

재시도/캐시/속도 제한은 하지 않습니다. 한 번 실패하면 그대로 예외가 전파됩니다.

예외 매핑:
    ClientError                    → ServiceError
    NoCredentials/PartialCredentials/CredentialRetrieval → CredentialError
    기타 BotoCoreError              → ServiceError
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    CredentialRetrievalError,
    NoCredentialsError,
    PartialCredentialsError,
)

from core.config import settings
from core.exceptions import CredentialError, NoDatapointsError, ServiceError

from .query import MetricQuery, Statistic

if TYPE_CHECKING:
    import boto3

    from core.region.resolver import Region

logger = logging.getLogger(__name__)

_CREDENTIAL_ERRORS = (NoCredentialsError, PartialCredentialsError, CredentialRetrievalError)


@dataclass(frozen=True)
class Datapoint:
    """집계된 메트릭 샘플 하나

    응답에 없는 통계 값은 0.0입니다.
    """

    minimum: float = 0.0
    maximum: float = 0.0
    sum: float = 0.0
    average: float = 0.0
    sample_count: float = 0.0
    unit: str = ""
    timestamp: datetime | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Datapoint:
        """boto3 응답의 Datapoints 항목에서 생성"""
        return cls(
            minimum=float(data.get("Minimum", 0.0)),
            maximum=float(data.get("Maximum", 0.0)),
            sum=float(data.get("Sum", 0.0)),
            average=float(data.get("Average", 0.0)),
            sample_count=float(data.get("SampleCount", 0.0)),
            unit=data.get("Unit", ""),
            timestamp=data.get("Timestamp"),
        )


_FIELDS = {
    Statistic.MINIMUM: "minimum",
    Statistic.MAXIMUM: "maximum",
    Statistic.SUM: "sum",
    Statistic.AVERAGE: "average",
    Statistic.SAMPLE_COUNT: "sample_count",
}


def select_statistic(datapoint: Datapoint, statistic: str | Statistic) -> float:
    """데이터포인트에서 통계 종류에 해당하는 값 추출

    Raises:
        UnknownStatisticError: 알 수 없는 통계 종류 (0을 조용히 반환하지 않음)
    """
    kind = Statistic.parse(statistic)
    return getattr(datapoint, _FIELDS[kind])


def create_cloudwatch_client(session: boto3.Session, region: Region) -> Any:
    """리전 엔드포인트에 묶인 CloudWatch 클라이언트 생성

    Raises:
        ServiceError: 리전이 해석되지 않아 엔드포인트가 비어 있는 경우
    """
    if not region.is_resolved:
        raise ServiceError(
            "No CloudWatch endpoint: region is not set or not recognized",
            operation=settings.OPERATION_NAME,
        )

    try:
        return session.client(
            settings.SERVICE_NAME,
            region_name=region.name,
            endpoint_url=region.endpoint,
        )
    except BotoCoreError as e:
        raise ServiceError(str(e), operation=settings.OPERATION_NAME, cause=e) from e


def fetch_datapoints(cloudwatch_client: Any, query: MetricQuery) -> list[Datapoint]:
    """GetMetricStatistics 호출

    Args:
        cloudwatch_client: boto3 CloudWatch client
        query: 메트릭 쿼리

    Returns:
        응답 순서 그대로의 데이터포인트 목록 (비어 있을 수 있음)

    Raises:
        CredentialError: 자격 증명을 찾지 못한 경우
        ServiceError: API/네트워크/파라미터 검증 실패
    """
    operation = settings.OPERATION_NAME

    try:
        response = cloudwatch_client.get_metric_statistics(**query.to_request())
    except ClientError as e:
        logger.warning(f"CloudWatch API 호출 실패 {query.namespace}/{query.metric_name}: {e}")
        raise ServiceError.from_client_error(operation, e) from e
    except _CREDENTIAL_ERRORS as e:
        logger.warning(f"자격 증명 오류: {e}")
        raise CredentialError(str(e), cause=e) from e
    except BotoCoreError as e:
        logger.warning(f"CloudWatch 호출 실패 {query.namespace}/{query.metric_name}: {e}")
        raise ServiceError(str(e), operation=operation, cause=e) from e

    datapoints = [Datapoint.from_api(dp) for dp in response.get("Datapoints", [])]
    logger.debug(f"데이터포인트 {len(datapoints)}개: {query.namespace}/{query.metric_name}")
    return datapoints


def first_datapoint(datapoints: list[Datapoint], query: MetricQuery | None = None) -> Datapoint:
    """첫 번째 데이터포인트 반환 (여러 개여도 집계하지 않음)

    Raises:
        NoDatapointsError: 목록이 비어 있는 경우
    """
    if not datapoints:
        if query is not None:
            raise NoDatapointsError(query.namespace, query.metric_name)
        raise NoDatapointsError()
    return datapoints[0]
