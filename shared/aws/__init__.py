"""AWS 관련 공유 유틸리티.

하위 모듈:
- metrics: CloudWatch 메트릭 단건 조회 (GetMetricStatistics API)
"""

from . import metrics

__all__ = ["metrics"]
