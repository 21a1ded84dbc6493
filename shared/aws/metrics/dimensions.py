"""
shared/aws/metrics/dimensions.py - 메트릭 차원 파싱

명령줄의 'name=value' 문자열을 순서가 보존된 Dimension 목록으로 변환합니다.
같은 이름이 여러 번 나와도 그대로 유지하며, 입력 순서대로 API에 전달됩니다.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from core.exceptions import MalformedDimensionError

SEPARATOR = "="


@dataclass(frozen=True)
class Dimension:
    """CloudWatch 메트릭 차원

    Attributes:
        name: 차원 이름 (예: "InstanceId")
        value: 차원 값 (빈 문자열 허용)
    """

    name: str
    value: str

    def to_api(self) -> dict[str, str]:
        """GetMetricStatistics 요청 형식"""
        return {"Name": self.name, "Value": self.value}

    def __str__(self) -> str:
        return f"{self.name}{SEPARATOR}{self.value}"


def parse_dimension(value: str) -> Dimension:
    """'name=value' 문자열을 Dimension으로 변환

    첫 번째 '='에서만 나누므로 값 안에 '='가 있어도 됩니다.

    Raises:
        MalformedDimensionError: '='가 없는 경우
    """
    name, sep, dimension_value = value.partition(SEPARATOR)
    if not sep:
        raise MalformedDimensionError(value)
    return Dimension(name=name, value=dimension_value)


def parse_dimensions(values: Iterable[str]) -> list[Dimension]:
    """여러 'name=value' 문자열을 순서대로 변환"""
    return [parse_dimension(v) for v in values]
