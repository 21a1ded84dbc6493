"""
cli/params.py - Click 커스텀 파라미터 타입

    DimensionType  - 반복 가능한 'name=value' 옵션
    RegionType     - 리전 식별자 조회 (알 수 없으면 빈 Region, 실패는 조회 시점)
    StatisticType  - 다섯 가지 통계 종류로 제한
"""

from __future__ import annotations

import click

from core.exceptions import MalformedDimensionError, UnknownStatisticError
from core.region.resolver import Region, resolve_region
from shared.aws.metrics.dimensions import Dimension, parse_dimension
from shared.aws.metrics.query import Statistic


class DimensionType(click.ParamType):
    """'name=value' → Dimension"""

    name = "name=value"

    def convert(self, value, param, ctx) -> Dimension:
        if isinstance(value, Dimension):
            return value
        try:
            return parse_dimension(value)
        except MalformedDimensionError as e:
            self.fail(str(e), param, ctx)


class RegionType(click.ParamType):
    """리전 식별자 → Region"""

    name = "region"

    def convert(self, value, param, ctx) -> Region:
        if isinstance(value, Region):
            return value
        return resolve_region(value)


class StatisticType(click.ParamType):
    """통계 종류 이름 → Statistic (대소문자 구분)"""

    name = "statistic"

    def convert(self, value, param, ctx) -> Statistic:
        try:
            return Statistic.parse(value)
        except UnknownStatisticError as e:
            self.fail(f"{e} (choose from {', '.join(Statistic.names())})", param, ctx)


DIMENSION = DimensionType()
REGION = RegionType()
STATISTIC = StatisticType()
