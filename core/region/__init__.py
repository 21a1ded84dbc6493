# core/region - 리전 데이터 및 해석
"""
리전 모듈

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
"""

__all__ = ["ALL_REGIONS", "REGION_NAMES", "Region", "resolve_region"]


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in ("ALL_REGIONS", "REGION_NAMES"):
        from .data import ALL_REGIONS, REGION_NAMES

        if name == "ALL_REGIONS":
            return ALL_REGIONS
        return REGION_NAMES

    if name in ("Region", "resolve_region"):
        from .resolver import Region, resolve_region

        if name == "Region":
            return Region
        return resolve_region

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
