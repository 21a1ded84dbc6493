"""
core/threshold.py - 임계값 평가

critical/warning 임계값의 대소 관계로 비교 방향을 추론합니다.

    critical > warning  → 값이 클수록 나쁨 (예: CPU 사용률)
    critical <= warning → 값이 작을수록 나쁨 (예: 남은 디스크 공간)

critical == warning이면 "작을수록 나쁨" 분기를 탑니다.
이때 두 비교 모두 같은 값에 대한 엄격한 '<' 비교가 됩니다.
"""

from __future__ import annotations

from core.status import Status


def is_higher_worse(warning: float, critical: float) -> bool:
    """값이 클수록 나쁜 메트릭인지 여부"""
    return critical > warning


def evaluate(value: float, warning: float, critical: float) -> Status:
    """단일 값을 임계값과 비교해 상태를 반환

    Args:
        value: 데이터포인트에서 추출한 값
        warning: WARNING 임계값
        critical: CRITICAL 임계값

    Returns:
        OK / WARNING / CRITICAL (UNKNOWN은 반환하지 않음)
    """
    if is_higher_worse(warning, critical):
        if value > critical:
            return Status.CRITICAL
        if value > warning:
            return Status.WARNING
    else:
        if value < critical:
            return Status.CRITICAL
        if value < warning:
            return Status.WARNING
    return Status.OK
