"""공유 AWS 유틸리티 - CLI에서 사용.

의존성 구조:
    core (판정 규칙, 설정, 예외)
       ↑
    shared (CloudWatch 조회)
       ↑
    cli
"""

from . import aws

__all__ = ["aws"]
