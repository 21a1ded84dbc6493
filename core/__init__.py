# core/__init__.py
"""
core - check_cloudwatch 도메인 코어

AWS 호출 없이 판정 규칙과 설정, 예외 계층, 리전/인증 해석을 담는 패키지입니다.

아키텍처:
    core/
    ├── auth/           # 기본 자격 증명 체인 (boto3 세션)
    ├── region/         # 리전 정적 테이블 및 엔드포인트 해석
    ├── config.py       # 중앙 설정 관리
    ├── exceptions.py   # 통합 예외 계층
    ├── status.py       # Nagios 상태 / 종료 코드
    └── threshold.py    # 임계값 판정

Usage:
    from core.threshold import evaluate
    status = evaluate(95.2, warning=70, critical=90)  # Status.CRITICAL

    from core.region import resolve_region
    region = resolve_region("ap-northeast-2")
"""

from core import auth, config, exceptions, region, status, threshold

__all__: list[str] = [
    # 서브패키지
    "auth",
    "region",
    # 모듈
    "config",
    "exceptions",
    "status",
    "threshold",
]
