# core/auth/__init__.py
"""
AWS 인증 모듈 (core/auth)

명시적 키 없이 boto3 기본 자격 증명 체인만 사용합니다.

사용 예시:
    from core.auth import get_session, ensure_credentials

    session = get_session()
    ensure_credentials(session)

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    실제 사용 시점에만 boto3가 로드됩니다.
"""

__all__ = [
    "get_session",
    "ensure_credentials",
]

# Lazy import 매핑 테이블
_IMPORT_MAPPING = {
    "get_session": (".credentials", "get_session"),
    "ensure_credentials": (".credentials", "ensure_credentials"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
