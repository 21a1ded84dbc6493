# cli/ui - stderr 콘솔 / 로깅 (rich)
"""
콘솔 모듈

stdout은 결과 한 줄 전용이라 UI 출력은 stderr 로깅뿐입니다.
"""

from .console import console, get_console, setup_logging

__all__: list[str] = [
    "console",
    "get_console",
    "setup_logging",
]
