"""
cli/ui/console.py - Rich 콘솔 / 로깅 유틸리티

stdout은 체크 결과 한 줄 전용이므로 모든 로그는 stderr 콘솔로 보냅니다.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from core.config import LogConfig

# botocore 노이즈 로그 제한
_NOISY_LOGGERS = (
    "botocore.httpchecksum",
    "botocore.credentials",
    "botocore.loaders",
    "botocore.session",
)


def get_console() -> Console:
    """stderr로 출력하는 Rich Console 생성"""
    return Console(
        stderr=True,
        color_system="auto",
        highlight=False,
        soft_wrap=True,
    )


# 전역 콘솔 인스턴스
console = get_console()


def setup_logging(verbose: bool = False, config: LogConfig | None = None) -> None:
    """루트 logger에 RichHandler 설치

    Args:
        verbose: True면 DEBUG, 아니면 config.level
        config: 로깅 설정 (기본: LogConfig.from_env())
    """
    config = config or LogConfig.from_env()
    level = logging.DEBUG if verbose else logging.getLevelName(config.level)
    if not isinstance(level, int):
        level = logging.WARNING

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.date_format))
    logging.basicConfig(level=level, handlers=[handler], force=True)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
