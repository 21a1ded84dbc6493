"""
core/status.py - 체크 상태와 종료 코드

모니터링 플러그인 규약(OK=0, WARNING=1, CRITICAL=2, UNKNOWN=3)을 정의합니다.
UNKNOWN은 CRITICAL보다 "나쁜" 상태가 아니라 "평가할 수 없음"을 뜻합니다.
"""

from __future__ import annotations

from enum import Enum


class Status(Enum):
    """체크 결과 상태

    값은 프로세스 종료 코드와 같습니다.
    """

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @property
    def exit_code(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        """출력 라인에 쓰이는 대문자 이름"""
        return self.name

    def __str__(self) -> str:
        return self.name
