"""
cli/report.py - 상태 보고 (프로세스 종료)

"<metricName> <STATUS> - <message>" 한 줄을 stdout에 쓰고
상태에 맞는 종료 코드로 즉시 종료합니다. 호출 이후의 코드는 실행되지 않습니다.
"""

from __future__ import annotations

from typing import NoReturn

import click

from core.status import Status


def format_value(value: float, unit: str) -> str:
    """측정값 메시지 ("95.200000 Percent")"""
    return f"{value:f} {unit}"


def format_line(metric_name: str, status: Status, message: str) -> str:
    return f"{metric_name} {status.label} - {message}"


def report(metric_name: str, status: Status, message: str) -> NoReturn:
    """결과 한 줄 출력 후 종료

    Raises:
        SystemExit: 항상 (status.exit_code)
    """
    click.echo(format_line(metric_name, status, message))
    raise SystemExit(status.exit_code)


def ok(metric_name: str, message: str) -> NoReturn:
    report(metric_name, Status.OK, message)


def warning(metric_name: str, message: str) -> NoReturn:
    report(metric_name, Status.WARNING, message)


def critical(metric_name: str, message: str) -> NoReturn:
    report(metric_name, Status.CRITICAL, message)


def unknown(metric_name: str, message: str) -> NoReturn:
    report(metric_name, Status.UNKNOWN, message)
