"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반 단일 명령. Go flag 스타일(-metric-name)과 GNU 스타일(--metric-name)을
모두 받습니다.

종료 코드:
    0 OK / 1 WARNING / 2 CRITICAL / 3 UNKNOWN

    Click의 사용법 오류(기본 종료 코드 2)는 CRITICAL과 겹치므로
    CheckCommand가 UNKNOWN(3)으로 보고합니다.

Usage:
    $ check_cloudwatch -namespace AWS/EC2 -metric-name CPUUtilization \\
        -statistic Average -dimension InstanceId=i-0123456789abcdef0 \\
        -region ap-northeast-2 -warning 70 -critical 90
    CPUUtilization OK - 12.500000 Percent
"""

from __future__ import annotations

import logging
import sys

import click

from core.config import get_default_region, get_env_bool, get_version, settings
from core.region.resolver import Region

from .check import CheckOptions, run_check
from .params import DIMENSION, REGION, STATISTIC
from .report import report, unknown
from .ui.console import setup_logging

logger = logging.getLogger(__name__)


_METRIC_NAME_FLAGS = ("-metric-name", "--metric-name")


def _metric_name_from_args(args: list[str]) -> str | None:
    """원시 인자에서 -metric-name 값 찾기 (마지막 값 우선)"""
    found = None
    for i, token in enumerate(args):
        if token in _METRIC_NAME_FLAGS:
            if i + 1 < len(args):
                found = args[i + 1]
        elif token.startswith(tuple(f"{flag}=" for flag in _METRIC_NAME_FLAGS)):
            found = token.split("=", 1)[1]
    return found


def report_name(ctx: click.Context | None, args: list[str]) -> str:
    """파싱 오류 보고 줄의 이름

    파싱된 -metric-name이 있으면 그 값, 아직 처리 전이면 원시 인자에서 찾고,
    둘 다 없으면 프로그램 이름.
    """
    if ctx is not None and ctx.params.get("metric_name"):
        return ctx.params["metric_name"]
    return _metric_name_from_args(args) or settings.PROG_NAME


class CheckCommand(click.Command):
    """파싱 오류를 UNKNOWN 한 줄로 보고하는 Click 명령"""

    def main(self, args=None, prog_name=None, complete_var=None, standalone_mode=True, **extra):
        args = list(sys.argv[1:] if args is None else args)
        try:
            return super().main(
                args=args,
                prog_name=prog_name,
                complete_var=complete_var,
                standalone_mode=False,
                **extra,
            )
        except click.UsageError as e:
            if e.ctx is not None:
                click.echo(e.ctx.get_usage(), err=True)
            unknown(report_name(e.ctx, args), e.format_message())
        except click.ClickException as e:
            unknown(report_name(None, args), e.format_message())
        except click.Abort:
            unknown(report_name(None, args), "Aborted")


@click.command(
    name=settings.PROG_NAME,
    cls=CheckCommand,
    context_settings={"help_option_names": ["-h", "-help", "--help"]},
)
@click.version_option(get_version(), "--version", prog_name=settings.PROG_NAME)
@click.option("-critical", "--critical", "critical", type=float, default=0.0, show_default=True, help="Critical threshold")
@click.option("-warning", "--warning", "warning", type=float, default=0.0, show_default=True, help="Warning threshold")
@click.option("-metric-name", "--metric-name", "metric_name", default="", help="The name of the metric")
@click.option("-namespace", "--namespace", "namespace", default="", help="The namespace of the metric")
@click.option(
    "-statistic",
    "--statistic",
    "statistic",
    type=STATISTIC,
    default=None,
    help="The statistic of the metric (Minimum, Maximum, Sum, Average, SampleCount)",
)
@click.option(
    "-period",
    "--period",
    "period",
    type=int,
    default=settings.DEFAULT_PERIOD,
    show_default=True,
    help="The length in seconds for aggregation",
)
@click.option(
    "-region",
    "--region",
    "region",
    type=REGION,
    default=get_default_region,
    help="AWS region (default: AWS_REGION / AWS_DEFAULT_REGION)",
)
@click.option(
    "-dimension",
    "--dimension",
    "dimensions",
    type=DIMENSION,
    multiple=True,
    help="The dimensions of the metric as name=value (repeatable)",
)
@click.option("-profile", "--profile", "profile", default=None, help="AWS profile for the credential chain")
@click.option("-v", "-verbose", "--verbose", "verbose", is_flag=True, help="Debug logging on stderr")
def cli(
    critical: float,
    warning: float,
    metric_name: str,
    namespace: str,
    statistic,
    period: int,
    region: Region | None,
    dimensions: tuple,
    profile: str | None,
    verbose: bool,
) -> None:
    """Check the latest datapoint of a CloudWatch metric against thresholds.

    If critical > warning, higher values are worse; otherwise lower values
    are worse.
    """
    setup_logging(verbose=verbose or get_env_bool(settings.VERBOSE_ENV))

    options = CheckOptions(
        namespace=namespace,
        metric_name=metric_name,
        statistic=statistic or "",
        dimensions=list(dimensions),
        period=period,
        region=region or Region(),
        warning=warning,
        critical=critical,
        profile=profile,
    )
    logger.debug(f"region={options.region.name or '(unresolved)'} profile={profile or '(default)'}")

    result = run_check(options)
    report(result.metric_name, result.status, result.message)


if __name__ == "__main__":
    cli()
