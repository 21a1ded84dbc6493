"""
shared/aws/metrics - CloudWatch 메트릭 조회

Usage:
    from shared.aws.metrics import build_query, fetch_datapoints, parse_dimensions

    query = build_query("AWS/EC2", "CPUUtilization", parse_dimensions(["InstanceId=i-123"]), "Average")
    datapoints = fetch_datapoints(cloudwatch_client, query)
"""

from .dimensions import Dimension, parse_dimension, parse_dimensions
from .query import MetricQuery, Statistic, build_query
from .statistics import (
    Datapoint,
    create_cloudwatch_client,
    fetch_datapoints,
    first_datapoint,
    select_statistic,
)

__all__ = [
    "Dimension",
    "parse_dimension",
    "parse_dimensions",
    "MetricQuery",
    "Statistic",
    "build_query",
    "Datapoint",
    "create_cloudwatch_client",
    "fetch_datapoints",
    "first_datapoint",
    "select_statistic",
]
