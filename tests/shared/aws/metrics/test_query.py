"""
tests/shared/aws/metrics/test_query.py - 쿼리 구성 테스트
"""

from datetime import datetime, timedelta, timezone

import pytest

from core.exceptions import UnknownStatisticError
from shared.aws.metrics.dimensions import Dimension
from shared.aws.metrics.query import MetricQuery, Statistic, build_query


class TestStatistic:
    """Statistic 열거형 테스트"""

    def test_names(self):
        assert Statistic.names() == ["Minimum", "Maximum", "Sum", "Average", "SampleCount"]

    @pytest.mark.parametrize("name", ["Minimum", "Maximum", "Sum", "Average", "SampleCount"])
    def test_parse_known(self, name):
        assert Statistic.parse(name).value == name

    def test_parse_passthrough(self):
        assert Statistic.parse(Statistic.SUM) is Statistic.SUM

    @pytest.mark.parametrize("name", ["Median", "average", "p99", ""])
    def test_parse_unknown(self, name):
        """대소문자 구분, 알 수 없는 종류는 UnknownStatisticError"""
        with pytest.raises(UnknownStatisticError):
            Statistic.parse(name)

    def test_str(self):
        assert str(Statistic.SAMPLE_COUNT) == "SampleCount"


class TestBuildQuery:
    """build_query 테스트"""

    def test_time_window(self, fixed_now):
        query = build_query("AWS/EC2", "CPUUtilization", [], "Average", period=300, now=fixed_now)

        assert query.end_time == fixed_now
        assert query.start_time == fixed_now - timedelta(seconds=300)
        assert query.period == 300

    def test_default_period(self, fixed_now):
        query = build_query("AWS/EC2", "CPUUtilization", [], "Average", now=fixed_now)

        assert query.period == 60
        assert query.end_time - query.start_time == timedelta(seconds=60)

    def test_default_now_is_utc(self):
        before = datetime.now(timezone.utc)
        query = build_query("AWS/EC2", "CPUUtilization", [], Statistic.MAXIMUM)
        after = datetime.now(timezone.utc)

        assert before <= query.end_time <= after
        assert query.end_time.tzinfo is not None

    def test_non_positive_period_passes_through(self, fixed_now):
        """period는 검증하지 않음"""
        query = build_query("AWS/EC2", "CPUUtilization", [], "Sum", period=0, now=fixed_now)
        assert query.period == 0
        assert query.start_time == fixed_now

        query = build_query("AWS/EC2", "CPUUtilization", [], "Sum", period=-60, now=fixed_now)
        assert query.period == -60
        assert query.start_time == fixed_now + timedelta(seconds=60)

    def test_unknown_statistic(self, fixed_now):
        with pytest.raises(UnknownStatisticError, match="Unknown statistic: Median"):
            build_query("AWS/EC2", "CPUUtilization", [], "Median", now=fixed_now)

    def test_dimensions_tuple(self, fixed_now):
        dims = [Dimension("Host", "web1"), Dimension("Env", "prod")]
        query = build_query("Custom/App", "Latency", dims, "Average", now=fixed_now)

        assert query.dimensions == (Dimension("Host", "web1"), Dimension("Env", "prod"))

    def test_query_is_frozen(self, fixed_now):
        query = build_query("AWS/EC2", "CPUUtilization", [], "Average", now=fixed_now)
        with pytest.raises(Exception):  # FrozenInstanceError
            query.period = 10


class TestToRequest:
    """MetricQuery.to_request 테스트"""

    def test_request_shape(self, fixed_now):
        query = build_query(
            "AWS/EC2",
            "CPUUtilization",
            [Dimension("Host", "web1"), Dimension("Env", "prod")],
            "Average",
            period=120,
            now=fixed_now,
        )

        assert query.to_request() == {
            "Namespace": "AWS/EC2",
            "MetricName": "CPUUtilization",
            "Dimensions": [
                {"Name": "Host", "Value": "web1"},
                {"Name": "Env", "Value": "prod"},
            ],
            "StartTime": fixed_now - timedelta(seconds=120),
            "EndTime": fixed_now,
            "Period": 120,
            "Statistics": ["Average"],
        }

    def test_direct_construction(self, fixed_now):
        query = MetricQuery(
            namespace="AWS/SQS",
            metric_name="ApproximateNumberOfMessagesVisible",
            dimensions=(),
            statistic=Statistic.SAMPLE_COUNT,
            period=60,
            start_time=fixed_now - timedelta(seconds=60),
            end_time=fixed_now,
        )

        request = query.to_request()
        assert request["Dimensions"] == []
        assert request["Statistics"] == ["SampleCount"]
