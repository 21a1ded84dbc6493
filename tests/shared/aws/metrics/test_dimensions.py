"""
tests/shared/aws/metrics/test_dimensions.py - 차원 파싱 테스트
"""

import pytest

from core.exceptions import MalformedDimensionError
from shared.aws.metrics.dimensions import Dimension, parse_dimension, parse_dimensions


class TestParseDimension:
    """parse_dimension 테스트"""

    def test_simple(self):
        assert parse_dimension("InstanceId=i-0123456789abcdef0") == Dimension("InstanceId", "i-0123456789abcdef0")

    def test_empty_value(self):
        """값은 비어 있어도 됨 (구분자만 있으면 됨)"""
        assert parse_dimension("Host=") == Dimension("Host", "")

    def test_value_with_separator(self):
        """첫 번째 '='에서만 나눔"""
        assert parse_dimension("Query=a=b") == Dimension("Query", "a=b")

    def test_empty_name(self):
        assert parse_dimension("=value") == Dimension("", "value")

    @pytest.mark.parametrize("value", ["badtoken", "", "Host:web1"])
    def test_missing_separator(self, value):
        """'='가 없으면 MalformedDimensionError (IndexError 아님)"""
        with pytest.raises(MalformedDimensionError) as exc_info:
            parse_dimension(value)

        assert exc_info.value.value == value


class TestParseDimensions:
    """parse_dimensions 테스트"""

    def test_order_preserved(self):
        result = parse_dimensions(["Host=web1", "Env=prod"])
        assert result == [Dimension("Host", "web1"), Dimension("Env", "prod")]

    def test_duplicates_kept(self):
        result = parse_dimensions(["Host=web1", "Host=web2"])
        assert [d.value for d in result] == ["web1", "web2"]

    def test_empty(self):
        assert parse_dimensions([]) == []

    def test_bad_token_fails(self):
        with pytest.raises(MalformedDimensionError):
            parse_dimensions(["Host=web1", "badtoken"])


class TestDimension:
    """Dimension 데이터클래스 테스트"""

    def test_to_api(self):
        assert Dimension("Host", "web1").to_api() == {"Name": "Host", "Value": "web1"}

    def test_str(self):
        assert str(Dimension("Host", "web1")) == "Host=web1"
