"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(mock_cloudwatch_client, fixed_now):
        mock_cloudwatch_client.get_metric_statistics.return_value = make_response([...])
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment():
    """테스트 환경 설정"""
    os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-2")
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

    yield


@pytest.fixture
def aws_credentials(monkeypatch):
    """moto 사용 시 AWS 자격 증명 설정"""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def fixed_now():
    """쿼리 기준 시각 고정"""
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def mock_cloudwatch_client():
    """CloudWatch 클라이언트 모킹 (데이터포인트 하나)"""
    mock_client = MagicMock()
    mock_client.get_metric_statistics.return_value = make_response(
        [{"Average": 95.2, "Unit": "Percent", "Timestamp": datetime(2024, 6, 1, 11, 59, tzinfo=timezone.utc)}]
    )
    yield mock_client


# =============================================================================
# 유틸리티 함수
# =============================================================================


def make_response(
    datapoints: List[Dict[str, Any]],
    label: str = "CPUUtilization",
) -> Dict[str, Any]:
    """GetMetricStatistics 응답 생성 헬퍼"""
    return {
        "Label": label,
        "Datapoints": datapoints,
        "ResponseMetadata": {"HTTPStatusCode": 200},
    }


def create_mock_client_error(
    error_code: str,
    error_message: Optional[str] = "Test error",
    operation: str = "GetMetricStatistics",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    error: Dict[str, Any] = {"Code": error_code}
    if error_message is not None:
        error["Message"] = error_message
    return ClientError({"Error": error}, operation)
