"""
core/exceptions.py - 통합 예외 계층 구조

체크 전체에서 사용되는 예외 클래스들을 정의합니다.
MalformedDimensionError를 제외한 모든 예외는 UNKNOWN 상태로 보고됩니다.

예외 계층 구조:
    CheckError (베이스)
    ├── CredentialError (자격 증명 획득 실패)
    ├── ServiceError (CloudWatch 호출 실패, 미해결 리전 포함)
    ├── NoDatapointsError (조회 성공, 데이터포인트 없음)
    ├── UnknownStatisticError (알 수 없는 통계 종류)
    └── MalformedDimensionError (구분자 '='가 없는 차원 값)

Usage:
    from core.exceptions import ServiceError

    try:
        response = cloudwatch.get_metric_statistics(**request)
    except ClientError as e:
        raise ServiceError.from_client_error("get_metric_statistics", e) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class CheckError(Exception):
    """체크 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 인증 / 서비스 호출 예외
# =============================================================================


class CredentialError(CheckError):
    """자격 증명 Provider가 서명용 자격 증명을 만들지 못한 경우"""

    def __init__(
        self,
        message: str,
        profile_name: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.profile_name = profile_name
        if profile_name:
            self.details["profile_name"] = profile_name


class ServiceError(CheckError):
    """CloudWatch 호출 관련 예외

    botocore의 ClientError/BotoCoreError를 래핑합니다.
    메시지는 백엔드가 돌려준 텍스트를 그대로 담습니다.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        error_code: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.operation = operation
        self.error_code = error_code
        self.details.update(
            {
                "operation": operation,
                "error_code": error_code,
            }
        )

    @classmethod
    def from_client_error(
        cls,
        operation: str,
        client_error: Exception,
    ) -> "ServiceError":
        """botocore.exceptions.ClientError로부터 생성

        Args:
            operation: API 작업 이름
            client_error: ClientError 예외

        Returns:
            ServiceError 인스턴스
        """
        error_code = None
        error_message = None

        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")

        if error_code and error_message:
            message = f"{error_code}: {error_message}"
        else:
            message = error_message or error_code or str(client_error)

        return cls(
            message,
            operation=operation,
            error_code=error_code,
            cause=client_error,
        )


# =============================================================================
# 평가 관련 예외
# =============================================================================


class NoDatapointsError(CheckError):
    """조회는 성공했지만 데이터포인트가 하나도 없는 경우"""

    def __init__(self, namespace: str = "", metric_name: str = ""):
        super().__init__("No datapoints")
        self.details.update({"namespace": namespace, "metric_name": metric_name})


class UnknownStatisticError(CheckError):
    """Minimum/Maximum/Sum/Average/SampleCount 이외의 통계 종류"""

    def __init__(self, statistic: str):
        super().__init__(f"Unknown statistic: {statistic}")
        self.statistic = statistic
        self.details["statistic"] = statistic


class MalformedDimensionError(CheckError, ValueError):
    """'name=value' 형식이 아닌 차원 값

    ValueError를 함께 상속하므로 파라미터 파서가 일반 값 오류로 다룰 수 있습니다.
    """

    def __init__(self, value: str):
        super().__init__(f"malformed dimension {value!r}: expected name=value")
        self.value = value
        self.details["value"] = value
