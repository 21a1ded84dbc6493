"""
core/auth/credentials.py - 기본 자격 증명 체인

환경변수, 공유 설정/자격 증명 파일, 인스턴스 역할 메타데이터 순서의 해석은
boto3에 맡깁니다. 이 모듈은 "서명 가능한 자격 증명을 만들거나 실패한다"는
계약만 보장합니다.

Usage:
    from core.auth.credentials import get_session, ensure_credentials

    session = get_session(profile_name="monitoring")
    ensure_credentials(session)
"""

from __future__ import annotations

import logging

import boto3
from botocore.exceptions import BotoCoreError, ProfileNotFound

from core.exceptions import CredentialError

logger = logging.getLogger(__name__)


def get_session(profile_name: str | None = None) -> boto3.Session:
    """boto3 세션 생성

    Args:
        profile_name: AWS 프로파일 이름 (None이면 기본 체인)

    Returns:
        boto3.Session

    Raises:
        CredentialError: 프로파일이 존재하지 않는 경우
    """
    try:
        session = boto3.Session(profile_name=profile_name)
    except ProfileNotFound as e:
        raise CredentialError(str(e), profile_name=profile_name, cause=e) from e

    logger.debug(f"세션 생성: profile={profile_name or '(default)'}")
    return session


def ensure_credentials(session: boto3.Session) -> None:
    """세션에서 자격 증명을 얻을 수 있는지 확인

    Raises:
        CredentialError: 자격 증명 체인이 아무것도 찾지 못했거나 로드에 실패한 경우
    """
    profile_name = session.profile_name if session.profile_name != "default" else None

    try:
        credentials = session.get_credentials()
    except BotoCoreError as e:
        raise CredentialError(str(e), profile_name=profile_name, cause=e) from e

    if credentials is None:
        raise CredentialError("Unable to locate credentials", profile_name=profile_name)
