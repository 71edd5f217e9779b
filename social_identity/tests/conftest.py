"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import os
from typing import Generator
from unittest.mock import AsyncMock

import pytest

from social_identity.application.profile.ports import HTTPResponse
from social_identity.domain.value_objects import OAuth2Info


# ============================================================
# Environment
# ============================================================


@pytest.fixture(scope="session", autouse=True)
def _test_env() -> Generator[None, None, None]:
    """Set test environment variables."""
    original = os.environ.copy()
    os.environ.update(
        {
            "SOCIAL_ENVIRONMENT": "test",
            "SOCIAL_LOG_LEVEL": "DEBUG",
        }
    )
    yield
    os.environ.clear()
    os.environ.update(original)


# ============================================================
# Domain Fixtures
# ============================================================


@pytest.fixture
def access_token() -> str:
    """테스트용 액세스 토큰."""
    return "test-access-token"


@pytest.fixture
def auth_info(access_token: str) -> OAuth2Info:
    """테스트용 OAuth2Info."""
    return OAuth2Info(access_token=access_token, token_type="Bearer", expires_in=3600)


# ============================================================
# Mock Port Fixtures
# ============================================================


@pytest.fixture
def mock_http_layer() -> AsyncMock:
    """Mock HTTPLayer (기본: 빈 200 응답)."""
    mock = AsyncMock()
    mock.get = AsyncMock(return_value=HTTPResponse(status_code=200, content={}))
    return mock
