"""Test Factories.

테스트용 객체 생성 팩토리.
"""

from __future__ import annotations

from typing import Any

from social_identity.application.profile.ports import HTTPResponse
from social_identity.domain.value_objects import CommonSocialProfile, LoginInfo


def create_profile(
    *,
    provider_id: str = "microsoft",
    provider_key: str = "42",
    email: str | None = "ada@example.com",
) -> CommonSocialProfile:
    """테스트용 CommonSocialProfile 생성."""
    return CommonSocialProfile(
        login_info=LoginInfo(provider_id, provider_key),
        first_name="Ada",
        last_name="Lovelace",
        email=email,
    )


def create_response(content: Any, status_code: int = 200) -> HTTPResponse:
    """테스트용 HTTPResponse 생성."""
    return HTTPResponse(status_code=status_code, content=content)
