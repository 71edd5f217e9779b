"""CommonSocialProfile Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from social_identity.domain.value_objects.base import ValueObject
from social_identity.domain.value_objects.login_info import LoginInfo


@dataclass(frozen=True, slots=True)
class CommonSocialProfile(ValueObject):
    """프로바이더 공통 소셜 프로필.

    login_info는 항상 존재하며, 나머지 필드는 프로바이더가 제공하는 경우에만 채워집니다.
    파싱할 때마다 새로 생성되고 변경되지 않습니다.
    """

    login_info: LoginInfo
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    email: str | None = None
    avatar_url: str | None = None

    @property
    def provider_id(self) -> str:
        return self.login_info.provider_id

    def as_dict(self) -> dict[str, Any]:
        """값이 있는 필드만 딕셔너리로 반환."""
        result: dict[str, Any] = {
            "login_info": {
                "provider_id": self.login_info.provider_id,
                "provider_key": self.login_info.provider_key,
            }
        }
        for name in ("first_name", "last_name", "full_name", "email", "avatar_url"):
            value = getattr(self, name)
            if value is not None:
                result[name] = value
        return result
