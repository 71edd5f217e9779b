"""ProviderSettings Value Object."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from social_identity.domain.value_objects.base import ValueObject


@dataclass(frozen=True, slots=True)
class ProviderSettings(ValueObject):
    """프로바이더별 불변 설정.

    재설정은 ``dataclasses.replace`` 등으로 새 값을 만들어야 하며,
    기존 인스턴스는 절대 변경되지 않습니다.

    Attributes:
        api_url: 프로필 API URL 템플릿 오버라이드 (``%s`` 자리에 액세스 토큰)
        client_id: OAuth 클라이언트 ID
        client_secret: OAuth 클라이언트 시크릿
        redirect_uri: 콜백 URL
        scope: 요청 스코프
        api_version: 프로바이더 API 버전
        custom_properties: 프로바이더별 추가 설정
    """

    api_url: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    redirect_uri: str | None = None
    scope: str | None = None
    api_version: str | None = None
    custom_properties: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "custom_properties", MappingProxyType(dict(self.custom_properties)))

    def resolve_api_url(self, default: str) -> str:
        """오버라이드가 있으면 오버라이드, 없으면 기본 URL."""
        return self.api_url or default
