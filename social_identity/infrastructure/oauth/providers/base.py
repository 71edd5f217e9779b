"""Social Provider Base Classes.

프로바이더 하나는 두 개의 작은 구현체로 구성됩니다:
    - ProfileFetcher: 요청 URL/헤더 생성 및 오류 응답 판별
    - ProfileParser: 응답 JSON → CommonSocialProfile 변환
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping

from social_identity.application.profile.exceptions import ProfileParseError

if TYPE_CHECKING:
    from social_identity.domain.value_objects import (
        CommonSocialProfile,
        OAuth2Info,
        ProviderSettings,
    )

ACCESS_TOKEN_PLACEHOLDER = "%s"


@dataclass(frozen=True, slots=True)
class ProfileRequest:
    """프로필 조회 요청."""

    url: str
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ProviderErrorEnvelope:
    """프로바이더 오류 응답에서 추출한 코드와 메시지."""

    code: int | str | None
    message: str | None


class ProfileFetcher(ABC):
    """프로필 요청 생성 및 오류 판별 추상 클래스."""

    id: str
    default_api_url: str

    def api_url(self, settings: "ProviderSettings") -> str:
        """설정 오버라이드를 반영한 API URL 템플릿."""
        return settings.resolve_api_url(self.default_api_url)

    def build_headers(self, auth_info: "OAuth2Info") -> dict[str, str]:
        """기본: Bearer 토큰 헤더."""
        return {"Authorization": f"Bearer {auth_info.access_token}"}

    def build_request(self, auth_info: "OAuth2Info", settings: "ProviderSettings") -> ProfileRequest:
        url = self.api_url(settings).replace(ACCESS_TOKEN_PLACEHOLDER, auth_info.access_token)
        return ProfileRequest(url=url, headers=self.build_headers(auth_info))

    @abstractmethod
    def extract_error(self, content: Any) -> ProviderErrorEnvelope | None:
        """오류 응답이면 코드/메시지를 반환, 프로필 응답이면 None.

        구조 검사만 사용합니다. 본문을 파서에 넘기기 전에 호출됩니다.
        """
        raise NotImplementedError


class ProfileParser(ABC):
    """프로바이더 응답 파서 추상 클래스."""

    provider_id: str

    @abstractmethod
    async def parse(self, content: Any, auth_info: "OAuth2Info") -> "CommonSocialProfile":
        """응답 본문을 CommonSocialProfile로 변환.

        Args:
            content: 프로바이더가 반환한 JSON
            auth_info: 추가 조회가 필요한 파서를 위한 인증 정보

        Raises:
            ProfileParseError: 필수 사용자 ID 없음
        """
        raise NotImplementedError

    def ensure_object(self, content: Any) -> Mapping[str, Any]:
        if not isinstance(content, Mapping):
            raise ProfileParseError(self.provider_id, "response is not a JSON object")
        return content

    def require_id(self, data: Mapping[str, Any], key: str) -> str:
        """필수 사용자 ID 추출 (정수 ID는 문자열로 변환)."""
        value = data.get(key)
        if isinstance(value, bool) or value is None or value == "":
            raise ProfileParseError(self.provider_id, f"missing user identifier '{key}'")
        if isinstance(value, (str, int)):
            return str(value)
        raise ProfileParseError(self.provider_id, f"invalid user identifier '{key}'")


def optional_str(data: Any, key: str) -> str | None:
    """선택 필드 추출. 없거나 문자열이 아니거나 빈 값이면 None."""
    if not isinstance(data, Mapping):
        return None
    value = data.get(key)
    if isinstance(value, str) and value:
        return value
    return None
