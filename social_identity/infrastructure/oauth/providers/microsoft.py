"""Microsoft OAuth Provider.

See:
    - https://learn.microsoft.com/graph/api/user-get
    - https://learn.microsoft.com/graph/errors
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from social_identity.domain.value_objects import CommonSocialProfile, LoginInfo
from social_identity.infrastructure.oauth.provider import SocialProvider
from social_identity.infrastructure.oauth.providers.base import (
    ProfileFetcher,
    ProfileParser,
    ProviderErrorEnvelope,
    optional_str,
)

if TYPE_CHECKING:
    from social_identity.application.profile.ports import HTTPLayer
    from social_identity.domain.value_objects import OAuth2Info, ProviderSettings

ID = "microsoft"
API = "https://graph.microsoft.com/v1.0/me?access_token=%s"
VERSIONED_API = "https://graph.microsoft.com/{version}/me?access_token=%s"


class MicrosoftProfileFetcher(ProfileFetcher):
    """Microsoft Graph 프로필 요청."""

    id = ID
    default_api_url = API

    def api_url(self, settings: "ProviderSettings") -> str:
        if settings.api_url:
            return settings.api_url
        if settings.api_version:
            return VERSIONED_API.format(version=settings.api_version)
        return API

    def build_headers(self, auth_info: "OAuth2Info") -> dict[str, str]:
        # 접두사 없이 토큰 그대로 전달
        return {"Authorization": auth_info.access_token}

    def extract_error(self, content: Any) -> ProviderErrorEnvelope | None:
        # {"error": {"code": ..., "message": ...}}
        if not isinstance(content, Mapping):
            return None
        error = content.get("error")
        if not isinstance(error, Mapping):
            return None
        return ProviderErrorEnvelope(code=error.get("code"), message=error.get("message"))


class MicrosoftProfileParser(ProfileParser):
    """Microsoft Graph ``/me`` 응답 파서."""

    provider_id = ID

    async def parse(self, content: Any, auth_info: "OAuth2Info") -> CommonSocialProfile:
        data = self.ensure_object(content)
        user_id = self.require_id(data, "id")

        return CommonSocialProfile(
            login_info=LoginInfo(ID, user_id),
            first_name=optional_str(data, "givenName"),
            last_name=optional_str(data, "surname"),
            full_name=optional_str(data, "displayName"),
            email=optional_str(data, "userPrincipalName"),
        )


def create_microsoft_provider(
    http_layer: "HTTPLayer", settings: "ProviderSettings | None" = None
) -> SocialProvider:
    """Microsoft 프로바이더 생성."""
    return SocialProvider(
        http_layer=http_layer,
        fetcher=MicrosoftProfileFetcher(),
        parser=MicrosoftProfileParser(),
        settings=settings,
    )
