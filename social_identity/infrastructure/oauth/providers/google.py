"""Google OAuth Provider."""

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

ID = "google"
GOOGLE_PROFILE_URL = "https://www.googleapis.com/oauth2/v3/userinfo"


class GoogleProfileFetcher(ProfileFetcher):
    """Google userinfo 요청."""

    id = ID
    default_api_url = GOOGLE_PROFILE_URL

    def extract_error(self, content: Any) -> ProviderErrorEnvelope | None:
        if not isinstance(content, Mapping):
            return None
        error = content.get("error")
        # Google API 공통: {"error": {"code": 401, "message": "...", "status": "..."}}
        if isinstance(error, Mapping):
            return ProviderErrorEnvelope(code=error.get("code"), message=error.get("message"))
        # userinfo(OAuth2): {"error": "invalid_request", "error_description": "..."}
        if isinstance(error, str) and "sub" not in content:
            return ProviderErrorEnvelope(code=error, message=content.get("error_description"))
        return None


class GoogleProfileParser(ProfileParser):
    """Google userinfo 응답 파서."""

    provider_id = ID

    async def parse(self, content: Any, auth_info: "OAuth2Info") -> CommonSocialProfile:
        data = self.ensure_object(content)
        return CommonSocialProfile(
            login_info=LoginInfo(ID, self.require_id(data, "sub")),
            first_name=optional_str(data, "given_name"),
            last_name=optional_str(data, "family_name"),
            full_name=optional_str(data, "name"),
            email=optional_str(data, "email"),
            avatar_url=optional_str(data, "picture"),
        )


def create_google_provider(
    http_layer: "HTTPLayer", settings: "ProviderSettings | None" = None
) -> SocialProvider:
    """Google 프로바이더 생성."""
    return SocialProvider(
        http_layer=http_layer,
        fetcher=GoogleProfileFetcher(),
        parser=GoogleProfileParser(),
        settings=settings,
    )
