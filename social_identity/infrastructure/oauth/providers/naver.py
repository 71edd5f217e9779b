"""Naver OAuth Provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from social_identity.application.profile.exceptions import ProfileParseError
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

ID = "naver"
NAVER_PROFILE_URL = "https://openapi.naver.com/v1/nid/me"
NAVER_SUCCESS_CODE = "00"


class NaverProfileFetcher(ProfileFetcher):
    """Naver 회원 프로필 요청."""

    id = ID
    default_api_url = NAVER_PROFILE_URL

    def extract_error(self, content: Any) -> ProviderErrorEnvelope | None:
        # {"resultcode": "024", "message": "Authentication failed"}
        if not isinstance(content, Mapping) or "resultcode" not in content:
            return None
        result_code = content.get("resultcode")
        if result_code == NAVER_SUCCESS_CODE:
            return None
        return ProviderErrorEnvelope(code=result_code, message=content.get("message"))


class NaverProfileParser(ProfileParser):
    """Naver ``/v1/nid/me`` 응답 파서."""

    provider_id = ID

    async def parse(self, content: Any, auth_info: "OAuth2Info") -> CommonSocialProfile:
        body = self.ensure_object(content)
        data = body.get("response")
        if not isinstance(data, Mapping):
            raise ProfileParseError(ID, "missing 'response' object")

        return CommonSocialProfile(
            login_info=LoginInfo(ID, self.require_id(data, "id")),
            full_name=optional_str(data, "name") or optional_str(data, "nickname"),
            email=optional_str(data, "email"),
            avatar_url=optional_str(data, "profile_image"),
        )


def create_naver_provider(
    http_layer: "HTTPLayer", settings: "ProviderSettings | None" = None
) -> SocialProvider:
    """Naver 프로바이더 생성."""
    return SocialProvider(
        http_layer=http_layer,
        fetcher=NaverProfileFetcher(),
        parser=NaverProfileParser(),
        settings=settings,
    )
