"""Kakao OAuth Provider."""

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

ID = "kakao"
KAKAO_PROFILE_URL = "https://kapi.kakao.com/v2/user/me"


class KakaoProfileFetcher(ProfileFetcher):
    """Kakao 사용자 정보 요청."""

    id = ID
    default_api_url = KAKAO_PROFILE_URL

    def extract_error(self, content: Any) -> ProviderErrorEnvelope | None:
        # {"msg": "this access token does not exist", "code": -401}
        if not isinstance(content, Mapping) or "id" in content:
            return None
        code = content.get("code")
        if isinstance(code, int) and not isinstance(code, bool) and "msg" in content:
            return ProviderErrorEnvelope(code=code, message=content.get("msg"))
        return None


class KakaoProfileParser(ProfileParser):
    """Kakao ``/v2/user/me`` 응답 파서."""

    provider_id = ID

    async def parse(self, content: Any, auth_info: "OAuth2Info") -> CommonSocialProfile:
        data = self.ensure_object(content)
        user_id = self.require_id(data, "id")

        kakao_account = data.get("kakao_account") or {}
        profile = kakao_account.get("profile") if isinstance(kakao_account, Mapping) else None

        return CommonSocialProfile(
            login_info=LoginInfo(ID, user_id),
            full_name=optional_str(profile, "nickname") or optional_str(kakao_account, "name"),
            email=optional_str(kakao_account, "email"),
            avatar_url=optional_str(profile, "profile_image_url"),
        )


def create_kakao_provider(
    http_layer: "HTTPLayer", settings: "ProviderSettings | None" = None
) -> SocialProvider:
    """Kakao 프로바이더 생성."""
    return SocialProvider(
        http_layer=http_layer,
        fetcher=KakaoProfileFetcher(),
        parser=KakaoProfileParser(),
        settings=settings,
    )
