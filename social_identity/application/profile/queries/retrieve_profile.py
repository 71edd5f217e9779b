"""RetrieveProfile Query.

인증 계층이 사용하는 프로필 조회 Query Service입니다.

Architecture:
    - QueryService: RetrieveProfileQueryService
    - Ports(인프라): SocialProviderLookup
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from social_identity.application.profile.ports import SocialProviderLookup
    from social_identity.domain.value_objects import CommonSocialProfile, OAuth2Info

logger = logging.getLogger(__name__)


class RetrieveProfileQueryService:
    """프로필 조회 Query Service.

    프로바이더 ID로 프로바이더를 찾아 프로필을 조회합니다.
    모든 예외는 그대로 전파됩니다.
    """

    def __init__(self, providers: "SocialProviderLookup") -> None:
        self._providers = providers

    async def execute(self, provider_id: str, auth_info: "OAuth2Info") -> "CommonSocialProfile":
        """프로필을 조회합니다.

        Args:
            provider_id: 프로바이더 ID
            auth_info: OAuth2 인증 정보

        Returns:
            공통 소셜 프로필

        Raises:
            UnknownProviderError: 등록되지 않은 프로바이더
            TransportError: 전송 계층 오류
            ProfileRetrievalError: 프로바이더 오류 응답
            ProfileParseError: 프로필 파싱 실패
        """
        provider = self._providers.get(provider_id)
        profile = await provider.retrieve_profile(auth_info)
        logger.info(
            "Social profile retrieved",
            extra={"provider": provider_id, "login_info": str(profile.login_info)},
        )
        return profile
