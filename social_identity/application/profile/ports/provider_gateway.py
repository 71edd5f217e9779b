"""SocialProviderGateway Port.

소셜 프로바이더(Google, Kakao, Naver, Microsoft 등)에서 프로필을 조회하는 인터페이스입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from social_identity.domain.value_objects import (
        CommonSocialProfile,
        OAuth2Info,
        ProviderSettings,
    )


class SocialProviderGateway(Protocol):
    """소셜 프로바이더 Gateway 인터페이스.

    구현체:
        - SocialProvider (infrastructure/oauth/)
    """

    @property
    def id(self) -> str:
        """프로바이더 ID."""
        ...

    @property
    def settings(self) -> "ProviderSettings":
        """현재 프로바이더 설정."""
        ...

    async def retrieve_profile(self, auth_info: "OAuth2Info") -> "CommonSocialProfile":
        """액세스 토큰으로 프로필 조회.

        Raises:
            TransportError: 전송 계층 오류
            ProfileRetrievalError: 프로바이더가 오류 응답을 반환
            ProfileParseError: 응답에 필수 필드 없음
        """
        ...

    def with_settings(
        self, transform: Callable[["ProviderSettings"], "ProviderSettings"]
    ) -> "SocialProviderGateway":
        """새 설정을 가진 새 프로바이더 인스턴스 반환."""
        ...


class SocialProviderLookup(Protocol):
    """프로바이더 ID로 Gateway를 찾는 인터페이스.

    구현체:
        - SocialProviderRegistry (infrastructure/oauth/)
    """

    def get(self, provider_id: str) -> SocialProviderGateway:
        """프로바이더 조회.

        Raises:
            UnknownProviderError: 등록되지 않은 프로바이더
        """
        ...
