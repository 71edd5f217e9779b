"""Social Providers.

각 소셜 프로바이더(Fetcher + Parser) 구현체입니다.
"""

from social_identity.infrastructure.oauth.providers.base import (
    ProfileFetcher,
    ProfileParser,
    ProfileRequest,
    ProviderErrorEnvelope,
)
from social_identity.infrastructure.oauth.providers.google import (
    GoogleProfileFetcher,
    GoogleProfileParser,
    create_google_provider,
)
from social_identity.infrastructure.oauth.providers.kakao import (
    KakaoProfileFetcher,
    KakaoProfileParser,
    create_kakao_provider,
)
from social_identity.infrastructure.oauth.providers.microsoft import (
    MicrosoftProfileFetcher,
    MicrosoftProfileParser,
    create_microsoft_provider,
)
from social_identity.infrastructure.oauth.providers.naver import (
    NaverProfileFetcher,
    NaverProfileParser,
    create_naver_provider,
)

PROVIDER_FACTORIES = {
    "google": create_google_provider,
    "kakao": create_kakao_provider,
    "microsoft": create_microsoft_provider,
    "naver": create_naver_provider,
}

__all__ = [
    "PROVIDER_FACTORIES",
    "ProfileFetcher",
    "ProfileParser",
    "ProfileRequest",
    "ProviderErrorEnvelope",
    "GoogleProfileFetcher",
    "GoogleProfileParser",
    "KakaoProfileFetcher",
    "KakaoProfileParser",
    "MicrosoftProfileFetcher",
    "MicrosoftProfileParser",
    "NaverProfileFetcher",
    "NaverProfileParser",
    "create_google_provider",
    "create_kakao_provider",
    "create_microsoft_provider",
    "create_naver_provider",
]
