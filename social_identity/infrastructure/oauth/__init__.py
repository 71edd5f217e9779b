"""Social Provider Implementations."""

from social_identity.infrastructure.oauth.provider import SocialProvider
from social_identity.infrastructure.oauth.providers import (
    PROVIDER_FACTORIES,
    ProfileFetcher,
    ProfileParser,
    create_google_provider,
    create_kakao_provider,
    create_microsoft_provider,
    create_naver_provider,
)
from social_identity.infrastructure.oauth.registry import SocialProviderRegistry

__all__ = [
    "PROVIDER_FACTORIES",
    "ProfileFetcher",
    "ProfileParser",
    "SocialProvider",
    "SocialProviderRegistry",
    "create_google_provider",
    "create_kakao_provider",
    "create_microsoft_provider",
    "create_naver_provider",
]
