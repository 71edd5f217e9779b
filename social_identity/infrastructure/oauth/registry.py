"""Social Provider Registry."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Iterator

from social_identity.application.profile.exceptions import UnknownProviderError

if TYPE_CHECKING:
    from social_identity.application.profile.ports import SocialProviderGateway


class SocialProviderRegistry:
    """프로바이더 ID → 프로바이더 레지스트리.

    생성 이후 변경되지 않습니다. 재설정된 프로바이더가 필요하면
    ``replace`` 로 새 레지스트리를 만듭니다.
    """

    def __init__(self, providers: Iterable["SocialProviderGateway"]) -> None:
        registered: dict[str, "SocialProviderGateway"] = {}
        for provider in providers:
            if provider.id in registered:
                raise ValueError(f"Duplicate social provider: {provider.id}")
            registered[provider.id] = provider
        self._providers = MappingProxyType(registered)

    def get(self, provider_id: str) -> "SocialProviderGateway":
        provider = self._providers.get(provider_id)
        if provider is None:
            raise UnknownProviderError(provider_id)
        return provider

    def replace(self, provider: "SocialProviderGateway") -> SocialProviderRegistry:
        """같은 ID의 프로바이더를 교체한 새 레지스트리 반환."""
        if provider.id not in self._providers:
            raise UnknownProviderError(provider.id)
        return SocialProviderRegistry(
            provider if p.id == provider.id else p for p in self._providers.values()
        )

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(self._providers)

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._providers

    def __iter__(self) -> Iterator["SocialProviderGateway"]:
        return iter(self._providers.values())

    def __len__(self) -> int:
        return len(self._providers)
