"""Dependency Wiring.

설정에서 HTTP 레이어, 프로바이더 레지스트리, Query Service를 조립합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from social_identity.setup.config import Settings, get_settings

if TYPE_CHECKING:
    from social_identity.application.profile.ports import HTTPLayer
    from social_identity.application.profile.queries import RetrieveProfileQueryService
    from social_identity.infrastructure.http import HttpxHTTPLayer
    from social_identity.infrastructure.oauth import SocialProviderRegistry


def get_http_layer(settings: Settings | None = None) -> "HttpxHTTPLayer":
    """HttpxHTTPLayer 제공자."""
    from social_identity.infrastructure.http import HttpxHTTPLayer

    if settings is None:
        settings = get_settings()
    return HttpxHTTPLayer(timeout_seconds=settings.http_timeout_seconds)


def build_registry(settings: Settings, http_layer: "HTTPLayer") -> "SocialProviderRegistry":
    """설정된 모든 프로바이더로 레지스트리 생성 (HTTP 레이어 공유)."""
    from social_identity.infrastructure.oauth import (
        PROVIDER_FACTORIES,
        SocialProviderRegistry,
    )

    return SocialProviderRegistry(
        factory(http_layer, settings.provider_settings(provider_id))
        for provider_id, factory in PROVIDER_FACTORIES.items()
    )


def get_retrieve_profile_service(
    settings: Settings | None = None,
    http_layer: "HTTPLayer | None" = None,
) -> "RetrieveProfileQueryService":
    """RetrieveProfileQueryService 제공자."""
    from social_identity.application.profile.queries import RetrieveProfileQueryService

    if settings is None:
        settings = get_settings()
    if http_layer is None:
        http_layer = get_http_layer(settings)
    return RetrieveProfileQueryService(providers=build_registry(settings, http_layer))
