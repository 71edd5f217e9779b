"""SocialProvider.

ProfileFetcher + ProfileParser + HTTPLayer를 조합한 SocialProviderGateway 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from social_identity.application.profile.exceptions import (
    ProfileRetrievalError,
    TransportError,
)
from social_identity.domain.services.crypt import token_fingerprint
from social_identity.domain.value_objects import ProviderSettings

if TYPE_CHECKING:
    from social_identity.application.profile.ports import HTTPLayer
    from social_identity.domain.value_objects import CommonSocialProfile, OAuth2Info
    from social_identity.infrastructure.oauth.providers.base import (
        ProfileFetcher,
        ProfileParser,
    )

logger = logging.getLogger(__name__)


class SocialProvider:
    """소셜 프로바이더.

    설정은 불변이며, ``with_settings`` 는 항상 새 인스턴스를 반환합니다.
    여러 요청이 동시에 같은 인스턴스를 사용해도 공유 가변 상태가 없습니다.
    """

    def __init__(
        self,
        *,
        http_layer: "HTTPLayer",
        fetcher: "ProfileFetcher",
        parser: "ProfileParser",
        settings: ProviderSettings | None = None,
    ) -> None:
        if fetcher.id != parser.provider_id:
            raise ValueError(
                f"Fetcher/parser provider mismatch: {fetcher.id} != {parser.provider_id}"
            )
        self._http_layer = http_layer
        self._fetcher = fetcher
        self._parser = parser
        self._settings = settings if settings is not None else ProviderSettings()

    @property
    def id(self) -> str:
        return self._fetcher.id

    @property
    def settings(self) -> ProviderSettings:
        return self._settings

    @property
    def http_layer(self) -> "HTTPLayer":
        return self._http_layer

    async def retrieve_profile(self, auth_info: "OAuth2Info") -> "CommonSocialProfile":
        """액세스 토큰으로 프로필 조회.

        1. 요청 생성 (URL 템플릿 + 인증 헤더)
        2. GET 요청 (TransportError는 그대로 전파)
        3. 오류 응답 판별 → ProfileRetrievalError
        4. 프로필 파싱
        """
        request = self._fetcher.build_request(auth_info, self._settings)
        response = await self._http_layer.get(request.url, headers=request.headers)

        error = self._fetcher.extract_error(response.content)
        if error is not None:
            logger.warning(
                "Provider returned an error response",
                extra={
                    "provider": self.id,
                    "status_code": response.status_code,
                    "error_code": error.code,
                    "token_fingerprint": token_fingerprint(auth_info.access_token),
                },
            )
            raise ProfileRetrievalError(self.id, error.code, error.message)

        if not response.is_success:
            raise TransportError(
                f"Unexpected response from {self.id}", status_code=response.status_code
            )

        profile = await self._parser.parse(response.content, auth_info)
        logger.debug(
            "Profile parsed",
            extra={
                "provider": self.id,
                "token_fingerprint": token_fingerprint(auth_info.access_token),
            },
        )
        return profile

    def with_settings(
        self, transform: Callable[[ProviderSettings], ProviderSettings]
    ) -> SocialProvider:
        """새 설정을 가진 새 프로바이더 반환 (HTTP 레이어는 공유)."""
        return SocialProvider(
            http_layer=self._http_layer,
            fetcher=self._fetcher,
            parser=self._parser,
            settings=transform(self._settings),
        )

    def __repr__(self) -> str:
        return f"SocialProvider(id={self.id!r})"
