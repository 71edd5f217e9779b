"""HTTPLayer Implementation (httpx).

Clean Architecture:
- Port: application/profile/ports/http_layer.py
- Adapter: 이 파일 (httpx 구현)
"""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

from social_identity.application.profile.exceptions import TransportError
from social_identity.application.profile.ports import HTTPResponse

logger = logging.getLogger(__name__)


class HttpxHTTPLayer:
    """httpx 기반 HTTP 전송 구현체.

    하나의 ``httpx.AsyncClient`` 를 모든 요청이 공유합니다.
    재시도는 하지 않으며, 타임아웃은 클라이언트 설정을 따릅니다.
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Args:
            client: 외부에서 주입한 클라이언트 (없으면 lazy 생성 후 직접 소유)
            timeout_seconds: 직접 생성하는 클라이언트의 타임아웃 (초)
        """
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout_seconds

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 lazy 초기화."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> HTTPResponse:
        client = await self._get_client()
        try:
            response = await client.get(url, headers=dict(headers or {}))
        except httpx.HTTPError as e:
            # URL에 토큰이 포함될 수 있으므로 예외 타입만 기록
            logger.warning("Profile request failed", extra={"error_type": type(e).__name__})
            raise TransportError(str(e) or type(e).__name__) from e

        try:
            content = response.json()
        except ValueError as e:
            logger.warning(
                "Profile response is not JSON",
                extra={"status_code": response.status_code},
            )
            raise TransportError(
                "Response body is not valid JSON", status_code=response.status_code
            ) from e

        return HTTPResponse(status_code=response.status_code, content=content)

    async def aclose(self) -> None:
        """직접 생성한 클라이언트만 닫습니다."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpxHTTPLayer:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
