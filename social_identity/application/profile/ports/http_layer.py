"""HTTPLayer Port.

프로바이더 API 호출을 담당하는 HTTP 전송 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol


@dataclass(frozen=True, slots=True)
class HTTPResponse:
    """HTTP 응답.

    Attributes:
        status_code: HTTP 상태 코드
        content: 파싱된 JSON 본문
    """

    status_code: int
    content: Any

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class HTTPLayer(Protocol):
    """HTTP 전송 인터페이스.

    구현체:
        - HttpxHTTPLayer (infrastructure/http/)

    여러 요청이 동시에 같은 인스턴스를 사용할 수 있어야 합니다.
    """

    async def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> HTTPResponse:
        """GET 요청.

        Args:
            url: 요청 URL
            headers: 요청 헤더

        Returns:
            상태 코드와 파싱된 본문

        Raises:
            TransportError: 네트워크 오류, 타임아웃, JSON이 아닌 응답
        """
        ...
