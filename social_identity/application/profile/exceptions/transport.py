"""Transport Exceptions."""

from __future__ import annotations

from social_identity.application.common.exceptions.base import ApplicationError


class TransportError(ApplicationError):
    """HTTP 전송 계층 오류 (네트워크, 타임아웃, 파싱 불가 응답).

    재시도하지 않고 호출자에게 그대로 전파됩니다.
    """

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        self.reason = reason
        self.status_code = status_code
        if status_code is not None:
            super().__init__(f"Transport error (HTTP {status_code}): {reason}")
        else:
            super().__init__(f"Transport error: {reason}")
