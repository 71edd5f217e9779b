"""Profile Exceptions."""

from __future__ import annotations

from social_identity.application.common.exceptions.base import ApplicationError

LIBRARY_NAME = "SocialIdentity"

# 외부 시스템이 패턴 매칭하므로 형식 변경 금지
SPECIFIED_PROFILE_ERROR = (
    "[" + LIBRARY_NAME + "][%s] Error retrieving profile information. Error code: %s, message: %s"
)


class ProfileRetrievalError(ApplicationError):
    """프로바이더 API가 오류 응답을 반환함.

    Attributes:
        provider_id: 프로바이더 ID
        code: 프로바이더 오류 코드 (정수 또는 문자열)
        reason: 프로바이더 오류 메시지
    """

    def __init__(self, provider_id: str, code: int | str | None, reason: str | None) -> None:
        self.provider_id = provider_id
        self.code = code
        self.reason = reason
        super().__init__(SPECIFIED_PROFILE_ERROR % (provider_id, code, reason))


class ProfileParseError(ApplicationError):
    """프로필 응답에 필수 필드가 없거나 형식이 다름."""

    def __init__(self, provider_id: str, reason: str) -> None:
        self.provider_id = provider_id
        self.reason = reason
        super().__init__(f"[{LIBRARY_NAME}][{provider_id}] Cannot parse profile: {reason}")


class UnknownProviderError(ApplicationError):
    """등록되지 않은 프로바이더."""

    def __init__(self, provider_id: str) -> None:
        self.provider_id = provider_id
        super().__init__(f"Unknown social provider: {provider_id}")
