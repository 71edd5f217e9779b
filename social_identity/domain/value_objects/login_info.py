"""LoginInfo Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from social_identity.domain.exceptions.validation import InvalidLoginInfoError
from social_identity.domain.value_objects.base import ValueObject


@dataclass(frozen=True, slots=True)
class LoginInfo(ValueObject):
    """특정 프로바이더에서의 사용자 식별 정보.

    Attributes:
        provider_id: 프로바이더 ID (google, kakao, naver, microsoft)
        provider_key: 프로바이더 네임스페이스 내 사용자 고유 ID
    """

    provider_id: str
    provider_key: str

    def __post_init__(self) -> None:
        if not isinstance(self.provider_id, str) or not self.provider_id:
            raise InvalidLoginInfoError("provider_id cannot be empty")
        if not isinstance(self.provider_key, str) or not self.provider_key:
            raise InvalidLoginInfoError("provider_key cannot be empty")

    def __str__(self) -> str:
        return f"{self.provider_id}:{self.provider_key}"
