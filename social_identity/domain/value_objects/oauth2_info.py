"""OAuth2Info Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from social_identity.domain.exceptions.validation import InvalidAuthInfoError
from social_identity.domain.value_objects.base import ValueObject

_TOKEN_RESPONSE_KEYS = frozenset({"access_token", "token_type", "expires_in", "refresh_token"})


@dataclass(frozen=True, slots=True)
class OAuth2Info(ValueObject):
    """OAuth2 핸드셰이크 완료 후 받은 인증 정보.

    프로바이더는 이 값을 보관하지 않고, 호출자가 요청마다 전달합니다.
    """

    access_token: str
    token_type: str | None = None
    expires_in: int | None = None
    refresh_token: str | None = None
    params: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.access_token, str) or not self.access_token:
            raise InvalidAuthInfoError("access_token cannot be empty")
        if self.params is not None:
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __hash__(self) -> int:
        return hash((self.access_token, self.token_type, self.expires_in, self.refresh_token))

    def __repr__(self) -> str:
        # 토큰 마스킹
        return f"OAuth2Info(access_token='{self.access_token[:4]}***', token_type={self.token_type!r})"

    @classmethod
    def from_token_response(cls, data: dict[str, Any]) -> OAuth2Info:
        """토큰 엔드포인트 응답(JSON)에서 OAuth2Info 생성."""
        expires_in = data.get("expires_in")
        if expires_in is not None:
            try:
                expires_in = int(expires_in)
            except (TypeError, ValueError) as e:
                raise InvalidAuthInfoError("expires_in must be an integer") from e
        extra = {k: str(v) for k, v in data.items() if k not in _TOKEN_RESPONSE_KEYS}
        return cls(
            access_token=data.get("access_token") or "",
            token_type=data.get("token_type"),
            expires_in=expires_in,
            refresh_token=data.get("refresh_token"),
            params=extra or None,
        )
