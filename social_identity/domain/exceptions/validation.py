"""Validation Exceptions."""

from social_identity.domain.exceptions.base import DomainError


class ValidationError(DomainError):
    """값 객체 검증 실패."""

    def __init__(self, message: str = "Validation failed") -> None:
        super().__init__(message)


class InvalidLoginInfoError(ValidationError):
    """LoginInfo 검증 실패."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid login info: {reason}")


class InvalidAuthInfoError(ValidationError):
    """OAuth2 인증 정보 검증 실패."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid auth info: {reason}")
