"""Domain Exceptions."""

from social_identity.domain.exceptions.base import DomainError
from social_identity.domain.exceptions.validation import (
    InvalidAuthInfoError,
    InvalidLoginInfoError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "InvalidLoginInfoError",
    "InvalidAuthInfoError",
]
