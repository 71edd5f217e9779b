"""Profile retrieval exceptions."""

from social_identity.application.profile.exceptions.profile import (
    LIBRARY_NAME,
    SPECIFIED_PROFILE_ERROR,
    ProfileParseError,
    ProfileRetrievalError,
    UnknownProviderError,
)
from social_identity.application.profile.exceptions.transport import TransportError

__all__ = [
    "LIBRARY_NAME",
    "SPECIFIED_PROFILE_ERROR",
    "ProfileParseError",
    "ProfileRetrievalError",
    "TransportError",
    "UnknownProviderError",
]
