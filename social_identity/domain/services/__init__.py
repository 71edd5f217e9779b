"""Domain Services."""

from social_identity.domain.services.crypt import sha1, token_fingerprint

__all__ = ["sha1", "token_fingerprint"]
