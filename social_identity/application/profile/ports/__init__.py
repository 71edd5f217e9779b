"""Profile ports."""

from social_identity.application.profile.ports.http_layer import HTTPLayer, HTTPResponse
from social_identity.application.profile.ports.provider_gateway import (
    SocialProviderGateway,
    SocialProviderLookup,
)

__all__ = [
    "HTTPLayer",
    "HTTPResponse",
    "SocialProviderGateway",
    "SocialProviderLookup",
]
