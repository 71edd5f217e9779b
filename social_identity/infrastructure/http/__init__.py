"""HTTP transport adapters."""

from social_identity.infrastructure.http.httpx_layer import HttpxHTTPLayer

__all__ = ["HttpxHTTPLayer"]
