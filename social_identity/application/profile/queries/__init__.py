"""Profile queries."""

from social_identity.application.profile.queries.retrieve_profile import (
    RetrieveProfileQueryService,
)

__all__ = ["RetrieveProfileQueryService"]
