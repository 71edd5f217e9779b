"""Domain Value Objects."""

from social_identity.domain.value_objects.login_info import LoginInfo
from social_identity.domain.value_objects.oauth2_info import OAuth2Info
from social_identity.domain.value_objects.provider_settings import ProviderSettings
from social_identity.domain.value_objects.social_profile import CommonSocialProfile

__all__ = ["LoginInfo", "OAuth2Info", "ProviderSettings", "CommonSocialProfile"]
