"""Application Settings.

env_prefix="SOCIAL_" 사용으로 SOCIAL_MICROSOFT_API_URL 등의 환경변수 매핑.
"""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from social_identity.domain.value_objects import ProviderSettings


class Settings(BaseSettings):
    """소셜 프로필 조회 설정.

    환경변수에서 자동으로 로드됩니다.

    예시:
        SOCIAL_MICROSOFT_API_URL → microsoft_api_url
        SOCIAL_HTTP_TIMEOUT_SECONDS → http_timeout_seconds
    """

    # Service
    service_name: str = "social-identity"
    service_version: str = "1.0.0"
    environment: str = "local"
    log_level: str = "INFO"

    # HTTP
    http_timeout_seconds: float = 10.0

    # Providers - Microsoft
    microsoft_api_url: Optional[str] = None
    microsoft_api_version: Optional[str] = None
    microsoft_client_id: Optional[str] = None
    microsoft_client_secret: Optional[str] = None
    microsoft_redirect_uri: Optional[str] = None
    microsoft_scope: Optional[str] = "User.Read"

    # Providers - Google
    google_api_url: Optional[str] = None
    google_client_id: Optional[str] = None
    google_client_secret: Optional[str] = None
    google_redirect_uri: Optional[str] = None
    google_scope: Optional[str] = "openid email profile"

    # Providers - Kakao
    kakao_api_url: Optional[str] = None
    kakao_client_id: Optional[str] = None
    kakao_client_secret: Optional[str] = None
    kakao_redirect_uri: Optional[str] = None
    kakao_scope: Optional[str] = None

    # Providers - Naver
    naver_api_url: Optional[str] = None
    naver_client_id: Optional[str] = None
    naver_client_secret: Optional[str] = None
    naver_redirect_uri: Optional[str] = None
    naver_scope: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="SOCIAL_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator(
        "microsoft_api_url",
        "google_api_url",
        "kakao_api_url",
        "naver_api_url",
        "microsoft_redirect_uri",
        "google_redirect_uri",
        "kakao_redirect_uri",
        "naver_redirect_uri",
        mode="before",
    )
    @classmethod
    def _empty_string_to_none(cls, value: Optional[str]):
        """빈 문자열을 None으로 변환."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def provider_settings(self, provider_id: str) -> ProviderSettings:
        """프로바이더별 ProviderSettings 생성."""
        return ProviderSettings(
            api_url=getattr(self, f"{provider_id}_api_url", None),
            client_id=getattr(self, f"{provider_id}_client_id", None),
            client_secret=getattr(self, f"{provider_id}_client_secret", None),
            redirect_uri=getattr(self, f"{provider_id}_redirect_uri", None),
            scope=getattr(self, f"{provider_id}_scope", None),
            api_version=getattr(self, f"{provider_id}_api_version", None),
        )


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return Settings()
