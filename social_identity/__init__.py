"""Social Identity.

OAuth2 액세스 토큰으로 소셜 프로바이더의 사용자 프로필을 조회하고
공통 프로필(CommonSocialProfile)로 정규화합니다.
"""

__version__ = "1.0.0"
