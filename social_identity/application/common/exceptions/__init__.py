"""Application Exceptions.

공통 예외만 포함합니다. 프로필 조회 예외는 직접 import하세요:
  - social_identity.application.profile.exceptions.*
"""

from social_identity.application.common.exceptions.base import ApplicationError

__all__ = ["ApplicationError"]
