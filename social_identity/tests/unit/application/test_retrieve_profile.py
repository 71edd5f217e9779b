"""RetrieveProfileQueryService 단위 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from social_identity.application.profile.exceptions import (
    ProfileRetrievalError,
    UnknownProviderError,
)
from social_identity.application.profile.queries import RetrieveProfileQueryService
from social_identity.domain.value_objects import OAuth2Info
from social_identity.tests.unit.factories import create_profile


class TestRetrieveProfileQueryService:
    """RetrieveProfileQueryService 테스트."""

    @pytest.fixture
    def mock_provider(self) -> MagicMock:
        provider = MagicMock()
        provider.id = "microsoft"
        provider.retrieve_profile = AsyncMock(return_value=create_profile())
        return provider

    @pytest.fixture
    def mock_providers(self, mock_provider: MagicMock) -> MagicMock:
        providers = MagicMock()
        providers.get.return_value = mock_provider
        return providers

    @pytest.fixture
    def query_service(self, mock_providers: MagicMock) -> RetrieveProfileQueryService:
        return RetrieveProfileQueryService(providers=mock_providers)

    @pytest.mark.asyncio
    async def test_execute_returns_profile(
        self,
        query_service: RetrieveProfileQueryService,
        mock_providers: MagicMock,
        mock_provider: MagicMock,
        auth_info: OAuth2Info,
    ) -> None:
        """프로바이더 조회 후 프로필 반환."""
        # Act
        result = await query_service.execute("microsoft", auth_info)

        # Assert
        assert result == create_profile()
        mock_providers.get.assert_called_once_with("microsoft")
        mock_provider.retrieve_profile.assert_awaited_once_with(auth_info)

    @pytest.mark.asyncio
    async def test_execute_unknown_provider(
        self,
        query_service: RetrieveProfileQueryService,
        mock_providers: MagicMock,
        auth_info: OAuth2Info,
    ) -> None:
        """등록되지 않은 프로바이더."""
        # Arrange
        mock_providers.get.side_effect = UnknownProviderError("myspace")

        # Act & Assert
        with pytest.raises(UnknownProviderError):
            await query_service.execute("myspace", auth_info)

    @pytest.mark.asyncio
    async def test_execute_propagates_provider_error(
        self,
        query_service: RetrieveProfileQueryService,
        mock_provider: MagicMock,
        auth_info: OAuth2Info,
    ) -> None:
        """프로바이더 오류는 그대로 전파."""
        # Arrange
        error = ProfileRetrievalError("microsoft", 401, "Invalid token")
        mock_provider.retrieve_profile.side_effect = error

        # Act & Assert
        with pytest.raises(ProfileRetrievalError) as exc_info:
            await query_service.execute("microsoft", auth_info)

        assert exc_info.value is error
