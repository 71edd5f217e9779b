"""Google / Kakao / Naver Provider 단위 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from social_identity.application.profile.exceptions import (
    ProfileParseError,
    ProfileRetrievalError,
)
from social_identity.domain.value_objects import LoginInfo, OAuth2Info
from social_identity.infrastructure.oauth.providers import (
    GoogleProfileFetcher,
    KakaoProfileFetcher,
    NaverProfileFetcher,
    create_google_provider,
    create_kakao_provider,
    create_naver_provider,
)
from social_identity.tests.unit.factories import create_response


class TestGoogleProvider:
    """Google 프로바이더 테스트."""

    @pytest.mark.asyncio
    async def test_retrieve_profile(
        self, mock_http_layer: AsyncMock, auth_info: OAuth2Info
    ) -> None:
        # Arrange
        mock_http_layer.get.return_value = create_response(
            {
                "sub": "1090",
                "name": "Ada Lovelace",
                "given_name": "Ada",
                "family_name": "Lovelace",
                "picture": "https://lh3.googleusercontent.com/a/photo",
                "email": "ada@gmail.com",
                "email_verified": True,
            }
        )
        provider = create_google_provider(mock_http_layer)

        # Act
        profile = await provider.retrieve_profile(auth_info)

        # Assert
        assert profile.login_info == LoginInfo("google", "1090")
        assert profile.first_name == "Ada"
        assert profile.last_name == "Lovelace"
        assert profile.full_name == "Ada Lovelace"
        assert profile.email == "ada@gmail.com"
        assert profile.avatar_url == "https://lh3.googleusercontent.com/a/photo"
        mock_http_layer.get.assert_awaited_once_with(
            "https://www.googleapis.com/oauth2/v3/userinfo",
            headers={"Authorization": "Bearer test-access-token"},
        )

    @pytest.mark.asyncio
    async def test_oauth_error_response(
        self, mock_http_layer: AsyncMock, auth_info: OAuth2Info
    ) -> None:
        mock_http_layer.get.return_value = create_response(
            {"error": "invalid_request", "error_description": "Invalid Credentials"},
            status_code=401,
        )
        provider = create_google_provider(mock_http_layer)

        with pytest.raises(ProfileRetrievalError) as exc_info:
            await provider.retrieve_profile(auth_info)

        assert str(exc_info.value) == (
            "[SocialIdentity][google] Error retrieving profile information. "
            "Error code: invalid_request, message: Invalid Credentials"
        )

    def test_api_error_object(self) -> None:
        envelope = GoogleProfileFetcher().extract_error(
            {"error": {"code": 403, "message": "Forbidden", "status": "PERMISSION_DENIED"}}
        )

        assert envelope is not None
        assert envelope.code == 403
        assert envelope.message == "Forbidden"

    def test_profile_with_error_string_is_not_an_error(self) -> None:
        assert GoogleProfileFetcher().extract_error({"sub": "1", "error": "x"}) is None

    @pytest.mark.asyncio
    async def test_missing_sub(self, mock_http_layer: AsyncMock, auth_info: OAuth2Info) -> None:
        mock_http_layer.get.return_value = create_response({"email": "ada@gmail.com"})
        provider = create_google_provider(mock_http_layer)

        with pytest.raises(ProfileParseError):
            await provider.retrieve_profile(auth_info)


class TestKakaoProvider:
    """Kakao 프로바이더 테스트."""

    @pytest.mark.asyncio
    async def test_retrieve_profile(
        self, mock_http_layer: AsyncMock, auth_info: OAuth2Info
    ) -> None:
        # Arrange
        mock_http_layer.get.return_value = create_response(
            {
                "id": 123456789,
                "connected_at": "2024-01-01T00:00:00Z",
                "kakao_account": {
                    "name": "홍길동",
                    "email": "gildong@kakao.com",
                    "profile": {
                        "nickname": "길동",
                        "profile_image_url": "http://k.kakaocdn.net/img.jpg",
                    },
                },
            }
        )
        provider = create_kakao_provider(mock_http_layer)

        # Act
        profile = await provider.retrieve_profile(auth_info)

        # Assert
        assert profile.login_info == LoginInfo("kakao", "123456789")
        assert profile.full_name == "길동"
        assert profile.email == "gildong@kakao.com"
        assert profile.avatar_url == "http://k.kakaocdn.net/img.jpg"
        assert profile.first_name is None

    @pytest.mark.asyncio
    async def test_minimal_profile(
        self, mock_http_layer: AsyncMock, auth_info: OAuth2Info
    ) -> None:
        """동의항목이 없으면 ID만 존재."""
        mock_http_layer.get.return_value = create_response({"id": 1})
        provider = create_kakao_provider(mock_http_layer)

        profile = await provider.retrieve_profile(auth_info)

        assert profile.as_dict() == {"login_info": {"provider_id": "kakao", "provider_key": "1"}}

    @pytest.mark.asyncio
    async def test_error_response(self, mock_http_layer: AsyncMock, auth_info: OAuth2Info) -> None:
        mock_http_layer.get.return_value = create_response(
            {"msg": "this access token does not exist", "code": -401}, status_code=401
        )
        provider = create_kakao_provider(mock_http_layer)

        with pytest.raises(ProfileRetrievalError) as exc_info:
            await provider.retrieve_profile(auth_info)

        assert exc_info.value.code == -401
        assert str(exc_info.value).endswith(
            "Error code: -401, message: this access token does not exist"
        )

    @pytest.mark.asyncio
    async def test_nickname_maps_to_full_name(
        self, mock_http_layer: AsyncMock, auth_info: OAuth2Info
    ) -> None:
        """일반 앱 응답: 닉네임만 제공."""
        mock_http_layer.get.return_value = create_response(
            {"id": 1, "kakao_account": {"profile": {"nickname": "gildong"}}}
        )
        provider = create_kakao_provider(mock_http_layer)

        profile = await provider.retrieve_profile(auth_info)

        assert profile.full_name == "gildong"

    @pytest.mark.asyncio
    async def test_name_used_when_nickname_absent(
        self, mock_http_layer: AsyncMock, auth_info: OAuth2Info
    ) -> None:
        mock_http_layer.get.return_value = create_response(
            {"id": 1, "kakao_account": {"name": "홍길동", "profile": {}}}
        )
        provider = create_kakao_provider(mock_http_layer)

        profile = await provider.retrieve_profile(auth_info)

        assert profile.full_name == "홍길동"

    def test_profile_is_not_an_error(self) -> None:
        assert KakaoProfileFetcher().extract_error({"id": 1, "code": 0, "msg": "x"}) is None


class TestNaverProvider:
    """Naver 프로바이더 테스트."""

    @pytest.mark.asyncio
    async def test_retrieve_profile(
        self, mock_http_layer: AsyncMock, auth_info: OAuth2Info
    ) -> None:
        # Arrange
        mock_http_layer.get.return_value = create_response(
            {
                "resultcode": "00",
                "message": "success",
                "response": {
                    "id": "32742776",
                    "nickname": "OpenAPI",
                    "name": "오픈 API",
                    "email": "openapi@naver.com",
                    "profile_image": "https://ssl.pstatic.net/static/pwe/address/nodata_33x33.gif",
                },
            }
        )
        provider = create_naver_provider(mock_http_layer)

        # Act
        profile = await provider.retrieve_profile(auth_info)

        # Assert
        assert profile.login_info == LoginInfo("naver", "32742776")
        assert profile.full_name == "오픈 API"
        assert profile.email == "openapi@naver.com"
        assert profile.avatar_url is not None
        mock_http_layer.get.assert_awaited_once_with(
            "https://openapi.naver.com/v1/nid/me",
            headers={"Authorization": "Bearer test-access-token"},
        )

    @pytest.mark.asyncio
    async def test_error_response(self, mock_http_layer: AsyncMock, auth_info: OAuth2Info) -> None:
        mock_http_layer.get.return_value = create_response(
            {"resultcode": "024", "message": "Authentication failed"}, status_code=401
        )
        provider = create_naver_provider(mock_http_layer)

        with pytest.raises(ProfileRetrievalError) as exc_info:
            await provider.retrieve_profile(auth_info)

        assert str(exc_info.value) == (
            "[SocialIdentity][naver] Error retrieving profile information. "
            "Error code: 024, message: Authentication failed"
        )

    @pytest.mark.asyncio
    async def test_nickname_only_response(
        self, mock_http_layer: AsyncMock, auth_info: OAuth2Info
    ) -> None:
        """이름 동의가 없으면 닉네임 사용."""
        mock_http_layer.get.return_value = create_response(
            {"resultcode": "00", "response": {"id": "9", "nickname": "OpenAPI"}}
        )
        provider = create_naver_provider(mock_http_layer)

        profile = await provider.retrieve_profile(auth_info)

        assert profile.full_name == "OpenAPI"
        assert profile.email is None

    def test_success_code_is_not_an_error(self) -> None:
        assert NaverProfileFetcher().extract_error({"resultcode": "00", "response": {}}) is None

    @pytest.mark.asyncio
    async def test_missing_response_object(
        self, mock_http_layer: AsyncMock, auth_info: OAuth2Info
    ) -> None:
        mock_http_layer.get.return_value = create_response({"resultcode": "00"})
        provider = create_naver_provider(mock_http_layer)

        with pytest.raises(ProfileParseError):
            await provider.retrieve_profile(auth_info)
