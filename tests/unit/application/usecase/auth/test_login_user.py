"""Unit tests for LoginUserUseCase and GetCurrentUserUseCase."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from conduit.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from conduit.application.usecase.auth.login_user import (
    LoginUserRequest,
    LoginUserUseCase,
)
from conduit.domain.error import (
    InvalidCredentialsError,
    InvalidTokenError,
    ValidationError,
)
from conduit.domain.service import JWTService
from tests.factories import register
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase."""

    @pytest.mark.asyncio
    async def test_login_with_any_case_email(self, unit_env: AsyncContainer):
        user_id = await register(unit_env, "jake", password="jakejake")
        use_case = await unit_env.get(LoginUserUseCase)
        jwt_service = await unit_env.get(JWTService)

        response = await use_case.execute(
            LoginUserRequest(email="JAKE@example.com", password="jakejake")
        )

        assert response.user.username == "jake"
        assert jwt_service.parse(response.user.token).id == user_id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env: AsyncContainer):
        await register(unit_env, "jake", password="jakejake")
        use_case = await unit_env.get(LoginUserUseCase)

        with pytest.raises(InvalidCredentialsError):
            await use_case.execute(
                LoginUserRequest(email="jake@example.com", password="wrong")
            )

    @pytest.mark.asyncio
    async def test_unknown_email(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(LoginUserUseCase)

        with pytest.raises(InvalidCredentialsError):
            await use_case.execute(
                LoginUserRequest(email="ghost@example.com", password="jakejake")
            )

    @pytest.mark.asyncio
    async def test_blank_email(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(LoginUserUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(LoginUserRequest(password="jakejake"))

        assert exc_info.value.field == "email"


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_returns_fresh_token(self, unit_env: AsyncContainer):
        user_id = await register(unit_env, "jake")
        use_case = await unit_env.get(GetCurrentUserUseCase)
        jwt_service = await unit_env.get(JWTService)

        response = await use_case.execute(GetCurrentUserRequest(user_id=user_id))

        assert response.user.email == "jake@example.com"
        assert jwt_service.parse(response.user.token).id == user_id

    @pytest.mark.asyncio
    async def test_vanished_user(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(InvalidTokenError):
            await use_case.execute(GetCurrentUserRequest(user_id=str(uuid4())))
