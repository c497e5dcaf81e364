"""Unit tests for RegisterUserUseCase."""

from dishka import AsyncContainer
import pytest

from conduit.application.usecase.auth.register_user import (
    RegisterUserRequest,
    RegisterUserUseCase,
)
from conduit.domain.error import DuplicateUniqueError, ValidationError
from conduit.domain.service import JWTService, UserService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_user_with_token(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(RegisterUserUseCase)
        jwt_service = await unit_env.get(JWTService)

        response = await use_case.execute(
            RegisterUserRequest(
                username="Jacob", email="Jake@Jake.jake", password="jakejake"
            )
        )

        assert response.user.username == "jacob"
        assert response.user.email == "jake@jake.jake"
        assert response.user.bio is None
        assert jwt_service.parse(response.user.token).username == "jacob"

    @pytest.mark.asyncio
    async def test_password_is_stored_hashed(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(RegisterUserUseCase)
        user_service = await unit_env.get(UserService)

        await use_case.execute(
            RegisterUserRequest(
                username="jacob", email="jake@jake.jake", password="jakejake"
            )
        )

        user = await user_service.get_by_username("jacob")
        assert user.password_hash is not None
        assert user.password_hash != "jakejake"
        assert user.password_salt

    @pytest.mark.asyncio
    async def test_duplicate_username(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(RegisterUserUseCase)
        await use_case.execute(
            RegisterUserRequest(username="jacob", email="a@a.io", password="pw")
        )

        with pytest.raises(DuplicateUniqueError) as exc_info:
            await use_case.execute(
                RegisterUserRequest(username="JACOB", email="b@b.io", password="pw")
            )

        assert exc_info.value.field == "username"

    @pytest.mark.asyncio
    async def test_duplicate_email(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(RegisterUserUseCase)
        await use_case.execute(
            RegisterUserRequest(username="jacob", email="a@a.io", password="pw")
        )

        with pytest.raises(DuplicateUniqueError) as exc_info:
            await use_case.execute(
                RegisterUserRequest(username="anna", email="A@a.io", password="pw")
            )

        assert exc_info.value.field == "email"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("fields", "field", "message"),
        [
            ({"email": "a@a.io", "password": "pw"}, "username", "can't be blank"),
            (
                {"username": "jake j", "email": "a@a.io", "password": "pw"},
                "username",
                "is invalid",
            ),
            ({"username": "jacob", "password": "pw"}, "email", "can't be blank"),
            (
                {"username": "jacob", "email": "nope", "password": "pw"},
                "email",
                "is invalid",
            ),
            ({"username": "jacob", "email": "a@a.io"}, "password", "can't be blank"),
            (
                {"username": "jacob", "email": "a@a.io", "password": "   "},
                "password",
                "can't be blank",
            ),
        ],
    )
    async def test_rejects_bad_fields(
        self, unit_env: AsyncContainer, fields, field, message
    ):
        use_case = await unit_env.get(RegisterUserUseCase)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(RegisterUserRequest(**fields))

        assert exc_info.value.field == field
        assert exc_info.value.message == message
