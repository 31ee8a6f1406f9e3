"""
Tests for response records, enums and the dataclass converter
"""

import dataclasses
import json
import pytest

from gotrue import (
    DataclassJsonConverter,
    GoTrueHttpError,
    GrantType,
    Settings,
    TokenResponse,
    UserResponse,
    VerifyType,
    is_gotrue_error,
)
from gotrue.converter import GoTrueJsonConverter


class TestEnums:
    def test_verify_type_values(self):
        assert [t.value for t in VerifyType] == ["signup", "recovery"]

    def test_grant_type_values(self):
        assert [g.value for g in GrantType] == ["password", "refresh_token", "authorization_code"]


class TestSettings:
    def test_from_dict(self):
        settings = Settings.from_dict({
            "external": {"github": True, "gitlab": False, "email": True},
            "disable_signup": True,
            "mailer_autoconfirm": True,
            "phone_autoconfirm": False,
            "sms_provider": "twilio",
        })

        assert settings.external == {"github": True, "gitlab": False, "email": True}
        assert settings.disable_signup is True
        assert settings.autoconfirm is True
        assert settings.sms_provider == "twilio"

    def test_defaults(self):
        settings = Settings.from_dict({})
        assert settings.external == {}
        assert settings.disable_signup is False
        assert settings.autoconfirm is False

    def test_null_external(self):
        settings = Settings.from_dict({"external": None, "disable_signup": False})
        assert settings.external == {}


class TestUserResponse:
    def test_from_dict(self):
        user = UserResponse.from_dict({
            "id": "user-1",
            "aud": "authenticated",
            "role": "authenticated",
            "email": "test@example.com",
            "phone": "",
            "invited_at": "2026-01-02T00:00:00Z",
            "app_metadata": {"provider": "email"},
            "user_metadata": None,
            "created_at": "2026-01-01T00:00:00Z",
            "updated_at": "2026-01-03T00:00:00Z",
        })

        assert user.id == "user-1"
        assert user.invited_at == "2026-01-02T00:00:00Z"
        assert user.phone is None
        assert user.app_metadata == {"provider": "email"}
        assert user.user_metadata == {}

    def test_null_email_for_phone_user(self):
        user = UserResponse.from_dict({"id": "user-1", "email": None, "phone": "+15550100"})

        assert user.email == ""
        assert user.phone == "+15550100"

    def test_missing_id_raises(self):
        with pytest.raises(KeyError):
            UserResponse.from_dict({"email": "test@example.com"})

    def test_immutable(self):
        user = UserResponse.from_dict({"id": "user-1"})
        with pytest.raises(dataclasses.FrozenInstanceError):
            user.email = "other@example.com"  # type: ignore[misc]


class TestTokenResponse:
    def test_from_dict_with_user(self):
        tokens = TokenResponse.from_dict({
            "access_token": "a",
            "token_type": "bearer",
            "expires_in": 3600,
            "refresh_token": "r",
            "user": {"id": "user-1", "email": "test@example.com"},
        })

        assert tokens.expires_in == 3600
        assert tokens.user is not None
        assert tokens.user.email == "test@example.com"

    def test_from_dict_without_user(self):
        tokens = TokenResponse.from_dict({"access_token": "a", "refresh_token": "r"})
        assert tokens.user is None
        assert tokens.token_type == "bearer"


class TestDataclassJsonConverter:
    def test_satisfies_protocol(self):
        assert isinstance(DataclassJsonConverter(), GoTrueJsonConverter)

    def test_deserialize(self):
        body = json.dumps({"access_token": "a", "refresh_token": "r", "expires_in": 60})
        tokens = DataclassJsonConverter().deserialize(body, TokenResponse)
        assert tokens == TokenResponse(access_token="a", token_type="bearer", expires_in=60, refresh_token="r")

    def test_non_object_body(self):
        with pytest.raises(TypeError):
            DataclassJsonConverter().deserialize("[1, 2]", Settings)


class TestErrors:
    def test_http_error_to_dict(self):
        error = GoTrueHttpError(422, '{"msg":"weak password"}')

        assert is_gotrue_error(error)
        assert error.to_dict() == {
            "name": "GoTrueHttpError",
            "message": "Unexpected response status: 422",
            "status": 422,
            "http_body": '{"msg":"weak password"}',
        }
        assert "422" in repr(error)
