import pytest

from selectshop_api.app.core.config import settings
from selectshop_api.app.core.exceptions import AuthorizationError, DuplicateError
from selectshop_api.app.core.messages import ErrorCode
from selectshop_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from selectshop_api.app.models import UserRole
from selectshop_api.app.schemas.user import SignupRequest
from selectshop_api.app.services.user_service import UserService


class TestSignup:
    """Tests for UserService.signup."""

    def test_registers_regular_user(self, run):
        user = run(UserService.signup(SignupRequest(username="kim", email="kim@example.com", password="secret")))

        assert user.username == "kim"
        assert user.role == UserRole.USER

    def test_duplicate_username(self, run):
        run(UserService.signup(SignupRequest(username="kim", email="a@example.com", password="secret")))

        with pytest.raises(DuplicateError) as exc_info:
            run(UserService.signup(SignupRequest(username="kim", email="b@example.com", password="secret")))

        assert exc_info.value.code == ErrorCode.DUPLICATE_USERNAME

    def test_duplicate_email(self, run):
        run(UserService.signup(SignupRequest(username="kim", email="a@example.com", password="secret")))

        with pytest.raises(DuplicateError) as exc_info:
            run(UserService.signup(SignupRequest(username="lee", email="a@example.com", password="secret")))

        assert exc_info.value.code == ErrorCode.DUPLICATE_EMAIL

    def test_admin_requires_matching_token(self, run, monkeypatch):
        monkeypatch.setattr(settings, "admin_token", "letmein")
        request = SignupRequest(username="root", email="r@example.com", password="secret", admin=True, adminToken="nope")

        with pytest.raises(AuthorizationError) as exc_info:
            run(UserService.signup(request))

        assert exc_info.value.code == ErrorCode.INVALID_ADMIN_TOKEN

    def test_admin_with_token(self, run, monkeypatch):
        monkeypatch.setattr(settings, "admin_token", "letmein")
        request = SignupRequest(username="root", email="r@example.com", password="secret", admin=True, adminToken="letmein")

        user = run(UserService.signup(request))

        assert user.role == UserRole.ADMIN

    def test_admin_signup_disabled_without_configured_token(self, run, monkeypatch):
        monkeypatch.setattr(settings, "admin_token", "")
        request = SignupRequest(username="root", email="r@example.com", password="secret", admin=True)

        with pytest.raises(AuthorizationError):
            run(UserService.signup(request))


class TestAuthenticate:
    def test_valid_credentials(self, run, make_user):
        make_user("kim", password="secret")

        user = run(UserService.authenticate("kim", "secret"))

        assert user is not None
        assert user.username == "kim"

    def test_wrong_password(self, run, make_user):
        make_user("kim", password="secret")

        assert run(UserService.authenticate("kim", "wrong")) is None

    def test_unknown_user(self, run):
        assert run(UserService.authenticate("ghost", "secret")) is None


class TestSecurityHelpers:
    def test_password_round_trip(self):
        hashed = hash_password("secret")

        assert verify_password("secret", hashed)
        assert not verify_password("other", hashed)
        assert not verify_password("secret", "not-a-hash")

    def test_token_round_trip(self):
        token = create_access_token({"sub": "kim", "role": "USER"})

        payload = decode_access_token(token)

        assert payload["sub"] == "kim"
        assert payload["role"] == "USER"

    def test_tampered_token_is_rejected(self):
        token = create_access_token({"sub": "kim"})
        header, payload, signature = token.split(".")
        forged = create_access_token({"sub": "root"}).split(".")[1]

        assert decode_access_token(f"{header}.{forged}.{signature}") is None
        assert decode_access_token("garbage") is None

    def test_expired_token_is_rejected(self):
        token = create_access_token({"sub": "kim"}, expires_delta=-60)

        assert decode_access_token(token) is None
