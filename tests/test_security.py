"""Tests for token helpers and UserService."""

from exhibition_api.app.core.security import create_access_token, decode_access_token
from exhibition_api.app.services import UserService


class TestTokens:
    def test_round_trip(self):
        token = create_access_token({"sub": "john", "role": "user"}, secret_key="s3cret")
        payload = decode_access_token(token, secret_key="s3cret")
        assert payload["sub"] == "john"
        assert payload["role"] == "user"
        assert isinstance(payload["exp"], int)

    def test_wrong_key_is_rejected(self):
        token = create_access_token({"sub": "john"}, secret_key="one")
        assert decode_access_token(token, secret_key="two") is None

    def test_expired_token_is_rejected(self):
        token = create_access_token({"sub": "john"}, expires_delta=-10, secret_key="k")
        assert decode_access_token(token, secret_key="k") is None

    def test_tampered_payload_is_rejected(self):
        token = create_access_token({"sub": "john", "role": "user"}, secret_key="k")
        header, _, signature = token.split(".")
        forged = create_access_token({"sub": "john", "role": "admin"}, secret_key="k").split(".")[1]
        assert decode_access_token(f"{header}.{forged}.{signature}", secret_key="k") is None

    def test_garbage_is_rejected(self):
        assert decode_access_token("not-a-token", secret_key="k") is None
        assert decode_access_token("a.b.c", secret_key="k") is None
        assert decode_access_token("", secret_key="k") is None


class TestUserService:
    def test_login_known_user(self):
        user = UserService().login("Admin")
        assert user.username == "admin"
        assert user.role == "admin"

    def test_login_unknown_user(self):
        assert UserService().login("nobody") is None

    def test_list_users(self):
        assert [u.username for u in UserService().list_users()] == ["admin", "john", "guest"]
