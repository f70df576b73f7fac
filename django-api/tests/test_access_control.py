"""Tests for session tokens and the access control gate.

Invalid credentials are anonymous on public routes and 401 on protected ones.
Run with: pytest tests/test_access_control.py -v
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from rest_framework.test import APIClient

from ticketing.auth import BcryptPasswordHasher, Identity, TokenCodec
from ticketing.domain import UserId

SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture
def codec() -> TokenCodec:
    return TokenCodec(secret=SECRET, lifetime=timedelta(hours=24))


def bearer(token: str) -> APIClient:
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


class TestTokenCodec:
    def test_round_trip(self, codec):
        token = codec.issue(UserId(3), is_admin=False)

        assert codec.verify(token) == Identity(user_id=UserId(3), is_admin=False)

    def test_payload_shape_and_expiry(self, codec):
        issued = datetime(2020, 1, 1, tzinfo=timezone.utc)

        token = codec.issue(UserId(1), is_admin=True, now=issued)

        payload = jwt.decode(
            token, SECRET, algorithms=["HS256"], options={"verify_exp": False, "verify_iat": False}
        )
        assert payload["userId"] == 1
        assert payload["isAdmin"] is True
        assert payload["iat"] == int(issued.timestamp())
        assert payload["exp"] - payload["iat"] == 24 * 3600

    def test_expired_token_is_rejected(self, codec):
        token = codec.issue(UserId(1), is_admin=False, now=datetime.now(timezone.utc) - timedelta(hours=25))

        assert codec.verify(token) is None

    def test_bad_signature_is_rejected(self, codec):
        forged = TokenCodec(secret="another-secret-key-that-is-long-enough").issue(UserId(1), True)

        assert codec.verify(forged) is None

    @pytest.mark.parametrize(
        "payload",
        [
            {"isAdmin": False},
            {"userId": "1", "isAdmin": False},
            {"userId": 1, "isAdmin": "yes"},
            {"userId": 0, "isAdmin": False},
        ],
    )
    def test_malformed_payload_is_rejected(self, codec, payload):
        payload = {**payload, "exp": datetime.now(timezone.utc) + timedelta(hours=1)}
        token = jwt.encode(payload, SECRET, algorithm="HS256")

        assert codec.verify(token) is None

    def test_token_without_expiry_is_rejected(self, codec):
        token = jwt.encode({"userId": 1, "isAdmin": False}, SECRET, algorithm="HS256")

        assert codec.verify(token) is None

    def test_garbage_is_rejected(self, codec):
        assert codec.verify("not.a.jwt") is None


class TestPasswordHasher:
    def test_cost_factor_below_ten_is_refused(self):
        with pytest.raises(ValueError):
            BcryptPasswordHasher(rounds=9)

    def test_verify(self):
        hasher = BcryptPasswordHasher()
        hashed = hasher.hash_password("secret1")

        assert hasher.verify_password("secret1", hashed)
        assert not hasher.verify_password("secret2", hashed)
        assert not hasher.verify_password("secret1", "not-a-bcrypt-hash")


class TestGate:
    """Optional authentication on public routes, enforced on protected ones."""

    @pytest.mark.parametrize(
        "header",
        ["Bearer garbage", "Basic dXNlcjpwYXNz", "Bearer", "Bearer a b"],
    )
    def test_public_route_ignores_bad_credentials(self, header):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=header)

        response = client.get("/api/events")

        assert response.status_code == 200

    def test_public_route_ignores_expired_token(self, app_container):
        expired = app_container.tokens.issue(
            UserId(1), True, now=datetime.now(timezone.utc) - timedelta(days=2)
        )

        assert bearer(expired).get("/api/categories").status_code == 200

    def test_protected_route_without_token(self, api_client):
        response = api_client.get("/api/bookings")

        assert response.status_code == 401
        assert response.json() == {"message": "Authentication required"}

    def test_protected_route_with_expired_token(self, app_container):
        expired = app_container.tokens.issue(
            UserId(2), False, now=datetime.now(timezone.utc) - timedelta(days=2)
        )

        response = bearer(expired).get("/api/bookings")

        assert response.status_code == 401

    def test_protected_route_with_forged_token(self):
        forged = TokenCodec(secret="another-secret-key-that-is-long-enough").issue(UserId(1), True)

        assert bearer(forged).get("/api/auth/me").status_code == 401

    def test_admin_route_rejects_anonymous_with_401(self, api_client):
        assert api_client.delete("/api/events/1").status_code == 401

    def test_admin_route_rejects_non_admin_with_403(self, john_client):
        response = john_client.delete("/api/events/1")

        assert response.status_code == 403
        assert response.json() == {"message": "Admin privileges required"}

    def test_admin_flag_comes_from_token(self, app_container):
        # User 2 is not an admin in the store, but the token claims so.
        token = app_container.tokens.issue(UserId(2), is_admin=True)

        assert bearer(token).delete("/api/events/3").status_code == 200
