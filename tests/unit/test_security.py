"""Tests for password hashing, access tokens and bearer verification."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from jose import jwt

from src.notekeep.core.config import get_settings
from src.notekeep.core.exceptions import (
    InvalidCredentialError,
    UnauthenticatedError,
    UnknownSubjectError,
)
from src.notekeep.core.security import (
    ACCESS_TOKEN_TYPE,
    create_access_token,
    decode_token,
    hash_password,
    hash_token,
    verify_password,
)
from src.notekeep.models import Role
from src.notekeep.repositories import UserRepository
from src.notekeep.services import SessionVerifier, resolve_tenant_context
from tests.factories import UserFactory

pytestmark = pytest.mark.unit


def _raw_token(claims: dict) -> str:
    settings = get_settings()
    payload = {"exp": datetime.now(UTC) + timedelta(minutes=5), **claims}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


class TestPasswordHashing:
    def test_roundtrip(self):
        hashed = hash_password("password")
        assert hashed != "password"
        assert verify_password("password", hashed)

    def test_wrong_password(self):
        assert not verify_password("wrong", hash_password("password"))

    def test_garbage_hash_is_a_mismatch(self):
        assert not verify_password("password", "not-an-argon2-hash")


class TestTokenHashing:
    def test_deterministic_sha256_hex(self):
        digest = hash_token("abc")
        assert digest == hash_token("abc")
        assert len(digest) == 64
        assert digest != hash_token("abd")


class TestAccessTokens:
    def test_claims(self):
        user_id = uuid4()
        token = create_access_token(user_id, "alice@acme.com", "admin", "acme")

        payload = decode_token(token)
        assert payload is not None
        assert payload["sub"] == str(user_id)
        assert payload["email"] == "alice@acme.com"
        assert payload["role"] == "admin"
        assert payload["tenant_slug"] == "acme"
        assert payload["type"] == ACCESS_TOKEN_TYPE

    def test_default_expiry_is_24_hours(self):
        token = create_access_token(uuid4(), "a@acme.com", "member", "acme")
        payload = decode_token(token)
        assert payload is not None
        remaining = payload["exp"] - datetime.now(UTC).timestamp()
        assert timedelta(hours=23) < timedelta(seconds=remaining) <= timedelta(hours=24)

    def test_expired_token_rejected(self):
        token = create_access_token(
            uuid4(), "a@acme.com", "member", "acme", expires_delta=timedelta(seconds=-10)
        )
        assert decode_token(token) is None

    def test_tampered_token_rejected(self):
        member_token = create_access_token(uuid4(), "a@acme.com", "member", "acme")
        admin_token = create_access_token(uuid4(), "a@acme.com", "admin", "acme")
        header, payload, _ = admin_token.split(".")
        forged = ".".join([header, payload, member_token.split(".")[2]])
        assert decode_token(forged) is None

    def test_foreign_secret_rejected(self):
        token = jwt.encode(
            {"sub": str(uuid4()), "type": "access"},
            "another-secret-that-is-also-32-characters-long",
            algorithm="HS256",
        )
        assert decode_token(token) is None


class TestSessionVerifier:
    @pytest.fixture
    def user_repo(self) -> AsyncMock:
        return AsyncMock(spec=UserRepository)

    async def test_missing_header(self, user_repo):
        with pytest.raises(UnauthenticatedError, match="Missing or invalid"):
            await SessionVerifier(user_repo).verify(None)

    async def test_non_bearer_scheme(self, user_repo):
        with pytest.raises(UnauthenticatedError, match="Missing or invalid"):
            await SessionVerifier(user_repo).verify("Basic dXNlcjpwYXNz")

    async def test_empty_bearer(self, user_repo):
        with pytest.raises(UnauthenticatedError):
            await SessionVerifier(user_repo).verify("Bearer   ")

    async def test_garbage_token(self, user_repo):
        with pytest.raises(InvalidCredentialError):
            await SessionVerifier(user_repo).verify("Bearer not-a-jwt")
        user_repo.get_by_id.assert_not_awaited()

    async def test_wrong_token_type(self, user_repo):
        token = _raw_token({"sub": str(uuid4()), "type": "refresh"})
        with pytest.raises(InvalidCredentialError, match="Invalid token type"):
            await SessionVerifier(user_repo).verify(f"Bearer {token}")

    async def test_subject_not_a_uuid(self, user_repo):
        token = _raw_token({"sub": "alice", "type": ACCESS_TOKEN_TYPE})
        with pytest.raises(InvalidCredentialError, match="Invalid token payload"):
            await SessionVerifier(user_repo).verify(f"Bearer {token}")

    async def test_missing_subject(self, user_repo):
        token = _raw_token({"type": ACCESS_TOKEN_TYPE})
        with pytest.raises(InvalidCredentialError, match="Invalid token payload"):
            await SessionVerifier(user_repo).verify(f"Bearer {token}")

    async def test_deleted_user(self, user_repo):
        user_repo.get_by_id.return_value = None
        token = create_access_token(uuid4(), "gone@acme.com", "member", "acme")
        with pytest.raises(UnknownSubjectError):
            await SessionVerifier(user_repo).verify(f"Bearer {token}")

    async def test_live_user_wins_over_stale_claims(self, user_repo):
        """Role and tenant come from the user row, not from the token."""
        user = UserFactory.member(tenant_slug="acme")
        user_repo.get_by_id.return_value = user
        token = create_access_token(user.id, user.email, "admin", "globex")

        verified = await SessionVerifier(user_repo).verify(f"Bearer {token}")

        assert verified is user
        user_repo.get_by_id.assert_awaited_once_with(user.id)
        ctx = resolve_tenant_context(verified)
        assert ctx.role is Role.MEMBER
        assert ctx.tenant_slug == "acme"


class TestTenantContext:
    def test_resolved_from_user(self):
        user = UserFactory.admin(tenant_slug="acme", email="alice@acme.com")
        ctx = resolve_tenant_context(user)
        assert ctx.user_id == user.id
        assert ctx.email == "alice@acme.com"
        assert ctx.tenant_slug == "acme"
        assert ctx.is_admin

    def test_no_user(self):
        with pytest.raises(UnauthenticatedError):
            resolve_tenant_context(None)

    def test_immutable(self):
        ctx = resolve_tenant_context(UserFactory.member(tenant_slug="acme"))
        with pytest.raises(AttributeError):
            ctx.tenant_slug = "globex"  # type: ignore[misc]
