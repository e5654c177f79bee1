"""User factory for test data generation."""

from functools import cache

from polyfactory import Use

from src.notekeep.core.security import hash_password
from src.notekeep.models import Role, User
from tests.factories.base import BaseFactory, generate_uuid, utc_now

# Default test password - stored for convenience in tests
DEFAULT_TEST_PASSWORD = "testpassword123"


@cache
def default_password_hash() -> str:
    return hash_password(DEFAULT_TEST_PASSWORD)


class UserFactory(BaseFactory):
    """Factory for generating User test data. ``tenant_slug`` must be passed."""

    __model__ = User

    id = Use(generate_uuid)
    email = Use(lambda: f"user_{generate_uuid().hex[-8:]}@example.com")
    hashed_password = Use(default_password_hash)
    role = Role.MEMBER
    tenant_slug = None
    created_at = Use(utc_now)

    @classmethod
    def admin(cls, **kwargs):
        """Create an admin user."""
        return cls.build(role=Role.ADMIN, **kwargs)

    @classmethod
    def member(cls, **kwargs):
        """Create a member user."""
        return cls.build(role=Role.MEMBER, **kwargs)
