"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, TenantFactory, ...
"""

from tests.factories.base import BaseFactory, generate_uuid, utc_now
from tests.factories.invitation import TenantInvitationFactory
from tests.factories.note import NoteFactory
from tests.factories.tenant import TenantFactory
from tests.factories.user import DEFAULT_TEST_PASSWORD, UserFactory, default_password_hash

__all__ = [
    # Base
    "BaseFactory",
    "generate_uuid",
    "utc_now",
    # Models
    "NoteFactory",
    "TenantFactory",
    "TenantInvitationFactory",
    "UserFactory",
    "DEFAULT_TEST_PASSWORD",
    "default_password_hash",
]
