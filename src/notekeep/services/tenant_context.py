"""Tenant context resolution.

Every tenant-scoped operation reads its scope from ``TenantContext``, which
is derived from the verified user record and never from client input.
"""

from dataclasses import dataclass
from uuid import UUID

from src.notekeep.core.exceptions import UnauthenticatedError
from src.notekeep.models import Role, User


@dataclass(frozen=True, slots=True)
class TenantContext:
    """The acting user and the tenant that scopes the current request."""

    user_id: UUID
    email: str
    role: Role
    tenant_slug: str

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


def resolve_tenant_context(user: User | None) -> TenantContext:
    """Build the request's tenant context from a verified user."""
    if user is None:
        raise UnauthenticatedError()
    return TenantContext(
        user_id=user.id,
        email=user.email,
        role=Role(user.role),
        tenant_slug=user.tenant_slug,
    )
