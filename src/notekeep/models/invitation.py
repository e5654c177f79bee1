"""Tenant invitation model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.notekeep.models.base import enum_column, utc_now
from src.notekeep.models.enums import Role


class TenantInvitation(SQLModel, table=True):
    """Single-use, time-boxed grant to join a tenant with a given role.

    Only the SHA-256 digest of the token is stored. Rows are never deleted;
    accepted and expired invitations are filtered out of pending queries.
    """

    __tablename__ = "tenant_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_slug: str = Field(foreign_key="tenants.slug", index=True)
    email: str = Field(max_length=255, index=True)
    role: Role = Field(default=Role.MEMBER, sa_type=enum_column(Role))
    invited_by: UUID | None = Field(default=None, foreign_key="users.id", ondelete="SET NULL")
    token_hash: str = Field(max_length=255, unique=True, index=True)
    expires_at: datetime
    accepted_at: datetime | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
