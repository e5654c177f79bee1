"""User model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.notekeep.models.base import enum_column, utc_now
from src.notekeep.models.enums import Role


class User(SQLModel, table=True):
    """A user belongs to exactly one tenant. Email is unique across all tenants."""

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    hashed_password: str = Field(max_length=255)
    role: Role = Field(default=Role.MEMBER, sa_type=enum_column(Role))
    tenant_slug: str = Field(foreign_key="tenants.slug", index=True)
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
