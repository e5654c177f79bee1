"""User schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.notekeep.models import Role, Tenant, User
from src.notekeep.schemas.tenant import TenantRead


class UserRead(BaseModel):
    """A user together with the tenant it belongs to."""

    id: UUID
    email: str
    role: Role
    tenant: TenantRead

    @classmethod
    def build(cls, user: User, tenant: Tenant) -> "UserRead":
        return cls(
            id=user.id,
            email=user.email,
            role=user.role,
            tenant=TenantRead.model_validate(tenant),
        )


class TenantUserRead(BaseModel):
    """A user row as listed for tenant admins."""

    id: UUID
    email: str
    role: Role
    created_at: datetime

    model_config = {"from_attributes": True}


class ProfileResponse(BaseModel):
    success: bool = True
    user: UserRead
