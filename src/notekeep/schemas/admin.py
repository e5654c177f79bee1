"""Tenant administration schemas."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from src.notekeep.models import Role
from src.notekeep.schemas.user import TenantUserRead


class InviteUserRequest(BaseModel):
    email: EmailStr
    role: Literal["admin", "member"] = "member"


class InvitationRead(BaseModel):
    id: UUID
    email: str
    role: Role
    invited_by: UUID | None
    expires_at: datetime
    accepted_at: datetime | None
    created_at: datetime

    model_config = {"from_attributes": True}


class InviteUserResponse(BaseModel):
    success: bool = True
    invitation: InvitationRead
    token: str
    invite_link: str = Field(serialization_alias="inviteLink")


class UsersListResponse(BaseModel):
    success: bool = True
    users: list[TenantUserRead]
    invitations: list[InvitationRead]
