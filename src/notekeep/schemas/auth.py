"""Authentication and registration schemas.

Request bodies accept the camelCase names used by the web client
(``organizationName``, ``invitationToken``, ...) as well as snake_case.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from src.notekeep.schemas.tenant import TenantRead
from src.notekeep.schemas.user import UserRead

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_LENGTH = 128


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=MAX_PASSWORD_LENGTH)


class RegisterTenantRequest(BaseModel):
    """Self-service signup: creates a tenant and its first admin."""

    model_config = ConfigDict(populate_by_name=True)

    organization_name: str = Field(alias="organizationName", min_length=1, max_length=255)
    admin_email: EmailStr = Field(alias="adminEmail")
    admin_password: str = Field(
        alias="adminPassword",
        min_length=MIN_PASSWORD_LENGTH,
        max_length=MAX_PASSWORD_LENGTH,
    )

    @field_validator("organization_name")
    @classmethod
    def validate_organization_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Organization name cannot be empty or whitespace only")
        return v


class RegisterRequest(BaseModel):
    """Join an existing tenant with an invitation token."""

    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH)
    invitation_token: str = Field(alias="invitationToken", min_length=1, max_length=255)


class AuthResponse(BaseModel):
    success: bool = True
    token: str
    user: UserRead
    tenant: TenantRead
