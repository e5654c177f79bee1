"""Tenant model."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.notekeep.core.security.validators import MAX_TENANT_SLUG_LENGTH
from src.notekeep.models.base import enum_column, utc_now
from src.notekeep.models.enums import Plan, TenantStatus


class Tenant(SQLModel, table=True):
    """An organization. The slug is its immutable identifier."""

    __tablename__ = "tenants"

    slug: str = Field(max_length=MAX_TENANT_SLUG_LENGTH, primary_key=True)
    name: str = Field(max_length=255)
    subscription_plan: Plan = Field(default=Plan.FREE, sa_type=enum_column(Plan))
    status: TenantStatus = Field(default=TenantStatus.ACTIVE, sa_type=enum_column(TenantStatus))
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
