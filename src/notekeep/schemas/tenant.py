"""Tenant schemas."""

from typing import Annotated

from fastapi import Path
from pydantic import AfterValidator, BaseModel

from src.notekeep.core.security.validators import (
    MAX_TENANT_SLUG_LENGTH,
    validate_tenant_slug_format,
)
from src.notekeep.models import Plan

TenantSlugPath = Annotated[
    str,
    Path(max_length=MAX_TENANT_SLUG_LENGTH),
    AfterValidator(validate_tenant_slug_format),
]


class TenantRead(BaseModel):
    slug: str
    name: str
    subscription_plan: Plan

    model_config = {"from_attributes": True}
