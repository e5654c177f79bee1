"""Plan transition schemas."""

from pydantic import BaseModel

from src.notekeep.schemas.tenant import TenantRead
from src.notekeep.schemas.user import UserRead


class PlanChangeResponse(BaseModel):
    """The tenant after the transition and the caller with the fresh plan."""

    success: bool = True
    message: str
    tenant: TenantRead
    user: UserRead
