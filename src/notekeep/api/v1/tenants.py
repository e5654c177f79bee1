"""Plan transition endpoints. Admins may only change their own tenant."""

from fastapi import APIRouter

from src.notekeep.api.dependencies import CurrentUser, QuotaServiceDep, TenantCtx
from src.notekeep.models import Tenant, User
from src.notekeep.schemas import PlanChangeResponse, TenantRead, TenantSlugPath, UserRead

router = APIRouter(prefix="/tenants", tags=["tenants"])


def _plan_response(message: str, tenant: Tenant, user: User) -> PlanChangeResponse:
    return PlanChangeResponse(
        message=message,
        tenant=TenantRead.model_validate(tenant),
        user=UserRead.build(user, tenant),
    )


@router.post(
    "/{slug}/upgrade",
    response_model=PlanChangeResponse,
    responses={
        400: {"description": "Already on the Pro plan, or malformed slug"},
        403: {"description": "Not an admin of this tenant"},
    },
)
async def upgrade(
    slug: TenantSlugPath,
    ctx: TenantCtx,
    current_user: CurrentUser,
    quota: QuotaServiceDep,
) -> PlanChangeResponse:
    tenant = await quota.upgrade(ctx, slug)
    return _plan_response("Successfully upgraded to Pro plan", tenant, current_user)


@router.post(
    "/{slug}/downgrade",
    response_model=PlanChangeResponse,
    responses={
        400: {"description": "Already on the Free plan, or malformed slug"},
        403: {"description": "Not an admin of this tenant, or too many notes (needs_action)"},
    },
)
async def downgrade(
    slug: TenantSlugPath,
    ctx: TenantCtx,
    current_user: CurrentUser,
    quota: QuotaServiceDep,
) -> PlanChangeResponse:
    tenant = await quota.downgrade(ctx, slug)
    return _plan_response("Successfully downgraded to Free plan", tenant, current_user)
