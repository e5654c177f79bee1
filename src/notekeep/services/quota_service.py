"""Plan quota enforcement and plan transitions.

Note volume is counted per tenant: every note whose ``tenant_slug`` is the
tenant's. The same count drives the creation check, the ``limit_reached``
flag on listings and the downgrade check.
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from src.notekeep.core.config import get_settings
from src.notekeep.core.exceptions import (
    InvalidTransitionError,
    NoteKeepError,
    NotFoundError,
    QuotaBlocksTransitionError,
    QuotaExceededError,
)
from src.notekeep.core.logging import get_logger
from src.notekeep.core.permissions import Action, Resource, authorize
from src.notekeep.models import Plan, Tenant
from src.notekeep.models.base import utc_now
from src.notekeep.repositories import NoteRepository, TenantRepository
from src.notekeep.services.tenant_context import TenantContext

logger = get_logger(__name__)


@dataclass(frozen=True)
class QuotaUsage:
    plan: Plan
    note_count: int
    limit: int
    limit_reached: bool


class QuotaService:
    def __init__(
        self,
        tenant_repo: TenantRepository,
        note_repo: NoteRepository,
        session: AsyncSession,
    ):
        self.tenant_repo = tenant_repo
        self.note_repo = note_repo
        self.session = session

    @property
    def limit(self) -> int:
        return get_settings().free_plan_note_limit

    async def ensure_can_create(self, tenant_slug: str) -> Tenant:
        """Check the free-plan ceiling before a note insert.

        Must run inside the transaction that performs the insert. The tenant
        row stays locked until that transaction ends, so concurrent creations
        in one tenant are counted one after another and the limit is strict.

        Raises:
            QuotaExceededError: Free plan and the tenant already has ``limit`` notes.
        """
        tenant = await self.tenant_repo.get_for_update(tenant_slug)
        if tenant is None:
            raise NotFoundError("Tenant not found")

        if tenant.subscription_plan == Plan.FREE:
            count = await self.note_repo.count_by_tenant(tenant_slug)
            if count >= self.limit:
                logger.info(
                    "Note quota exceeded",
                    tenant_slug=tenant_slug,
                    note_count=count,
                    limit=self.limit,
                )
                raise QuotaExceededError(current_count=count, limit=self.limit)

        return tenant

    async def usage(self, tenant_slug: str) -> QuotaUsage:
        tenant = await self.tenant_repo.get_by_slug(tenant_slug)
        if tenant is None:
            raise NotFoundError("Tenant not found")

        count = await self.note_repo.count_by_tenant(tenant_slug)
        plan = Plan(tenant.subscription_plan)
        return QuotaUsage(
            plan=plan,
            note_count=count,
            limit=self.limit,
            limit_reached=plan == Plan.FREE and count >= self.limit,
        )

    async def upgrade(self, ctx: TenantContext, tenant_slug: str) -> Tenant:
        """Move the tenant from free to pro. No quota check applies."""
        return await self._transition(ctx, tenant_slug, Plan.PRO)

    async def downgrade(self, ctx: TenantContext, tenant_slug: str) -> Tenant:
        """Move the tenant from pro to free.

        Blocked while the tenant holds more notes than the free plan allows.
        Nothing is deleted on the caller's behalf.
        """
        return await self._transition(ctx, tenant_slug, Plan.FREE)

    async def _transition(self, ctx: TenantContext, tenant_slug: str, target: Plan) -> Tenant:
        action = Action.UPGRADE if target is Plan.PRO else Action.DOWNGRADE
        authorize(ctx, Resource.TENANT_PLAN, action, resource_tenant_slug=tenant_slug)

        try:
            tenant = await self.tenant_repo.get_for_update(tenant_slug)
            if tenant is None:
                raise NotFoundError("Tenant not found")

            previous = Plan(tenant.subscription_plan)
            if previous is target:
                raise InvalidTransitionError(f"Tenant is already on {target.value.title()} plan")

            if target is Plan.FREE:
                count = await self.note_repo.count_by_tenant(tenant_slug)
                if count > self.limit:
                    raise QuotaBlocksTransitionError(current_count=count, limit=self.limit)

            tenant.subscription_plan = target
            tenant.updated_at = utc_now()
            self.tenant_repo.add(tenant)
            await self.session.commit()
            await self.session.refresh(tenant)
        except NoteKeepError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to change plan", tenant_slug=tenant_slug, error=str(e))
            raise

        logger.info(
            "Tenant plan changed",
            tenant_slug=tenant_slug,
            from_plan=previous.value,
            to_plan=target.value,
            changed_by=str(ctx.user_id),
        )
        return tenant
