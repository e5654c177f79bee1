"""Repository for Tenant entity."""

from sqlmodel import select

from src.notekeep.models import Tenant
from src.notekeep.repositories.base import BaseRepository


class TenantRepository(BaseRepository[Tenant]):
    model = Tenant

    async def get_by_slug(self, slug: str) -> Tenant | None:
        return await self.get_by_id(slug)

    async def get_for_update(self, slug: str) -> Tenant | None:
        """Load the tenant and hold a row lock until the transaction ends.

        Note creation, plan transitions and invitation issuance take this
        lock, so their count-then-write sequences run one at a time per tenant.
        """
        result = await self.session.execute(
            select(Tenant).where(Tenant.slug == slug).with_for_update()
        )
        return result.scalar_one_or_none()

    async def slug_exists(self, slug: str) -> bool:
        result = await self.session.execute(select(Tenant.slug).where(Tenant.slug == slug))
        return result.scalar_one_or_none() is not None
