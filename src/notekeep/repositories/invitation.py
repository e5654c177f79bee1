"""Repository for TenantInvitation entity."""

from typing import Any

from sqlmodel import select

from src.notekeep.models import TenantInvitation
from src.notekeep.models.base import utc_now
from src.notekeep.repositories.base import BaseRepository


def _pending() -> tuple[Any, Any]:
    return (
        TenantInvitation.accepted_at.is_(None),  # type: ignore[union-attr]
        TenantInvitation.expires_at > utc_now(),
    )


class TenantInvitationRepository(BaseRepository[TenantInvitation]):
    model = TenantInvitation

    async def get_pending_by_hash_for_update(self, token_hash: str) -> TenantInvitation | None:
        """Get a pending invitation by token hash and lock its row.

        A concurrent acceptance of the same token waits on the lock, then
        sees ``accepted_at`` set and finds nothing.
        """
        result = await self.session.execute(
            select(TenantInvitation)
            .where(TenantInvitation.token_hash == token_hash, *_pending())
            .with_for_update()
        )
        return result.scalar_one_or_none()

    async def get_pending_for_email(self, email: str, tenant_slug: str) -> TenantInvitation | None:
        result = await self.session.execute(
            select(TenantInvitation).where(
                TenantInvitation.email == email,
                TenantInvitation.tenant_slug == tenant_slug,
                *_pending(),
            )
        )
        return result.scalars().first()

    async def list_pending(self, tenant_slug: str) -> list[TenantInvitation]:
        """Pending invitations for a tenant, newest first."""
        result = await self.session.execute(
            select(TenantInvitation)
            .where(TenantInvitation.tenant_slug == tenant_slug, *_pending())
            .order_by(TenantInvitation.created_at.desc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())

    async def mark_accepted(self, invitation: TenantInvitation) -> TenantInvitation:
        invitation.accepted_at = utc_now()
        self.session.add(invitation)
        await self.session.flush()
        return invitation
