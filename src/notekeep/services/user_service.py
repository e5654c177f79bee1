"""User management service - tenant member listing and removal."""

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.notekeep.core.exceptions import NotFoundError
from src.notekeep.core.logging import get_logger
from src.notekeep.core.permissions import Action, Resource, authorize, user_scope
from src.notekeep.models import TenantInvitation, User
from src.notekeep.repositories import UserRepository
from src.notekeep.services.invite_service import InviteService
from src.notekeep.services.tenant_context import TenantContext

logger = get_logger(__name__)


@dataclass
class TenantMembers:
    users: list[User]
    invitations: list[TenantInvitation]


class UserService:
    def __init__(
        self,
        user_repo: UserRepository,
        invite_service: InviteService,
        session: AsyncSession,
    ):
        self.user_repo = user_repo
        self.invite_service = invite_service
        self.session = session

    async def list_members(self, ctx: TenantContext) -> TenantMembers:
        """Users of the admin's tenant plus its pending invitations."""
        authorize(ctx, Resource.USER, Action.LIST, resource_tenant_slug=ctx.tenant_slug)
        users = await self.user_repo.list_scoped(user_scope(ctx))
        invitations = await self.invite_service.list_pending_invites(ctx)
        return TenantMembers(users=users, invitations=invitations)

    async def remove_user(self, ctx: TenantContext, user_id: UUID) -> None:
        """Delete a user of the admin's tenant. Their notes go with them.

        Raises:
            SelfRemovalError: The admin targeted their own account.
            ForbiddenError: The actor is not an admin.
            NotFoundError: No such user in this tenant.
        """
        authorize(
            ctx,
            Resource.USER,
            Action.REMOVE,
            resource_tenant_slug=ctx.tenant_slug,
            owner_id=user_id,
        )

        user = await self.user_repo.get_in_tenant(user_id, ctx.tenant_slug)
        if user is None:
            raise NotFoundError("User not found")

        try:
            await self.user_repo.delete(user)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("User removed", removed_user_id=str(user_id), removed_by=str(ctx.user_id))
