"""Tenant invitation service."""

import secrets
from dataclasses import dataclass
from datetime import timedelta

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.notekeep.core.config import get_settings
from src.notekeep.core.exceptions import (
    ConflictError,
    InvalidInputError,
    InvalidOrExpiredInvitationError,
    NoteKeepError,
)
from src.notekeep.core.logging import get_logger
from src.notekeep.core.permissions import Action, Resource, authorize
from src.notekeep.core.security import hash_password, hash_token
from src.notekeep.models import Role, TenantInvitation, User
from src.notekeep.models.base import utc_now
from src.notekeep.repositories import (
    TenantInvitationRepository,
    TenantRepository,
    UserRepository,
)
from src.notekeep.services.auth_service import AuthResult, issue_access_token
from src.notekeep.services.tenant_context import TenantContext

logger = get_logger(__name__)


def build_invite_link(token: str) -> str:
    settings = get_settings()
    return f"{settings.app_url.rstrip('/')}/register?invite={token}"


@dataclass
class IssuedInvitation:
    """A stored invitation plus its plaintext token, which is never persisted."""

    invitation: TenantInvitation
    token: str
    invite_link: str


class InviteService:
    """Issues, lists and consumes tenant invitations."""

    def __init__(
        self,
        invite_repo: TenantInvitationRepository,
        user_repo: UserRepository,
        tenant_repo: TenantRepository,
        session: AsyncSession,
    ):
        self.invite_repo = invite_repo
        self.user_repo = user_repo
        self.tenant_repo = tenant_repo
        self.session = session

    async def create_invite(
        self,
        ctx: TenantContext,
        email: str,
        role: Role = Role.MEMBER,
    ) -> IssuedInvitation:
        """Issue an invitation into the admin's own tenant.

        The tenant row is locked while the duplicate checks run, so two
        admins cannot both issue a pending invitation for the same email.

        Raises:
            ForbiddenError: The actor is not an admin.
            ConflictError: The email is already registered, or already has
                a pending invitation in this tenant.
        """
        authorize(ctx, Resource.USER, Action.INVITE, resource_tenant_slug=ctx.tenant_slug)
        settings = get_settings()
        email = email.lower().strip()

        try:
            await self.tenant_repo.get_for_update(ctx.tenant_slug)

            if await self.user_repo.email_exists(email):
                raise ConflictError("User with this email already exists")

            if await self.invite_repo.get_pending_for_email(email, ctx.tenant_slug):
                raise ConflictError("Invitation already sent to this email")

            # 256 bits of entropy
            token = secrets.token_urlsafe(32)

            invitation = TenantInvitation(
                tenant_slug=ctx.tenant_slug,
                email=email,
                role=role,
                invited_by=ctx.user_id,
                token_hash=hash_token(token),
                expires_at=utc_now() + timedelta(days=settings.invite_expire_days),
            )
            self.invite_repo.add(invitation)
            await self.session.commit()
            await self.session.refresh(invitation)
        except NoteKeepError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to create invitation", error=str(e))
            raise

        logger.info(
            "Invitation created",
            tenant_slug=ctx.tenant_slug,
            invitation_id=str(invitation.id),
            role=Role(role).value,
            invited_by=str(ctx.user_id),
        )
        return IssuedInvitation(
            invitation=invitation,
            token=token,
            invite_link=build_invite_link(token),
        )

    async def accept_invite(self, token: str, email: str, password: str) -> AuthResult:
        """Register a new user from an invitation token.

        Runs as one transaction: the invitation row is locked, the user is
        created with the invitation's role and tenant, and the invitation is
        marked accepted. Either both writes commit or neither does, so a
        token can never be redeemed twice.

        Raises:
            InvalidOrExpiredInvitationError: No pending invitation for the token.
            InvalidInputError: The invitation was issued to a different email.
            ConflictError: The email is already registered.
        """
        email = email.lower().strip()

        try:
            invitation = await self.invite_repo.get_pending_by_hash_for_update(hash_token(token))
            if invitation is None:
                raise InvalidOrExpiredInvitationError()

            if invitation.email != email:
                raise InvalidInputError("This invitation was issued to a different email address")

            if await self.user_repo.email_exists(email):
                raise ConflictError("Account already exists")

            tenant = await self.tenant_repo.get_by_slug(invitation.tenant_slug)
            if tenant is None:
                raise InvalidOrExpiredInvitationError()

            user = User(
                email=email,
                hashed_password=hash_password(password),
                role=invitation.role,
                tenant_slug=invitation.tenant_slug,
            )
            self.user_repo.add(user)
            await self.session.flush()

            await self.invite_repo.mark_accepted(invitation)
            await self.session.commit()
        except NoteKeepError:
            await self.session.rollback()
            raise
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError("Account already exists") from e
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to accept invitation", error=str(e))
            raise

        logger.info(
            "Invitation accepted",
            tenant_slug=tenant.slug,
            invitation_id=str(invitation.id),
            user_id=str(user.id),
        )
        return AuthResult(token=issue_access_token(user), user=user, tenant=tenant)

    async def list_pending_invites(self, ctx: TenantContext) -> list[TenantInvitation]:
        """Pending invitations of the admin's tenant, newest first."""
        authorize(ctx, Resource.USER, Action.LIST, resource_tenant_slug=ctx.tenant_slug)
        return await self.invite_repo.list_pending(ctx.tenant_slug)
