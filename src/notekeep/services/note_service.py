"""Note access service - note CRUD under tenant and role constraints."""

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.notekeep.core.exceptions import NoteKeepError, NotFoundError
from src.notekeep.core.logging import get_logger
from src.notekeep.core.permissions import NOTE_NOT_FOUND, Action, Resource, authorize, note_scope
from src.notekeep.models import Note, Plan, Role
from src.notekeep.models.base import utc_now
from src.notekeep.repositories import NoteRepository
from src.notekeep.services.quota_service import QuotaService
from src.notekeep.services.tenant_context import TenantContext

logger = get_logger(__name__)


@dataclass(frozen=True)
class NotesMeta:
    total: int
    subscription_plan: Plan
    limit_reached: bool
    user_role: Role


@dataclass
class NoteListing:
    notes: list[tuple[Note, str]]
    meta: NotesMeta


class NoteService:
    def __init__(
        self,
        note_repo: NoteRepository,
        quota_service: QuotaService,
        session: AsyncSession,
    ):
        self.note_repo = note_repo
        self.quota_service = quota_service
        self.session = session

    async def list_notes(self, ctx: TenantContext) -> NoteListing:
        """Notes visible to the actor, newest first, with author emails.

        Admins see every note of their tenant, members only their own.
        """
        rows = await self.note_repo.list_with_author(note_scope(ctx))
        usage = await self.quota_service.usage(ctx.tenant_slug)
        return NoteListing(
            notes=rows,
            meta=NotesMeta(
                total=len(rows),
                subscription_plan=usage.plan,
                limit_reached=usage.limit_reached,
                user_role=ctx.role,
            ),
        )

    async def get_note(self, ctx: TenantContext, note_id: UUID) -> Note:
        return await self._load(ctx, note_id, Action.READ)

    async def create_note(self, ctx: TenantContext, title: str, content: str) -> Note:
        """Create a note owned by the actor, subject to the plan quota.

        The quota check and the insert share one transaction.
        """
        authorize(ctx, Resource.NOTE, Action.CREATE, resource_tenant_slug=ctx.tenant_slug)

        try:
            await self.quota_service.ensure_can_create(ctx.tenant_slug)
            note = Note(
                title=title,
                content=content,
                user_id=ctx.user_id,
                tenant_slug=ctx.tenant_slug,
            )
            self.note_repo.add(note)
            await self.session.commit()
            await self.session.refresh(note)
        except NoteKeepError:
            await self.session.rollback()
            raise
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to create note", error=str(e))
            raise

        logger.info("Note created", note_id=str(note.id))
        return note

    async def update_note(
        self,
        ctx: TenantContext,
        note_id: UUID,
        title: str | None = None,
        content: str | None = None,
    ) -> Note:
        note = await self._load(ctx, note_id, Action.UPDATE)
        if title is not None:
            note.title = title
        if content is not None:
            note.content = content
        note.updated_at = utc_now()

        try:
            self.note_repo.add(note)
            await self.session.commit()
            await self.session.refresh(note)
        except Exception:
            await self.session.rollback()
            raise
        return note

    async def delete_note(self, ctx: TenantContext, note_id: UUID) -> None:
        note = await self._load(ctx, note_id, Action.DELETE)
        try:
            await self.note_repo.delete(note)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info("Note deleted", note_id=str(note_id))

    async def _load(self, ctx: TenantContext, note_id: UUID, action: Action) -> Note:
        """Tenant-scoped lookup followed by the per-note capability check."""
        note = await self.note_repo.get_in_tenant(note_id, ctx.tenant_slug)
        if note is None:
            raise NotFoundError(NOTE_NOT_FOUND)
        authorize(
            ctx,
            Resource.NOTE,
            action,
            resource_tenant_slug=note.tenant_slug,
            owner_id=note.user_id,
        )
        return note
