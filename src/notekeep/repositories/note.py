"""Repository for Note entity."""

from typing import Any
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, select

from src.notekeep.models import Note, User
from src.notekeep.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    model = Note

    async def list_with_author(self, predicates: list[Any]) -> list[tuple[Note, str]]:
        """Notes matching ``predicates`` with their author's email, newest first."""
        result = await self.session.execute(
            select(Note, User.email)
            .join(User, col(User.id) == col(Note.user_id))
            .where(*predicates)
            .order_by(col(Note.created_at).desc())
        )
        return [(note, email) for note, email in result.all()]

    async def get_in_tenant(self, note_id: UUID, tenant_slug: str) -> Note | None:
        result = await self.session.execute(
            select(Note).where(Note.id == note_id, Note.tenant_slug == tenant_slug)
        )
        return result.scalar_one_or_none()

    async def count_by_tenant(self, tenant_slug: str) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(Note).where(Note.tenant_slug == tenant_slug)
        )
        return int(result.scalar_one())
