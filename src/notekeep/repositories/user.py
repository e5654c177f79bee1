"""Repository for User entity."""

from typing import Any
from uuid import UUID

from sqlmodel import col, select

from src.notekeep.models import User
from src.notekeep.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email. Emails are stored lower-cased."""
        result = await self.session.execute(
            select(User).where(User.email == email.lower().strip())
        )
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        return await self.get_by_email(email) is not None

    async def get_in_tenant(self, user_id: UUID, tenant_slug: str) -> User | None:
        result = await self.session.execute(
            select(User).where(User.id == user_id, User.tenant_slug == tenant_slug)
        )
        return result.scalar_one_or_none()

    async def list_scoped(self, predicates: list[Any]) -> list[User]:
        """Users matching ``predicates``, newest first."""
        result = await self.session.execute(
            select(User).where(*predicates).order_by(col(User.created_at).desc())
        )
        return list(result.scalars().all())
