"""Note model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.notekeep.models.base import utc_now

MAX_TITLE_LENGTH = 200
MAX_CONTENT_LENGTH = 10_000


class Note(SQLModel, table=True):
    """A note owned by one user inside that user's tenant."""

    __tablename__ = "notes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=MAX_TITLE_LENGTH)
    content: str = Field(default="", max_length=MAX_CONTENT_LENGTH)
    user_id: UUID = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    tenant_slug: str = Field(foreign_key="tenants.slug", index=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
