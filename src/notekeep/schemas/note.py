"""Note schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.notekeep.models import Note, Plan, Role
from src.notekeep.models.note import MAX_CONTENT_LENGTH, MAX_TITLE_LENGTH


def _strip_title(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Title cannot be empty or whitespace only")
    return v


class NoteCreate(BaseModel):
    title: str = Field(min_length=1, max_length=MAX_TITLE_LENGTH)
    content: str = Field(default="", max_length=MAX_CONTENT_LENGTH)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _strip_title(v)


class NoteUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=MAX_TITLE_LENGTH)
    content: str | None = Field(default=None, max_length=MAX_CONTENT_LENGTH)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        if v is not None:
            return _strip_title(v)
        return v


class NoteRead(BaseModel):
    id: UUID
    title: str
    content: str
    user_id: UUID
    tenant_slug: str
    author_email: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @classmethod
    def from_row(cls, note: Note, author_email: str | None = None) -> "NoteRead":
        return cls.model_validate(note).model_copy(update={"author_email": author_email})


class NotesMetaRead(BaseModel):
    total: int
    subscription_plan: Plan
    limit_reached: bool
    user_role: Role

    model_config = {"from_attributes": True}


class NoteListResponse(BaseModel):
    success: bool = True
    notes: list[NoteRead]
    meta: NotesMetaRead


class NoteResponse(BaseModel):
    success: bool = True
    note: NoteRead


class MessageResponse(BaseModel):
    success: bool = True
    message: str
