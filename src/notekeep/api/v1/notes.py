"""Note endpoints, scoped to the caller's tenant and role."""

from uuid import UUID

from fastapi import APIRouter, status

from src.notekeep.api.dependencies import NoteServiceDep, TenantCtx
from src.notekeep.schemas import (
    MessageResponse,
    NoteCreate,
    NoteListResponse,
    NoteRead,
    NoteResponse,
    NotesMetaRead,
    NoteUpdate,
)

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=NoteListResponse)
async def list_notes(ctx: TenantCtx, service: NoteServiceDep) -> NoteListResponse:
    """Admins get every note of the tenant, members only their own."""
    listing = await service.list_notes(ctx)
    return NoteListResponse(
        notes=[NoteRead.from_row(note, email) for note, email in listing.notes],
        meta=NotesMetaRead.model_validate(listing.meta),
    )


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={403: {"description": "Free plan note limit reached (limit_reached: true)"}},
)
async def create_note(
    data: NoteCreate,
    ctx: TenantCtx,
    service: NoteServiceDep,
) -> NoteResponse:
    note = await service.create_note(ctx, title=data.title, content=data.content)
    return NoteResponse(note=NoteRead.from_row(note, ctx.email))


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(note_id: UUID, ctx: TenantCtx, service: NoteServiceDep) -> NoteResponse:
    note = await service.get_note(ctx, note_id)
    return NoteResponse(note=NoteRead.from_row(note))


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: UUID,
    data: NoteUpdate,
    ctx: TenantCtx,
    service: NoteServiceDep,
) -> NoteResponse:
    note = await service.update_note(ctx, note_id, title=data.title, content=data.content)
    return NoteResponse(note=NoteRead.from_row(note))


@router.delete("/{note_id}", response_model=MessageResponse)
async def delete_note(note_id: UUID, ctx: TenantCtx, service: NoteServiceDep) -> MessageResponse:
    await service.delete_note(ctx, note_id)
    return MessageResponse(message="Note deleted successfully")
