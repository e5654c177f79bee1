"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.notekeep.api.dependencies.db import DBSession
from src.notekeep.repositories import (
    NoteRepository,
    TenantInvitationRepository,
    TenantRepository,
    UserRepository,
)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_tenant_repository(session: DBSession) -> TenantRepository:
    return TenantRepository(session)


def get_invitation_repository(session: DBSession) -> TenantInvitationRepository:
    return TenantInvitationRepository(session)


def get_note_repository(session: DBSession) -> NoteRepository:
    return NoteRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
TenantRepo = Annotated[TenantRepository, Depends(get_tenant_repository)]
InviteRepo = Annotated[TenantInvitationRepository, Depends(get_invitation_repository)]
NoteRepo = Annotated[NoteRepository, Depends(get_note_repository)]
