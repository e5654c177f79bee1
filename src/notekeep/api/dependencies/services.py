"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.notekeep.api.dependencies.db import DBSession
from src.notekeep.api.dependencies.repositories import (
    InviteRepo,
    NoteRepo,
    TenantRepo,
    UserRepo,
)
from src.notekeep.services import (
    AuthService,
    InviteService,
    NoteService,
    QuotaService,
    RegistrationService,
    SessionVerifier,
    UserService,
)


def get_session_verifier(user_repo: UserRepo) -> SessionVerifier:
    return SessionVerifier(user_repo)


def get_auth_service(user_repo: UserRepo, tenant_repo: TenantRepo) -> AuthService:
    return AuthService(user_repo, tenant_repo)


def get_registration_service(
    user_repo: UserRepo,
    tenant_repo: TenantRepo,
    session: DBSession,
) -> RegistrationService:
    return RegistrationService(user_repo, tenant_repo, session)


def get_invite_service(
    invite_repo: InviteRepo,
    user_repo: UserRepo,
    tenant_repo: TenantRepo,
    session: DBSession,
) -> InviteService:
    return InviteService(invite_repo, user_repo, tenant_repo, session)


def get_quota_service(
    tenant_repo: TenantRepo,
    note_repo: NoteRepo,
    session: DBSession,
) -> QuotaService:
    return QuotaService(tenant_repo, note_repo, session)


QuotaServiceDep = Annotated[QuotaService, Depends(get_quota_service)]


def get_note_service(
    note_repo: NoteRepo,
    quota_service: QuotaServiceDep,
    session: DBSession,
) -> NoteService:
    return NoteService(note_repo, quota_service, session)


InviteServiceDep = Annotated[InviteService, Depends(get_invite_service)]


def get_user_service(
    user_repo: UserRepo,
    invite_service: InviteServiceDep,
    session: DBSession,
) -> UserService:
    return UserService(user_repo, invite_service, session)


SessionVerifierDep = Annotated[SessionVerifier, Depends(get_session_verifier)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
RegistrationServiceDep = Annotated[RegistrationService, Depends(get_registration_service)]
NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
