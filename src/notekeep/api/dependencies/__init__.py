"""FastAPI dependencies."""

from src.notekeep.api.dependencies.auth import (
    AdminCtx,
    CurrentUser,
    TenantCtx,
    get_current_user,
    get_tenant_context,
    require_admin,
)
from src.notekeep.api.dependencies.db import DBSession, get_db_session
from src.notekeep.api.dependencies.repositories import (
    InviteRepo,
    NoteRepo,
    TenantRepo,
    UserRepo,
)
from src.notekeep.api.dependencies.services import (
    AuthServiceDep,
    InviteServiceDep,
    NoteServiceDep,
    QuotaServiceDep,
    RegistrationServiceDep,
    SessionVerifierDep,
    UserServiceDep,
)

__all__ = [
    # Auth
    "AdminCtx",
    "CurrentUser",
    "TenantCtx",
    "get_current_user",
    "get_tenant_context",
    "require_admin",
    # DB
    "DBSession",
    "get_db_session",
    # Repositories
    "InviteRepo",
    "NoteRepo",
    "TenantRepo",
    "UserRepo",
    # Services
    "AuthServiceDep",
    "InviteServiceDep",
    "NoteServiceDep",
    "QuotaServiceDep",
    "RegistrationServiceDep",
    "SessionVerifierDep",
    "UserServiceDep",
]
