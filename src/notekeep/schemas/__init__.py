from src.notekeep.schemas.admin import (
    InvitationRead,
    InviteUserRequest,
    InviteUserResponse,
    UsersListResponse,
)
from src.notekeep.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    RegisterTenantRequest,
)
from src.notekeep.schemas.note import (
    MessageResponse,
    NoteCreate,
    NoteListResponse,
    NoteRead,
    NoteResponse,
    NotesMetaRead,
    NoteUpdate,
)
from src.notekeep.schemas.plan import PlanChangeResponse
from src.notekeep.schemas.tenant import TenantRead, TenantSlugPath
from src.notekeep.schemas.user import ProfileResponse, TenantUserRead, UserRead

__all__ = [
    # Admin
    "InvitationRead",
    "InviteUserRequest",
    "InviteUserResponse",
    "UsersListResponse",
    # Auth
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    "RegisterTenantRequest",
    # Notes
    "MessageResponse",
    "NoteCreate",
    "NoteListResponse",
    "NoteRead",
    "NoteResponse",
    "NotesMetaRead",
    "NoteUpdate",
    # Plans
    "PlanChangeResponse",
    # Tenant / user
    "ProfileResponse",
    "TenantRead",
    "TenantSlugPath",
    "TenantUserRead",
    "UserRead",
]
