from src.notekeep.services.auth_service import AuthResult, AuthService
from src.notekeep.services.invite_service import InviteService, IssuedInvitation
from src.notekeep.services.note_service import NoteListing, NoteService, NotesMeta
from src.notekeep.services.quota_service import QuotaService, QuotaUsage
from src.notekeep.services.registration_service import RegistrationService
from src.notekeep.services.session_verifier import SessionVerifier
from src.notekeep.services.tenant_context import TenantContext, resolve_tenant_context
from src.notekeep.services.user_service import TenantMembers, UserService

__all__ = [
    "AuthResult",
    "AuthService",
    "InviteService",
    "IssuedInvitation",
    "NoteListing",
    "NoteService",
    "NotesMeta",
    "QuotaService",
    "QuotaUsage",
    "RegistrationService",
    "SessionVerifier",
    "TenantContext",
    "TenantMembers",
    "UserService",
    "resolve_tenant_context",
]
