"""Model exports.

Import from here: `from src.notekeep.models import User, Tenant`
"""

from src.notekeep.models.enums import Plan, Role, TenantStatus
from src.notekeep.models.invitation import TenantInvitation
from src.notekeep.models.note import Note
from src.notekeep.models.tenant import Tenant
from src.notekeep.models.user import User

__all__ = [
    # Enums
    "Plan",
    "Role",
    "TenantStatus",
    # Tables
    "Note",
    "Tenant",
    "TenantInvitation",
    "User",
]
