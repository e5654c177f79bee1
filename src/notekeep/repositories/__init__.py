"""Repository layer - data access abstraction."""

from src.notekeep.repositories.base import BaseRepository
from src.notekeep.repositories.invitation import TenantInvitationRepository
from src.notekeep.repositories.note import NoteRepository
from src.notekeep.repositories.tenant import TenantRepository
from src.notekeep.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "NoteRepository",
    "TenantInvitationRepository",
    "TenantRepository",
    "UserRepository",
]
