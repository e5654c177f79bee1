"""Capability decisions for every tenant-scoped resource.

All authorization goes through ``decide``. The tenant is compared before the
role is consulted, so a cross-tenant request is denied no matter who asks.
``note_scope`` and ``user_scope`` build the row filters for queries so that
listing agrees with the per-row decision.
"""

from enum import Enum
from typing import Any, Protocol
from uuid import UUID

from src.notekeep.core.exceptions import ForbiddenError, NotFoundError, SelfRemovalError
from src.notekeep.models import Note, Role, User

NOTE_NOT_FOUND = "Note not found or access denied"


class Resource(str, Enum):
    NOTE = "note"
    USER = "user"
    TENANT_PLAN = "tenant_plan"


class Action(str, Enum):
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    LIST = "list"
    INVITE = "invite"
    REMOVE = "remove"
    UPGRADE = "upgrade"
    DOWNGRADE = "downgrade"


class Decision(str, Enum):
    ALLOW = "allow"
    DENY = "deny"


class Actor(Protocol):
    """The acting user as seen by the authorizer."""

    @property
    def user_id(self) -> UUID: ...

    @property
    def role(self) -> Role: ...

    @property
    def tenant_slug(self) -> str: ...


ALLOWED_ACTIONS: dict[Resource, frozenset[Action]] = {
    Resource.NOTE: frozenset({Action.READ, Action.CREATE, Action.UPDATE, Action.DELETE}),
    Resource.USER: frozenset({Action.LIST, Action.INVITE, Action.REMOVE}),
    Resource.TENANT_PLAN: frozenset({Action.UPGRADE, Action.DOWNGRADE}),
}


def decide(
    actor: Actor,
    resource: Resource,
    action: Action,
    *,
    resource_tenant_slug: str,
    owner_id: UUID | None = None,
) -> Decision:
    """Decide whether ``actor`` may perform ``action`` on ``resource``.

    Args:
        actor: The acting user.
        resource: Kind of resource being accessed.
        action: What the actor wants to do.
        resource_tenant_slug: Tenant the resource belongs to.
        owner_id: For notes, the owning user. For user removal, the target user.
    """
    if action not in ALLOWED_ACTIONS[resource]:
        return Decision.DENY
    if resource_tenant_slug != actor.tenant_slug:
        return Decision.DENY

    if resource is Resource.NOTE:
        if action is Action.CREATE or actor.role == Role.ADMIN:
            return Decision.ALLOW
        if owner_id is not None and owner_id == actor.user_id:
            return Decision.ALLOW
        return Decision.DENY

    if resource is Resource.USER and action is Action.REMOVE and owner_id == actor.user_id:
        return Decision.DENY

    return Decision.ALLOW if actor.role == Role.ADMIN else Decision.DENY


def authorize(
    actor: Actor,
    resource: Resource,
    action: Action,
    *,
    resource_tenant_slug: str,
    owner_id: UUID | None = None,
) -> None:
    """Raise unless ``decide`` allows the action.

    Denied note access is reported as not found so note existence never
    leaks across users or tenants.
    """
    decision = decide(
        actor,
        resource,
        action,
        resource_tenant_slug=resource_tenant_slug,
        owner_id=owner_id,
    )
    if decision is Decision.ALLOW:
        return

    if resource is Resource.NOTE and action is not Action.CREATE:
        raise NotFoundError(NOTE_NOT_FOUND)
    if resource_tenant_slug != actor.tenant_slug:
        raise ForbiddenError("Access denied to this tenant")
    if resource is Resource.USER and action is Action.REMOVE and owner_id == actor.user_id:
        raise SelfRemovalError()
    raise ForbiddenError("Admin access required")


def note_scope(actor: Actor) -> list[Any]:
    """Row filter for notes the actor may read.

    Always includes the tenant predicate. Members are further restricted to
    their own notes.
    """
    predicates: list[Any] = [Note.tenant_slug == actor.tenant_slug]
    if actor.role != Role.ADMIN:
        predicates.append(Note.user_id == actor.user_id)
    return predicates


def user_scope(actor: Actor) -> list[Any]:
    """Row filter for users visible to the actor's tenant."""
    return [User.tenant_slug == actor.tenant_slug]
