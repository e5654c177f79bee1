"""Tests for the capability decision function and query scopes."""

from uuid import UUID, uuid4

import pytest
from hypothesis import given
from hypothesis import strategies as st

from src.notekeep.core.exceptions import (
    ForbiddenError,
    NotFoundError,
    SelfRemovalError,
)
from src.notekeep.core.permissions import (
    ALLOWED_ACTIONS,
    Action,
    Decision,
    Resource,
    authorize,
    decide,
    note_scope,
    user_scope,
)
from src.notekeep.models import Role
from src.notekeep.services import TenantContext

pytestmark = pytest.mark.unit

ALICE = UUID("00000000-0000-0000-0000-00000000000a")
BOB = UUID("00000000-0000-0000-0000-00000000000b")


def _ctx(user_id: UUID, role: Role, tenant: str = "acme") -> TenantContext:
    return TenantContext(user_id=user_id, email="x@acme.com", role=role, tenant_slug=tenant)


class TestNoteDecisions:
    def test_admin_reads_any_note_in_tenant(self):
        admin = _ctx(ALICE, Role.ADMIN)
        decision = decide(
            admin, Resource.NOTE, Action.READ, resource_tenant_slug="acme", owner_id=BOB
        )
        assert decision is Decision.ALLOW

    def test_member_reads_own_note(self):
        member = _ctx(BOB, Role.MEMBER)
        decision = decide(
            member, Resource.NOTE, Action.UPDATE, resource_tenant_slug="acme", owner_id=BOB
        )
        assert decision is Decision.ALLOW

    def test_member_cannot_touch_other_note(self):
        member = _ctx(BOB, Role.MEMBER)
        for action in (Action.READ, Action.UPDATE, Action.DELETE):
            decision = decide(
                member, Resource.NOTE, action, resource_tenant_slug="acme", owner_id=ALICE
            )
            assert decision is Decision.DENY

    def test_any_role_creates_in_own_tenant(self):
        for role in Role:
            decision = decide(
                _ctx(BOB, role), Resource.NOTE, Action.CREATE, resource_tenant_slug="acme"
            )
            assert decision is Decision.ALLOW

    def test_cross_tenant_denied_even_for_admin(self):
        admin = _ctx(ALICE, Role.ADMIN, tenant="globex")
        decision = decide(
            admin, Resource.NOTE, Action.READ, resource_tenant_slug="acme", owner_id=ALICE
        )
        assert decision is Decision.DENY

    def test_action_outside_resource_denied(self):
        admin = _ctx(ALICE, Role.ADMIN)
        assert (
            decide(admin, Resource.NOTE, Action.UPGRADE, resource_tenant_slug="acme")
            is Decision.DENY
        )


class TestAdminDecisions:
    @pytest.mark.parametrize(
        ("resource", "action"),
        [
            (Resource.USER, Action.LIST),
            (Resource.USER, Action.INVITE),
            (Resource.TENANT_PLAN, Action.UPGRADE),
            (Resource.TENANT_PLAN, Action.DOWNGRADE),
        ],
    )
    def test_admin_only(self, resource, action):
        admin = _ctx(ALICE, Role.ADMIN)
        member = _ctx(BOB, Role.MEMBER)
        assert decide(admin, resource, action, resource_tenant_slug="acme") is Decision.ALLOW
        assert decide(member, resource, action, resource_tenant_slug="acme") is Decision.DENY

    def test_admin_removes_other_user(self):
        admin = _ctx(ALICE, Role.ADMIN)
        decision = decide(
            admin, Resource.USER, Action.REMOVE, resource_tenant_slug="acme", owner_id=BOB
        )
        assert decision is Decision.ALLOW

    def test_admin_cannot_remove_self(self):
        admin = _ctx(ALICE, Role.ADMIN)
        decision = decide(
            admin, Resource.USER, Action.REMOVE, resource_tenant_slug="acme", owner_id=ALICE
        )
        assert decision is Decision.DENY

    def test_plan_change_on_other_tenant_denied(self):
        admin = _ctx(ALICE, Role.ADMIN, tenant="globex")
        decision = decide(
            admin, Resource.TENANT_PLAN, Action.UPGRADE, resource_tenant_slug="acme"
        )
        assert decision is Decision.DENY


class TestAuthorize:
    def test_denied_note_reads_as_not_found(self):
        member = _ctx(BOB, Role.MEMBER)
        with pytest.raises(NotFoundError):
            authorize(
                member, Resource.NOTE, Action.READ, resource_tenant_slug="acme", owner_id=ALICE
            )

    def test_cross_tenant_plan_change_forbidden(self):
        admin = _ctx(ALICE, Role.ADMIN, tenant="globex")
        with pytest.raises(ForbiddenError, match="Access denied to this tenant"):
            authorize(admin, Resource.TENANT_PLAN, Action.UPGRADE, resource_tenant_slug="acme")

    def test_self_removal_raises_dedicated_error(self):
        admin = _ctx(ALICE, Role.ADMIN)
        with pytest.raises(SelfRemovalError) as exc_info:
            authorize(
                admin, Resource.USER, Action.REMOVE, resource_tenant_slug="acme", owner_id=ALICE
            )
        assert isinstance(exc_info.value, ForbiddenError)
        assert exc_info.value.status_code == 400

    def test_member_gets_admin_required(self):
        member = _ctx(BOB, Role.MEMBER)
        with pytest.raises(ForbiddenError, match="Admin access required"):
            authorize(member, Resource.USER, Action.INVITE, resource_tenant_slug="acme")

    def test_allowed_returns_none(self):
        admin = _ctx(ALICE, Role.ADMIN)
        assert (
            authorize(admin, Resource.USER, Action.LIST, resource_tenant_slug="acme") is None
        )


class TestScopes:
    def test_admin_note_scope_is_tenant_only(self):
        predicates = note_scope(_ctx(ALICE, Role.ADMIN))
        assert len(predicates) == 1
        assert predicates[0].right.value == "acme"

    def test_member_note_scope_adds_owner(self):
        predicates = note_scope(_ctx(BOB, Role.MEMBER))
        assert len(predicates) == 2
        assert predicates[0].right.value == "acme"
        assert predicates[1].right.value == BOB

    def test_user_scope_is_tenant(self):
        predicates = user_scope(_ctx(BOB, Role.MEMBER, tenant="globex"))
        assert [p.right.value for p in predicates] == ["globex"]


def _scope_admits(predicates, note_tenant: str, note_owner: UUID) -> bool:
    """Evaluate the equality predicates built by ``note_scope`` against a row."""
    row = {"tenant_slug": note_tenant, "user_id": note_owner}
    return all(row[p.left.key] == p.right.value for p in predicates)


tenants = st.sampled_from(["acme", "globex"])
users = st.sampled_from([ALICE, BOB, uuid4()])


@given(
    role=st.sampled_from(list(Role)),
    actor_id=users,
    actor_tenant=tenants,
    owner_id=users,
    note_tenant=tenants,
)
def test_read_decision_agrees_with_list_scope(role, actor_id, actor_tenant, owner_id, note_tenant):
    """A note shows up in a listing exactly when reading it is allowed."""
    actor = _ctx(actor_id, role, actor_tenant)
    decision = decide(
        actor,
        Resource.NOTE,
        Action.READ,
        resource_tenant_slug=note_tenant,
        owner_id=owner_id,
    )
    assert (decision is Decision.ALLOW) == _scope_admits(
        note_scope(actor), note_tenant, owner_id
    )


@given(
    resource=st.sampled_from(list(Resource)),
    action=st.sampled_from(list(Action)),
    role=st.sampled_from(list(Role)),
)
def test_cross_tenant_always_denied(resource, action, role):
    actor = _ctx(ALICE, role, "globex")
    decision = decide(actor, resource, action, resource_tenant_slug="acme", owner_id=ALICE)
    assert decision is Decision.DENY


@given(resource=st.sampled_from(list(Resource)), action=st.sampled_from(list(Action)))
def test_unknown_actions_denied(resource, action):
    if action in ALLOWED_ACTIONS[resource]:
        return
    actor = _ctx(ALICE, Role.ADMIN)
    assert decide(actor, resource, action, resource_tenant_slug="acme") is Decision.DENY
