"""Authentication and tenant-context dependencies.

Chain: ``Authorization`` header -> SessionVerifier -> User ->
resolve_tenant_context -> TenantContext. Routes depend on ``TenantCtx`` (or
``AdminCtx``) and never read a tenant identifier from the client.
"""

from typing import Annotated

from fastapi import Depends, Header

from src.notekeep.api.dependencies.services import SessionVerifierDep
from src.notekeep.core.exceptions import ForbiddenError
from src.notekeep.core.logging import bind_user_context
from src.notekeep.models import User
from src.notekeep.services import TenantContext, resolve_tenant_context


async def get_current_user(
    verifier: SessionVerifierDep,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Validate the bearer token and return the live user record."""
    return await verifier.verify(authorization)


CurrentUser = Annotated[User, Depends(get_current_user)]


async def get_tenant_context(user: CurrentUser) -> TenantContext:
    ctx = resolve_tenant_context(user)
    bind_user_context(ctx.user_id, ctx.tenant_slug, ctx.email)
    return ctx


TenantCtx = Annotated[TenantContext, Depends(get_tenant_context)]


async def require_admin(ctx: TenantCtx) -> TenantContext:
    """Reject non-admins early. Services still run the full capability check."""
    if not ctx.is_admin:
        raise ForbiddenError("Admin access required")
    return ctx


AdminCtx = Annotated[TenantContext, Depends(require_admin)]
