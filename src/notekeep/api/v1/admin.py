"""Tenant administration endpoints. Admin role required."""

from uuid import UUID

from fastapi import APIRouter, status

from src.notekeep.api.dependencies import AdminCtx, InviteServiceDep, UserServiceDep
from src.notekeep.models import Role
from src.notekeep.schemas import (
    InvitationRead,
    InviteUserRequest,
    InviteUserResponse,
    MessageResponse,
    TenantUserRead,
    UsersListResponse,
)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/users", response_model=UsersListResponse)
async def list_users(ctx: AdminCtx, service: UserServiceDep) -> UsersListResponse:
    """Users of the tenant and its pending invitations."""
    members = await service.list_members(ctx)
    return UsersListResponse(
        users=[TenantUserRead.model_validate(u) for u in members.users],
        invitations=[InvitationRead.model_validate(i) for i in members.invitations],
    )


@router.post(
    "/invite-user",
    response_model=InviteUserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Email registered or invitation already pending"}},
)
async def invite_user(
    data: InviteUserRequest,
    ctx: AdminCtx,
    service: InviteServiceDep,
) -> InviteUserResponse:
    issued = await service.create_invite(ctx, email=data.email, role=Role(data.role))
    return InviteUserResponse(
        invitation=InvitationRead.model_validate(issued.invitation),
        token=issued.token,
        invite_link=issued.invite_link,
    )


@router.delete(
    "/users/{user_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Admins cannot remove themselves"},
        404: {"description": "User not found in this tenant"},
    },
)
async def remove_user(user_id: UUID, ctx: AdminCtx, service: UserServiceDep) -> MessageResponse:
    await service.remove_user(ctx, user_id)
    return MessageResponse(message="User removed successfully")
