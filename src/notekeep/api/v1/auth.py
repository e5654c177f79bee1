"""Authentication endpoints - signup, invitation registration, login, profile."""

from fastapi import APIRouter, status
from starlette.requests import Request

from src.notekeep.api.dependencies import (
    AuthServiceDep,
    CurrentUser,
    InviteServiceDep,
    RegistrationServiceDep,
)
from src.notekeep.core.rate_limit import limiter
from src.notekeep.schemas import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    RegisterTenantRequest,
    TenantRead,
    UserRead,
)
from src.notekeep.services import AuthResult

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        token=result.token,
        user=UserRead.build(result.user, result.tenant),
        tenant=TenantRead.model_validate(result.tenant),
    )


@router.post(
    "/register-tenant",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Validation error, email taken or no free slug"}},
)
@limiter.limit("5/hour")
async def register_tenant(
    request: Request,
    data: RegisterTenantRequest,
    service: RegistrationServiceDep,
) -> AuthResponse:
    """Create a new organization and its admin account."""
    result = await service.register_tenant(
        organization_name=data.organization_name,
        admin_email=data.admin_email,
        admin_password=data.admin_password,
    )
    return _auth_response(result)


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid or expired invitation, or existing account"}},
)
@limiter.limit("10/hour")
async def register(
    request: Request,
    data: RegisterRequest,
    service: InviteServiceDep,
) -> AuthResponse:
    """Join a tenant by redeeming an invitation token."""
    result = await service.accept_invite(
        token=data.invitation_token,
        email=data.email,
        password=data.password,
    )
    return _auth_response(result)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={401: {"description": "Invalid credentials"}},
)
@limiter.limit("5/minute")
async def login(request: Request, data: LoginRequest, service: AuthServiceDep) -> AuthResponse:
    result = await service.authenticate(data.email, data.password)
    return _auth_response(result)


@router.get("/profile", response_model=ProfileResponse)
async def profile(current_user: CurrentUser, service: AuthServiceDep) -> ProfileResponse:
    user, tenant = await service.profile(current_user)
    return ProfileResponse(user=UserRead.build(user, tenant))
