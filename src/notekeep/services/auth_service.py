"""Authentication service - login and profile."""

from dataclasses import dataclass

from src.notekeep.core.exceptions import InvalidLoginError, NotFoundError
from src.notekeep.core.logging import get_logger
from src.notekeep.core.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    verify_password,
)
from src.notekeep.models import Role, Tenant, User
from src.notekeep.repositories import TenantRepository, UserRepository

logger = get_logger(__name__)


@dataclass
class AuthResult:
    """A freshly issued session: access token plus the user and its tenant."""

    token: str
    user: User
    tenant: Tenant


def issue_access_token(user: User) -> str:
    return create_access_token(
        subject=user.id,
        email=user.email,
        role=Role(user.role).value,
        tenant_slug=user.tenant_slug,
    )


class AuthService:
    def __init__(self, user_repo: UserRepository, tenant_repo: TenantRepository):
        self.user_repo = user_repo
        self.tenant_repo = tenant_repo

    async def authenticate(self, email: str, password: str) -> AuthResult:
        """Check credentials and issue an access token.

        Password verification always runs, against a dummy hash when the
        email is unknown, so response timing does not reveal whether an
        account exists.

        Raises:
            InvalidLoginError: Unknown email or wrong password.
        """
        user = await self.user_repo.get_by_email(email)

        password_hash = user.hashed_password if user else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if user is None or not password_valid:
            logger.info("Login failed")
            raise InvalidLoginError()

        tenant = await self.tenant_repo.get_by_slug(user.tenant_slug)
        if tenant is None:
            raise InvalidLoginError()

        logger.info("User logged in", user_id=str(user.id), tenant_slug=tenant.slug)
        return AuthResult(token=issue_access_token(user), user=user, tenant=tenant)

    async def profile(self, user: User) -> tuple[User, Tenant]:
        """Return the user with a fresh read of its tenant."""
        tenant = await self.tenant_repo.get_by_slug(user.tenant_slug)
        if tenant is None:
            raise NotFoundError("Tenant not found")
        return user, tenant
