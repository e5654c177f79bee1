"""Registration service - self-service tenant provisioning.

Creates exactly one tenant and its first admin in a single transaction.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.notekeep.core.config import get_settings
from src.notekeep.core.exceptions import (
    ConflictError,
    InvalidInputError,
    NoteKeepError,
    SlugAllocationFailedError,
)
from src.notekeep.core.logging import get_logger
from src.notekeep.core.security import derive_slug, hash_password, with_random_suffix
from src.notekeep.models import Role, Tenant, User
from src.notekeep.repositories import TenantRepository, UserRepository
from src.notekeep.services.auth_service import AuthResult, issue_access_token

logger = get_logger(__name__)

EMAIL_TAKEN = "User with this email already exists"


class RegistrationService:
    """Service for tenant + admin registration."""

    def __init__(
        self,
        user_repo: UserRepository,
        tenant_repo: TenantRepository,
        session: AsyncSession,
    ):
        self.user_repo = user_repo
        self.tenant_repo = tenant_repo
        self.session = session

    async def register_tenant(
        self,
        organization_name: str,
        admin_email: str,
        admin_password: str,
    ) -> AuthResult:
        """Create a tenant and its admin user, then sign the admin in.

        1. Derive the base slug from the organization name
        2. Reject an email that already exists anywhere
        3. Allocate a unique slug and insert the tenant (see ``_allocate_tenant``)
        4. Insert the admin user and COMMIT both rows together

        Any failure rolls back the whole transaction, so no tenant is left
        without its admin.
        """
        settings = get_settings()
        name = organization_name.strip()
        email = admin_email.lower().strip()

        try:
            base_slug = derive_slug(name, settings.slug_suffix_length)
        except ValueError as e:
            raise InvalidInputError(str(e)) from e

        try:
            if await self.user_repo.email_exists(email):
                raise ConflictError(EMAIL_TAKEN)

            tenant = await self._allocate_tenant(name, base_slug)

            user = User(
                email=email,
                hashed_password=hash_password(admin_password),
                role=Role.ADMIN,
                tenant_slug=tenant.slug,
            )
            self.user_repo.add(user)
            await self.session.flush()
            await self.session.commit()
        except NoteKeepError:
            await self.session.rollback()
            raise
        except IntegrityError as e:
            # Lost a race on users.email
            await self.session.rollback()
            raise ConflictError(EMAIL_TAKEN) from e
        except Exception as e:
            await self.session.rollback()
            logger.error("Failed to register tenant", error=str(e))
            raise

        logger.info("Tenant provisioned", tenant_slug=tenant.slug, admin_user_id=str(user.id))
        return AuthResult(token=issue_access_token(user), user=user, tenant=tenant)

    async def _allocate_tenant(self, name: str, base_slug: str) -> Tenant:
        """Insert a tenant under the first free slug.

        The first attempt uses ``base_slug``; later attempts add a random
        suffix. Each insert runs in a SAVEPOINT so a unique-constraint
        violation from a concurrent registration only discards that attempt.
        """
        settings = get_settings()

        for attempt in range(settings.slug_max_attempts):
            slug = (
                base_slug
                if attempt == 0
                else with_random_suffix(base_slug, settings.slug_suffix_length)
            )
            if await self.tenant_repo.slug_exists(slug):
                continue

            tenant = Tenant(slug=slug, name=name)
            try:
                async with self.session.begin_nested():
                    self.tenant_repo.add(tenant)
                    await self.session.flush()
            except IntegrityError:
                logger.info("Tenant slug collision", slug=slug, attempt=attempt + 1)
                continue
            return tenant

        logger.warning("Slug allocation exhausted", base_slug=base_slug)
        raise SlugAllocationFailedError()
