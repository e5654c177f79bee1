"""Integration test fixtures for database and HTTP client operations.

These fixtures require a PostgreSQL database at ``DATABASE_URL``. Tests are
skipped when it is unreachable. Every test starts from empty tables.
"""

import asyncio
from collections.abc import AsyncGenerator, Awaitable, Callable
from dataclasses import dataclass

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from src.notekeep.api.dependencies import get_db_session
from src.notekeep.core import db
from src.notekeep.core.config import get_settings
from src.notekeep.core.db import get_session, run_migrations_sync
from src.notekeep.main import create_app
from src.notekeep.models import Note, Plan, Tenant, User
from tests.factories import NoteFactory, TenantFactory, UserFactory
from tests.helpers import auth_headers

TRUNCATE_ALL = text("TRUNCATE notes, tenant_invitations, users, tenants CASCADE")


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create test database engine and ensure migrations are applied."""
    await db.dispose_engine()

    settings = get_settings()
    test_engine = create_async_engine(settings.database_url, poolclass=NullPool)

    try:
        async with test_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (OSError, DBAPIError) as e:
        await test_engine.dispose()
        pytest.skip(f"PostgreSQL not reachable: {e}")

    await asyncio.to_thread(run_migrations_sync)

    async with test_engine.begin() as conn:
        await conn.execute(TRUNCATE_ALL)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.execute(TRUNCATE_ALL)
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session for seeding and assertions. Tests commit explicitly."""
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """HTTP client whose requests each get their own session on the test engine."""
    app = create_app()

    async def _session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@dataclass
class SeededTenant:
    tenant: Tenant
    admin: User
    member: User

    @property
    def admin_headers(self) -> dict[str, str]:
        return auth_headers(self.admin)

    @property
    def member_headers(self) -> dict[str, str]:
        return auth_headers(self.member)


@pytest.fixture
def seed_tenant(db_session: AsyncSession) -> Callable[..., Awaitable[SeededTenant]]:
    """Insert a tenant with one admin and one member."""

    async def _seed(slug: str, plan: Plan = Plan.FREE) -> SeededTenant:
        tenant = TenantFactory.build(slug=slug, subscription_plan=plan)
        db_session.add(tenant)
        await db_session.flush()

        admin = UserFactory.admin(tenant_slug=slug, email=f"admin@{slug}.com")
        member = UserFactory.member(tenant_slug=slug, email=f"member@{slug}.com")
        db_session.add_all([admin, member])
        await db_session.commit()
        return SeededTenant(tenant=tenant, admin=admin, member=member)

    return _seed


@pytest.fixture
def seed_notes(db_session: AsyncSession) -> Callable[[User, int], Awaitable[list[Note]]]:
    """Insert ``count`` notes owned by ``user``."""

    async def _seed(user: User, count: int) -> list[Note]:
        notes = [
            NoteFactory.build(user_id=user.id, tenant_slug=user.tenant_slug)
            for _ in range(count)
        ]
        db_session.add_all(notes)
        await db_session.commit()
        return notes

    return _seed
