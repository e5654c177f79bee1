"""Mocked persistence for service-level unit tests.

Repositories and the session are ``AsyncMock`` objects specced on the real
classes, so async methods are awaitable and sync ones (``add``,
``begin_nested``) stay plain mocks.
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.notekeep.repositories import (
    NoteRepository,
    TenantInvitationRepository,
    TenantRepository,
    UserRepository,
)


@pytest.fixture
def session() -> AsyncMock:
    mock = AsyncMock(spec=AsyncSession)
    # Savepoint context must not swallow IntegrityError
    mock.begin_nested.return_value.__aexit__.return_value = False
    return mock


@pytest.fixture
def user_repo() -> AsyncMock:
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def tenant_repo() -> AsyncMock:
    return AsyncMock(spec=TenantRepository)


@pytest.fixture
def invite_repo() -> AsyncMock:
    return AsyncMock(spec=TenantInvitationRepository)


@pytest.fixture
def note_repo() -> AsyncMock:
    return AsyncMock(spec=NoteRepository)
