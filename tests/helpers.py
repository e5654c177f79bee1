"""Test helper functions for common request patterns."""

from httpx import AsyncClient

from src.notekeep.core.security import create_access_token
from src.notekeep.models import Role, User
from tests.factories import DEFAULT_TEST_PASSWORD


def auth_headers(user: User) -> dict[str, str]:
    """Bearer header for ``user``, signed the same way login signs it."""
    token = create_access_token(user.id, user.email, Role(user.role).value, user.tenant_slug)
    return {"Authorization": f"Bearer {token}"}


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def register_tenant(
    client: AsyncClient,
    organization_name: str,
    admin_email: str,
    password: str = DEFAULT_TEST_PASSWORD,
) -> dict:
    """Self-register an organization and return the response body."""
    response = await client.post(
        "/auth/register-tenant",
        json={
            "organizationName": organization_name,
            "adminEmail": admin_email,
            "adminPassword": password,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


async def invite(client: AsyncClient, admin_token: str, email: str, role: str = "member") -> str:
    """Invite ``email`` and return the plaintext invitation token."""
    response = await client.post(
        "/admin/invite-user",
        json={"email": email, "role": role},
        headers=bearer(admin_token),
    )
    assert response.status_code == 201, response.text
    data = response.json()
    assert data["inviteLink"].endswith(f"invite={data['token']}")
    return data["token"]


async def create_notes(client: AsyncClient, token: str, count: int) -> list[dict]:
    notes = []
    for i in range(count):
        response = await client.post(
            "/notes", json={"title": f"Note {i}", "content": "..."}, headers=bearer(token)
        )
        assert response.status_code == 201, response.text
        notes.append(response.json()["note"])
    return notes
