# kudos_wall/test/routes/test_role_gates.py

# Para rodar o arquivo
# pytest kudos_wall/test/routes/test_role_gates.py -v

import pytest

from kudos_wall.domain.models.user_domain_model import UserRole
from kudos_wall.test.conftest import auth_headers

FORBIDDEN = {"detail": "Forbidden: insufficient permissions"}


@pytest.mark.asyncio
async def test_no_token_is_401_not_403(async_client):
    response = await async_client.post("/api/teams", json={"name": "Platform"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized"}


@pytest.mark.asyncio
async def test_team_member_cannot_create_team(async_client, create_user):
    _, token = await create_user(UserRole.TEAM_MEMBER)

    response = await async_client.post("/api/teams", json={"name": "Platform"}, headers=auth_headers(token))

    assert response.status_code == 403
    assert response.json() == FORBIDDEN


@pytest.mark.asyncio
async def test_admin_can_create_team(async_client, create_user):
    _, token = await create_user(UserRole.ADMIN)

    response = await async_client.post("/api/teams", json={"name": "Platform"}, headers=auth_headers(token))

    assert response.status_code == 201


@pytest.mark.asyncio
async def test_category_gate_only_admits_admin(async_client, create_user):
    """
    The category gate lists "TechLead", which is no role at all, so a
    TECH_LEAD is refused and only ADMIN passes.
    """
    _, lead_token = await create_user(UserRole.TECH_LEAD)
    _, admin_token = await create_user(UserRole.ADMIN)

    lead = await async_client.post("/api/categories", json={"name": "Teamwork"}, headers=auth_headers(lead_token))
    admin = await async_client.post("/api/categories", json={"name": "Teamwork"}, headers=auth_headers(admin_token))

    assert lead.status_code == 403
    assert admin.status_code == 201


@pytest.mark.asyncio
async def test_role_change_takes_effect_on_next_request(async_client, create_user, user_repository):
    user, token = await create_user(UserRole.TEAM_MEMBER)
    headers = auth_headers(token)

    before = await async_client.post("/api/teams", json={"name": "Platform"}, headers=headers)
    await user_repository.update_role(user.id, UserRole.ADMIN)
    after = await async_client.post("/api/teams", json={"name": "Platform"}, headers=headers)

    assert before.status_code == 403
    assert after.status_code == 201


@pytest.mark.asyncio
@pytest.mark.parametrize("method, url", [
    ("GET", "/api/users"),
    ("GET", "/api/users/team-members"),
])
async def test_user_admin_routes_require_admin(async_client, create_user, method, url):
    _, lead_token = await create_user(UserRole.TECH_LEAD)

    response = await async_client.request(method, url, headers=auth_headers(lead_token))

    assert response.status_code == 403
