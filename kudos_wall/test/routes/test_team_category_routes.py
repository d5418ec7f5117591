# kudos_wall/test/routes/test_team_category_routes.py

# Para rodar o arquivo
# pytest kudos_wall/test/routes/test_team_category_routes.py -v

from uuid import uuid4

import pytest
import pytest_asyncio

from kudos_wall.domain.models.user_domain_model import UserRole
from kudos_wall.test.conftest import auth_headers


@pytest_asyncio.fixture
async def admin_headers(create_user):
    _, token = await create_user(UserRole.ADMIN)
    return auth_headers(token)


@pytest.mark.asyncio
async def test_team_crud(async_client, admin_headers):
    created = await async_client.post("/api/teams", json={"name": "Platform"}, headers=admin_headers)
    assert created.status_code == 201
    team_id = created.json()["team"]["id"]

    listed = await async_client.get("/api/teams", headers=admin_headers)
    assert [t["name"] for t in listed.json()["teams"]] == ["Platform"]

    renamed = await async_client.put(f"/api/teams/{team_id}", json={"name": "Core"}, headers=admin_headers)
    assert renamed.status_code == 200
    assert renamed.json()["team"]["name"] == "Core"

    deleted = await async_client.delete(f"/api/teams/{team_id}", headers=admin_headers)
    assert deleted.json() == {"success": True}

    missing = await async_client.delete(f"/api/teams/{team_id}", headers=admin_headers)
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_duplicate_team_is_409(async_client, admin_headers):
    await async_client.post("/api/teams", json={"name": "Platform"}, headers=admin_headers)

    response = await async_client.post("/api/teams", json={"name": "Platform"}, headers=admin_headers)

    assert response.status_code == 409
    assert response.json()["code"] == "RESOURCE_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_empty_team_name_is_400(async_client, admin_headers):
    response = await async_client.post("/api/teams", json={"name": ""}, headers=admin_headers)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_category_create_then_exists(async_client, admin_headers):
    created = await async_client.post("/api/categories", json={"name": "Teamwork"}, headers=admin_headers)
    again = await async_client.post("/api/categories", json={"name": "Teamwork"}, headers=admin_headers)

    assert created.status_code == 201
    assert created.json()["category"]["name"] == "Teamwork"
    assert "exists" not in created.json()
    assert again.status_code == 200
    assert again.json()["exists"] is True
    assert again.json()["success"] is True


@pytest.mark.asyncio
async def test_category_update_and_delete(async_client, admin_headers):
    created = await async_client.post("/api/categories", json={"name": "Teamwork"}, headers=admin_headers)
    category_id = created.json()["category"]["id"]

    updated = await async_client.put(
        f"/api/categories/{category_id}", json={"name": "Collaboration"}, headers=admin_headers
    )
    deleted = await async_client.delete(f"/api/categories/{category_id}", headers=admin_headers)

    assert updated.json()["category"]["name"] == "Collaboration"
    assert deleted.json() == {
        "success": True,
        "message": f"Category with ID {category_id} has been successfully deleted",
        "categoryName": "Collaboration",
    }


@pytest.mark.asyncio
async def test_unknown_category_is_404(async_client, admin_headers):
    response = await async_client.delete(f"/api/categories/{uuid4()}", headers=admin_headers)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_any_authenticated_user_lists_categories(async_client, admin_headers, create_user):
    await async_client.post("/api/categories", json={"name": "Teamwork"}, headers=admin_headers)
    _, member_token = await create_user(UserRole.TEAM_MEMBER)

    response = await async_client.get("/api/categories", headers=auth_headers(member_token))

    assert response.status_code == 200
    assert [c["name"] for c in response.json()["categories"]] == ["Teamwork"]
