# kudos_wall/test/routes/test_analytics_health_routes.py

# Para rodar o arquivo
# pytest kudos_wall/test/routes/test_analytics_health_routes.py -v

import pytest

from kudos_wall.test.conftest import auth_headers


@pytest.mark.asyncio
async def test_health_is_public(async_client):
    response = await async_client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "success"


@pytest.mark.asyncio
async def test_analytics_requires_authentication(async_client):
    response = await async_client.get("/api/analytics")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_analytics_defaults(async_client, create_user):
    _, token = await create_user()

    response = await async_client.get("/api/analytics", headers=auth_headers(token))

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"topIndividuals", "topTeams", "trendingWords", "trendingCategories"}
    assert len(body["topIndividuals"]) == 10
    assert len(body["trendingWords"]) == 20
    assert set(body["topIndividuals"][0]) == {"id", "name", "kudosCount"}
    assert set(body["trendingCategories"][0]) == {"categoryName", "kudosCount"}


@pytest.mark.asyncio
async def test_analytics_period_and_limits(async_client, create_user):
    _, token = await create_user()

    response = await async_client.get(
        "/api/analytics",
        params={"period": "weekly", "individualLimit": 2, "teamLimit": 1, "wordLimit": 3, "categoryLimit": 1},
        headers=auth_headers(token),
    )

    body = response.json()
    assert [i["name"] for i in body["topIndividuals"]] == ["Alice Johnson", "Bruno Costa"]
    assert len(body["topTeams"]) == 1
    assert len(body["trendingWords"]) == 3
    assert len(body["trendingCategories"]) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [
    {"individualLimit": 0},
    {"wordLimit": 51},
    {"period": "daily"},
])
async def test_analytics_rejects_out_of_range_parameters(async_client, create_user, params):
    _, token = await create_user()

    response = await async_client.get("/api/analytics", params=params, headers=auth_headers(token))

    assert response.status_code == 400
