# kudos_wall/test/routes/test_auth_routes.py

# Para rodar o arquivo
# pytest kudos_wall/test/routes/test_auth_routes.py -v

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from kudos_wall.adapters.inbound.api.deps import get_user_repository
from kudos_wall.main import create_app
from kudos_wall.test.conftest import STRONG_PASSWORD, auth_headers

REGISTER_URL = "/api/auth/register"
LOGIN_URL = "/api/auth/login"
LOGOUT_URL = "/api/auth/logout"
PROTECTED_URL = "/api/teams"


def register_payload(email="jane@example.com", password=STRONG_PASSWORD, name="Jane"):
    return {"email": email, "name": name, "password": password}


@pytest.mark.asyncio
async def test_full_authentication_flow(async_client):
    """
    Register, use the token, log in, log out, then the token is refused.
    """
    # 1. Register
    response_register = await async_client.post(REGISTER_URL, json=register_payload())
    assert response_register.status_code == 200, response_register.text
    registered = response_register.json()
    assert set(registered) == {"id", "email", "name", "role", "createdAt", "token"}
    assert registered["role"] == "TEAM_MEMBER"

    # 2. Token works
    response_me = await async_client.get(PROTECTED_URL, headers=auth_headers(registered["token"]))
    assert response_me.status_code == 200, response_me.text

    # 3. Login
    response_login = await async_client.post(
        LOGIN_URL, json={"email": "jane@example.com", "password": STRONG_PASSWORD}
    )
    assert response_login.status_code == 200, response_login.text
    login = response_login.json()
    assert login["user"] == {"id": registered["id"], "email": "jane@example.com", "role": "TEAM_MEMBER"}
    token = login["token"]

    # 4. Logout
    response_logout = await async_client.post(LOGOUT_URL, headers=auth_headers(token))
    assert response_logout.status_code == 200
    assert response_logout.json() == {"success": True, "message": "Successfully logged out"}

    # 5. Revoked token is refused, the other one still works
    response_revoked = await async_client.get(PROTECTED_URL, headers=auth_headers(token))
    assert response_revoked.status_code == 401
    assert response_revoked.json()["detail"] == "Token has been revoked"

    response_other = await async_client.get(PROTECTED_URL, headers=auth_headers(registered["token"]))
    assert response_other.status_code == 200


@pytest.mark.asyncio
async def test_register_never_returns_password(async_client):
    response = await async_client.post(REGISTER_URL, json=register_payload())

    assert "password" not in response.json()
    assert STRONG_PASSWORD not in response.text


@pytest.mark.asyncio
async def test_register_duplicate_email_is_409(async_client):
    await async_client.post(REGISTER_URL, json=register_payload())

    response = await async_client.post(REGISTER_URL, json=register_payload(name="Other"))

    assert response.status_code == 409
    assert response.json() == {"detail": "User with this email already exists", "code": "RESOURCE_ALREADY_EXISTS"}


@pytest.mark.asyncio
@pytest.mark.parametrize("payload, field", [
    (register_payload(password="weakpass"), "password"),
    (register_payload(email="not-an-email"), "email"),
    (register_payload(name="   "), "name"),
    ({"email": "jane@example.com", "password": STRONG_PASSWORD}, "name"),
])
async def test_register_validation_errors_are_400(async_client, payload, field):
    response = await async_client.post(REGISTER_URL, json=payload)

    assert response.status_code == 400
    body = response.json()
    assert body["detail"] == "Validation failed"
    assert field in [e["field"] for e in body["errors"]]


@pytest.mark.asyncio
async def test_register_rejects_password_past_bcrypt_limit(async_client):
    """Passwords sharing their first 72 bytes would hash to the same bcrypt value."""
    long_password = "Aa1!" + "a" * 72

    response = await async_client.post(REGISTER_URL, json=register_payload(password=long_password))

    assert response.status_code == 400
    messages = [e["message"] for e in response.json()["errors"] if e["field"] == "password"]
    assert any("72 bytes" in message for message in messages)


@pytest.mark.asyncio
async def test_login_failures_have_identical_bodies(async_client):
    await async_client.post(REGISTER_URL, json=register_payload())

    unknown = await async_client.post(LOGIN_URL, json={"email": "nobody@example.com", "password": STRONG_PASSWORD})
    wrong = await async_client.post(LOGIN_URL, json={"email": "jane@example.com", "password": "Wrong@Pass1"})

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json() == {"detail": "Invalid email or password", "code": "INVALID_CREDENTIALS"}


@pytest.mark.asyncio
async def test_login_with_empty_password_is_400(async_client):
    response = await async_client.post(LOGIN_URL, json={"email": "jane@example.com", "password": ""})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_logout_without_header_is_401(async_client):
    response = await async_client.post(LOGOUT_URL)

    assert response.status_code == 401
    assert response.json()["detail"] == "Unauthorized"


@pytest.mark.asyncio
async def test_logout_with_invalid_token_is_200(async_client, token_blacklist):
    response = await async_client.post(LOGOUT_URL, headers=auth_headers("not-a-real-token"))

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert len(token_blacklist) == 0


@pytest.mark.asyncio
async def test_logout_blacklist_failure_is_500(app, async_client, create_user):
    _, token = await create_user()
    failing = AsyncMock()
    failing.is_revoked.return_value = False
    failing.add.side_effect = RuntimeError("store unavailable")
    app.state.token_blacklist = failing

    response = await async_client.post(LOGOUT_URL, headers=auth_headers(token))

    assert response.status_code == 500
    assert response.json()["code"] == "INTERNAL_SERVER_ERROR"
    assert "stack" not in response.json()


@pytest.mark.asyncio
@pytest.mark.parametrize("headers", [
    {},
    {"Authorization": "Basic dXNlcjpwYXNz"},
    {"Authorization": "Bearer garbage"},
])
async def test_protected_route_rejects_bad_credentials_with_same_body(async_client, headers):
    response = await async_client.get(PROTECTED_URL, headers=headers)

    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized"}
    assert response.headers["WWW-Authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_token_of_deleted_user_is_401(async_client, create_user, user_repository):
    user, token = await create_user()
    del user_repository.users[user.id]

    response = await async_client.get(PROTECTED_URL, headers=auth_headers(token))

    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized"}


@pytest.mark.asyncio
async def test_bootstrap_mode_first_user_is_admin(settings, user_repository):
    app = create_app(settings.model_copy(update={"BOOTSTRAP_FIRST_ADMIN": True}))
    app.dependency_overrides[get_user_repository] = lambda: user_repository

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        first = await client.post(REGISTER_URL, json=register_payload("first@example.com"))
        second = await client.post(REGISTER_URL, json=register_payload("second@example.com"))

    assert first.json()["role"] == "ADMIN"
    assert second.json()["role"] == "TEAM_MEMBER"


@pytest.mark.asyncio
async def test_default_mode_first_user_is_team_member(async_client):
    response = await async_client.post(REGISTER_URL, json=register_payload())

    assert response.json()["role"] == "TEAM_MEMBER"
