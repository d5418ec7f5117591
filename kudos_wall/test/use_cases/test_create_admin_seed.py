# kudos_wall/test/use_cases/test_create_admin_seed.py

# Para rodar o arquivo
# pytest kudos_wall/test/use_cases/test_create_admin_seed.py -v

import pytest

from kudos_wall.adapters.outbound.persistence.seeds.create_admin import run_create_admin_seed
from kudos_wall.adapters.outbound.security.password_hasher import PasswordHasher
from kudos_wall.domain.models.user_domain_model import UserRole
from kudos_wall.test.conftest import InMemoryUserRepository

ENVIRON = {"ADMIN_EMAIL": "admin@example.com", "ADMIN_PASSWORD": "Adm1n@Pass", "ADMIN_NAME": "Admin"}


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.mark.asyncio
async def test_creates_admin_with_hashed_password(hasher):
    users = InMemoryUserRepository()

    admin = await run_create_admin_seed(users, hasher, environ=ENVIRON)

    assert admin.role == UserRole.ADMIN
    assert admin.password != "Adm1n@Pass"
    assert await hasher.verify("Adm1n@Pass", admin.password)


@pytest.mark.asyncio
async def test_second_run_is_a_no_op(hasher):
    users = InMemoryUserRepository()
    await run_create_admin_seed(users, hasher, environ=ENVIRON)

    assert await run_create_admin_seed(users, hasher, environ=ENVIRON) is None
    assert await users.count_users() == 1


@pytest.mark.asyncio
async def test_missing_variables(hasher):
    with pytest.raises(ValueError) as exc_info:
        await run_create_admin_seed(InMemoryUserRepository(), hasher, environ={"ADMIN_EMAIL": "a@example.com"})

    assert "ADMIN_PASSWORD" in str(exc_info.value)
    assert "ADMIN_NAME" in str(exc_info.value)
