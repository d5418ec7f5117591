# kudos_wall/test/unit/test_auth_user_manager.py

# Para rodar o arquivo
# pytest kudos_wall/test/unit/test_auth_user_manager.py -v

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from jose import jwt

from kudos_wall.adapters.outbound.security.auth_user_manager import UserAuthManager
from kudos_wall.domain.exceptions import InvalidTokenException
from kudos_wall.domain.models.user_domain_model import User, UserRole

SECRET = "unit-test-secret"
ISSUED_AT = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FrozenClock:
    """Callable clock the tests can move forward."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def make_user(role: UserRole = UserRole.TEAM_MEMBER) -> User:
    return User(
        id=uuid4(),
        email="jane@example.com",
        name="Jane",
        password="$2b$04$hash",
        role=role,
        created_at=ISSUED_AT,
    )


@pytest.fixture
def clock():
    return FrozenClock(ISSUED_AT)


@pytest.fixture
def manager(clock):
    return UserAuthManager(secret_key=SECRET, clock=clock)


def test_token_carries_subject_email_role_and_24h_expiry(manager):
    user = make_user(UserRole.TECH_LEAD)

    payload = manager.verify_access_token(manager.create_access_token(user))

    assert payload["sub"] == str(user.id)
    assert payload["email"] == "jane@example.com"
    assert payload["role"] == "TECH_LEAD"
    assert payload["iat"] == int(ISSUED_AT.timestamp())
    assert payload["exp"] - payload["iat"] == 24 * 60 * 60


def test_token_is_signed_with_hs256(manager):
    token = manager.create_access_token(make_user())

    assert jwt.get_unverified_header(token)["alg"] == "HS256"


def test_two_tokens_issued_in_same_second_differ(manager):
    user = make_user()

    assert manager.create_access_token(user) != manager.create_access_token(user)


def test_token_still_valid_one_second_before_expiry(manager, clock):
    token = manager.create_access_token(make_user())

    clock.now = ISSUED_AT + timedelta(hours=24) - timedelta(seconds=1)

    assert manager.verify_access_token(token)["email"] == "jane@example.com"


def test_token_rejected_at_exactly_24_hours(manager, clock):
    token = manager.create_access_token(make_user())

    clock.now = ISSUED_AT + timedelta(hours=24)

    with pytest.raises(InvalidTokenException) as exc_info:
        manager.verify_access_token(token)
    assert exc_info.value.reason == "expired"


def test_token_signed_with_other_secret_is_rejected(clock):
    foreign = UserAuthManager(secret_key="another-secret", clock=clock)
    manager = UserAuthManager(secret_key=SECRET, clock=clock)

    with pytest.raises(InvalidTokenException) as exc_info:
        manager.verify_access_token(foreign.create_access_token(make_user()))
    assert exc_info.value.reason == "signature"


def test_token_with_swapped_payload_is_rejected(manager):
    member_token = manager.create_access_token(make_user(UserRole.TEAM_MEMBER))
    admin_token = manager.create_access_token(make_user(UserRole.ADMIN))

    header, _, signature = member_token.split(".")
    _, admin_payload, _ = admin_token.split(".")
    forged = f"{header}.{admin_payload}.{signature}"

    with pytest.raises(InvalidTokenException):
        manager.verify_access_token(forged)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", None])
def test_malformed_tokens_are_rejected(manager, token):
    with pytest.raises(InvalidTokenException):
        manager.verify_access_token(token)


def test_token_missing_required_claims_is_rejected(manager):
    token = jwt.encode({"sub": str(uuid4()), "exp": int(ISSUED_AT.timestamp()) + 60}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenException) as exc_info:
        manager.verify_access_token(token)
    assert exc_info.value.reason == "claims"


def test_token_with_unknown_role_is_rejected(manager):
    now = int(ISSUED_AT.timestamp())
    token = jwt.encode(
        {"sub": str(uuid4()), "email": "x@example.com", "role": "Admin", "iat": now, "exp": now + 60},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenException):
        manager.verify_access_token(token)


def test_every_failure_uses_the_same_public_message(manager, clock):
    token = manager.create_access_token(make_user())
    clock.now = ISSUED_AT + timedelta(days=2)

    messages = set()
    for bad in (token, "garbage"):
        with pytest.raises(InvalidTokenException) as exc_info:
            manager.verify_access_token(bad)
        messages.add(str(exc_info.value))

    assert messages == {"Unauthorized"}


def test_extract_subject(manager, clock):
    user = make_user()
    token = manager.create_access_token(user)

    assert manager.extract_subject(token) == str(user.id)
    assert manager.extract_subject("garbage") is None

    clock.now = ISSUED_AT + timedelta(hours=25)
    assert manager.extract_subject(token) is None


def test_expiry_of_returns_aware_datetime(manager):
    payload = manager.verify_access_token(manager.create_access_token(make_user()))

    assert UserAuthManager.expiry_of(payload) == ISSUED_AT + timedelta(hours=24)
