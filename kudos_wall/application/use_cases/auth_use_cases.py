# kudos_wall/application/use_cases/auth_use_cases.py

"""
Service for user authentication.

This module implements registration, login and logout on top of the user
lookup port, the password hasher, the token manager and the token
blacklist. None of them is created here; the composition root passes them in.
"""

import asyncio
import logging
from typing import Optional

from kudos_wall.adapters.outbound.security.auth_user_manager import UserAuthManager
from kudos_wall.adapters.outbound.security.password_hasher import PasswordHasher
from kudos_wall.application.dtos.user_dto import (
    LoginUserOutput,
    LoginUserSummary,
    LogoutOutput,
    RegisterUserOutput,
    UserLogin,
    UserRegister,
)
from kudos_wall.application.ports.outbound import ITokenBlacklist, IUserRepository
from kudos_wall.domain.exceptions import (
    InvalidCredentialsException,
    InvalidTokenException,
    ResourceAlreadyExistsException,
)
from kudos_wall.domain.services.auth_service import AuthService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class AsyncAuthService:
    """
    Service for user authentication.

    This class implements the business logic of the three auth flows:
    register, login and logout.
    """

    def __init__(
            self,
            user_repository: IUserRepository,
            password_hasher: PasswordHasher,
            token_manager: UserAuthManager,
            token_blacklist: ITokenBlacklist,
            bootstrap_admin: bool = False,
            registration_lock: Optional[asyncio.Lock] = None,
    ):
        """
        Args:
            user_repository: User lookup port
            password_hasher: Credential hasher
            token_manager: Access token issuer/verifier
            token_blacklist: Revocation store
            bootstrap_admin: Promote the very first registered user to ADMIN
            registration_lock: Serializes the first-user check with the insert
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_manager = token_manager
        self.token_blacklist = token_blacklist
        self.bootstrap_admin = bootstrap_admin
        self.registration_lock = registration_lock or asyncio.Lock()

    async def register_user(self, user_input: UserRegister) -> RegisterUserOutput:
        """
        Register a new user and issue its first access token.

        Args:
            user_input: Validated registration data

        Returns:
            The new user (without password) and a token

        Raises:
            ResourceAlreadyExistsException: If the email is already in use
        """
        existing = await self.user_repository.find_by_email(user_input.email)
        if existing is not None:
            logger.warning(f"Registration attempt with existing email: {user_input.email}")
            raise ResourceAlreadyExistsException("User with this email already exists")

        hashed_password = await self.password_hasher.hash(user_input.password)

        if self.bootstrap_admin:
            async with self.registration_lock:
                user = await self._create_user(user_input, hashed_password)
        else:
            user = await self._create_user(user_input, hashed_password)
        logger.info(f"User registered: {user.id} with role {user.role.value}")

        return RegisterUserOutput(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role,
            created_at=user.created_at,
            token=self.token_manager.create_access_token(user),
        )

    async def _create_user(self, user_input: UserRegister, hashed_password: str):
        existing_users = await self.user_repository.count_users() if self.bootstrap_admin else None
        role = AuthService.resolve_role_for_new_user(existing_users, self.bootstrap_admin)

        return await self.user_repository.create({
            "email": user_input.email,
            "name": user_input.name,
            "password": hashed_password,
            "role": role,
        })

    async def login_user(self, user_input: UserLogin) -> LoginUserOutput:
        """
        Authenticate a user by email and password.

        Unknown email and wrong password raise the same exception with the
        same message.

        Raises:
            InvalidCredentialsException: If credentials are invalid
        """
        user = await self.user_repository.find_by_email(user_input.email)
        if user is None:
            logger.warning("Login failed: invalid credentials")
            raise InvalidCredentialsException()

        if not await self.password_hasher.verify(user_input.password, user.password):
            logger.warning("Login failed: invalid credentials")
            raise InvalidCredentialsException()

        logger.info(f"User logged in: {user.id}")
        return LoginUserOutput(
            user=LoginUserSummary(id=user.id, email=user.email, role=user.role),
            token=self.token_manager.create_access_token(user),
        )

    async def logout_user(self, token: str) -> LogoutOutput:
        """
        Revoke a token until its natural expiry.

        A token that does not verify is already unusable, so it is reported
        as a successful logout. Errors raised by the blacklist propagate.

        Args:
            token: Raw token, optionally prefixed with "Bearer "
        """
        if token.startswith(BEARER_PREFIX):
            token = token[len(BEARER_PREFIX):]

        try:
            payload = self.token_manager.verify_access_token(token)
        except InvalidTokenException as e:
            logger.info(f"Logout with an unusable token ({e.reason}); nothing to revoke")
            return LogoutOutput()

        await self.token_blacklist.add(
            token,
            subject_id=payload["sub"],
            expires_at=UserAuthManager.expiry_of(payload),
        )
        logger.info(f"User logged out: {payload['sub']}")
        return LogoutOutput()
