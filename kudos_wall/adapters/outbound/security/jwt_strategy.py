# kudos_wall/adapters/outbound/security/jwt_strategy.py

import logging
from typing import Optional
from uuid import UUID

from kudos_wall.application.ports.outbound import ITokenBlacklist, IUserRepository
from kudos_wall.adapters.outbound.security.auth_user_manager import UserAuthManager
from kudos_wall.domain.exceptions import (
    AuthenticationFailedException,
    AuthFailureReason,
    InvalidTokenException,
)
from kudos_wall.domain.models.user_domain_model import AuthenticatedUser

logger = logging.getLogger(__name__)


class JWTAuthenticationStrategy:
    """
    Bearer JWT authentication pipeline.

    Steps run in a fixed order: token present, not revoked, signature and
    expiry valid, subject still resolvable. The first failing step raises
    ``AuthenticationFailedException`` with the matching reason.
    """

    def __init__(
            self,
            token_manager: UserAuthManager,
            token_blacklist: ITokenBlacklist,
            user_repository: IUserRepository,
    ):
        self.token_manager = token_manager
        self.token_blacklist = token_blacklist
        self.user_repository = user_repository

    async def authenticate(self, token: Optional[str]) -> AuthenticatedUser:
        if not token:
            raise AuthenticationFailedException(AuthFailureReason.MISSING_TOKEN)

        if await self.token_blacklist.is_revoked(token):
            logger.info("Rejected revoked token")
            raise AuthenticationFailedException(AuthFailureReason.REVOKED)

        try:
            payload = self.token_manager.verify_access_token(token)
        except InvalidTokenException as e:
            logger.info(f"Rejected invalid token ({e.reason})")
            raise AuthenticationFailedException(AuthFailureReason.INVALID_TOKEN)

        try:
            user_id = UUID(payload["sub"])
        except (ValueError, TypeError):
            logger.warning(f"Token subject is not a valid UUID: {payload.get('sub')!r}")
            raise AuthenticationFailedException(AuthFailureReason.INVALID_TOKEN)

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logger.warning(f"Token subject {user_id} no longer exists")
            raise AuthenticationFailedException(AuthFailureReason.USER_NOT_FOUND)

        return user.to_principal()
