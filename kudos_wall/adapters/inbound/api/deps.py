# kudos_wall/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

Long-lived collaborators (settings, database, password hasher, token
manager, token blacklist, analytics source) are built once by the
composition root and stored on ``app.state``. The functions below hand them
to endpoints and build the per-request repositories and services.
"""

import asyncio
import logging
from typing import AsyncGenerator, Optional
from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from kudos_wall.adapters.configuration.config import Settings
from kudos_wall.adapters.outbound.persistence.repositories import (
    AsyncCategoryRepository,
    AsyncKudoCardRepository,
    AsyncTeamRepository,
    AsyncUserRepository,
)
from kudos_wall.adapters.outbound.security.auth_user_manager import UserAuthManager
from kudos_wall.adapters.outbound.security.jwt_strategy import JWTAuthenticationStrategy
from kudos_wall.adapters.outbound.security.password_hasher import PasswordHasher
from kudos_wall.application.ports.outbound import (
    IAnalyticsRepository,
    ICategoryRepository,
    IKudoCardRepository,
    ITeamRepository,
    ITokenBlacklist,
    IUserRepository,
)
from kudos_wall.application.use_cases.analytics_use_cases import AsyncAnalyticsService
from kudos_wall.application.use_cases.auth_use_cases import AsyncAuthService
from kudos_wall.application.use_cases.category_use_cases import AsyncCategoryService
from kudos_wall.application.use_cases.kudo_card_use_cases import AsyncKudoCardService
from kudos_wall.application.use_cases.team_use_cases import AsyncTeamService
from kudos_wall.application.use_cases.user_use_cases import AsyncUserService
from kudos_wall.domain.exceptions import AuthenticationFailedException
from kudos_wall.domain.models.user_domain_model import AuthenticatedUser

# Configure logger
logger = logging.getLogger(__name__)

# Missing or non-bearer Authorization headers yield None instead of a 403
bearer_scheme = HTTPBearer(auto_error=False)


########################################################################
# Application state
########################################################################

def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_manager(request: Request) -> UserAuthManager:
    return request.app.state.token_manager


def get_token_blacklist(request: Request) -> ITokenBlacklist:
    return request.app.state.token_blacklist


def get_registration_lock(request: Request) -> asyncio.Lock:
    return request.app.state.registration_lock


def get_analytics_repository(request: Request) -> IAnalyticsRepository:
    return request.app.state.analytics_repository


########################################################################
# Database Session Management
########################################################################

async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Yields one session per request from the application's database.
    """
    async with request.app.state.database.session() as session:
        yield session


def get_user_repository(db: AsyncSession = Depends(get_db)) -> IUserRepository:
    return AsyncUserRepository(db)


def get_team_repository(db: AsyncSession = Depends(get_db)) -> ITeamRepository:
    return AsyncTeamRepository(db)


def get_category_repository(db: AsyncSession = Depends(get_db)) -> ICategoryRepository:
    return AsyncCategoryRepository(db)


def get_kudo_card_repository(db: AsyncSession = Depends(get_db)) -> IKudoCardRepository:
    return AsyncKudoCardRepository(db)


########################################################################
# User Token Authentication
########################################################################

def get_authentication_strategy(
        token_manager: UserAuthManager = Depends(get_token_manager),
        token_blacklist: ITokenBlacklist = Depends(get_token_blacklist),
        user_repository: IUserRepository = Depends(get_user_repository),
) -> JWTAuthenticationStrategy:
    return JWTAuthenticationStrategy(token_manager, token_blacklist, user_repository)


async def get_current_user(
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
        strategy: JWTAuthenticationStrategy = Depends(get_authentication_strategy),
) -> AuthenticatedUser:
    """
    Authenticate the request from its bearer token.

    The principal (without password) is also attached to ``request.state.user``.

    Raises:
        HTTPException 401: Missing, revoked or invalid token, or unknown user
    """
    token = credentials.credentials if credentials else None
    try:
        user = await strategy.authenticate(token)
    except AuthenticationFailedException as e:
        logger.warning(f"Authentication failed ({e.reason.value}) | Path: {request.url.path}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )

    request.state.user = user
    return user


########################################################################
# Services
########################################################################

def get_auth_service(
        settings: Settings = Depends(get_settings),
        user_repository: IUserRepository = Depends(get_user_repository),
        password_hasher: PasswordHasher = Depends(get_password_hasher),
        token_manager: UserAuthManager = Depends(get_token_manager),
        token_blacklist: ITokenBlacklist = Depends(get_token_blacklist),
        registration_lock: asyncio.Lock = Depends(get_registration_lock),
) -> AsyncAuthService:
    return AsyncAuthService(
        user_repository=user_repository,
        password_hasher=password_hasher,
        token_manager=token_manager,
        token_blacklist=token_blacklist,
        bootstrap_admin=settings.bootstrap_admin_enabled,
        registration_lock=registration_lock,
    )


def get_user_service(user_repository: IUserRepository = Depends(get_user_repository)) -> AsyncUserService:
    return AsyncUserService(user_repository)


def get_team_service(team_repository: ITeamRepository = Depends(get_team_repository)) -> AsyncTeamService:
    return AsyncTeamService(team_repository)


def get_category_service(
        category_repository: ICategoryRepository = Depends(get_category_repository),
) -> AsyncCategoryService:
    return AsyncCategoryService(category_repository)


def get_kudo_card_service(
        kudo_card_repository: IKudoCardRepository = Depends(get_kudo_card_repository),
        team_repository: ITeamRepository = Depends(get_team_repository),
        category_repository: ICategoryRepository = Depends(get_category_repository),
) -> AsyncKudoCardService:
    return AsyncKudoCardService(kudo_card_repository, team_repository, category_repository)


def get_analytics_service(
        analytics_repository: IAnalyticsRepository = Depends(get_analytics_repository),
) -> AsyncAnalyticsService:
    return AsyncAnalyticsService(analytics_repository)
