# kudos_wall/adapters/outbound/security/permissions.py

from typing import Iterable, Optional, Union

from fastapi import Depends, HTTPException, status

from kudos_wall.adapters.inbound.api.deps import get_current_user
from kudos_wall.domain.models.user_domain_model import AuthenticatedUser, UserRole

RoleName = Union[UserRole, str]


def _role_names(roles: Iterable[RoleName]) -> frozenset:
    return frozenset(role.value if isinstance(role, UserRole) else role for role in roles)


def authorize_roles(current_user: Optional[AuthenticatedUser], allowed_roles: Iterable[RoleName]) -> AuthenticatedUser:
    """
    Role gate over an already authenticated principal.

    Comparison is exact and case-sensitive: a gate listing "TechLead" does
    not admit a TECH_LEAD user.

    Raises:
        HTTPException 401: No principal present
        HTTPException 403: Principal's role is not allowed
    """
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not current_user.has_any_role(_role_names(allowed_roles)):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: insufficient permissions",
        )

    return current_user


def require_roles(*allowed_roles: RoleName):
    """
    Returns a dependency that authenticates the request, then applies the role gate.

    Usage:
        @router.post(..., dependencies=[Depends(require_roles(UserRole.ADMIN))])
    """
    allowed = _role_names(allowed_roles)

    async def role_checker(
            current_user: AuthenticatedUser = Depends(get_current_user),
    ) -> AuthenticatedUser:
        return authorize_roles(current_user, allowed)

    return role_checker
