# kudos_wall/domain/services/auth_service.py

from datetime import datetime, timedelta
from typing import Any, Dict, Optional
import uuid

from kudos_wall.domain.models.user_domain_model import User, UserRole

REQUIRED_CLAIMS = ("sub", "email", "role", "iat", "exp")


class AuthService:
    """
    Domain service for authentication-related business logic.
    """

    @staticmethod
    def create_token_payload(
            user: User,
            issued_at: datetime,
            expires_delta: timedelta,
            additional_claims: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Create an access token payload with the standard claims.

        Args:
            user: The principal the token is issued for
            issued_at: Issue time (timezone-aware)
            expires_delta: Token lifetime
            additional_claims: Extra claims merged into the payload

        Returns:
            Dict with all token claims
        """
        expire = issued_at + expires_delta

        payload = {
            "sub": str(user.id),
            "email": user.email,
            "role": user.role.value,
            "iat": int(issued_at.timestamp()),
            "exp": int(expire.timestamp()),
            # distinct tokens even when issued within the same second
            "jti": str(uuid.uuid4()),
        }

        if additional_claims:
            payload.update(additional_claims)

        return payload

    @staticmethod
    def has_required_claims(token_payload: Dict[str, Any]) -> bool:
        """Check that the payload carries every claim the rest of the app relies on."""
        if not all(k in token_payload for k in REQUIRED_CLAIMS):
            return False
        return token_payload.get("role") in {role.value for role in UserRole}

    @staticmethod
    def resolve_role_for_new_user(existing_user_count: Optional[int], bootstrap_enabled: bool) -> UserRole:
        """
        First-user bootstrap rule.

        When enabled and nobody has registered yet, the new user becomes ADMIN.
        Everyone else starts as TEAM_MEMBER.
        """
        if bootstrap_enabled and existing_user_count == 0:
            return UserRole.ADMIN
        return UserRole.TEAM_MEMBER
