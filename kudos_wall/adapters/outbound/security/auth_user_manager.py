# kudos_wall/adapters/outbound/security/auth_user_manager.py

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

from jose import jwt, JWTError

from kudos_wall.domain.exceptions import InvalidTokenException
from kudos_wall.domain.models.user_domain_model import User
from kudos_wall.domain.services.auth_service import AuthService

logger = logging.getLogger(__name__)

DEFAULT_EXPIRES_HOURS = 24


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UserAuthManager:
    """
    JWT issuer and verifier for user access tokens.

    Tokens are HS256-signed and carry ``sub``, ``email``, ``role``, ``iat``
    and ``exp``. Verification failures of every kind surface as a single
    ``InvalidTokenException``; only the log line says whether the token was
    expired or tampered with.
    """

    def __init__(
            self,
            secret_key: str,
            algorithm: str = "HS256",
            expires_delta: timedelta = timedelta(hours=DEFAULT_EXPIRES_HOURS),
            clock: Callable[[], datetime] = utc_now,
    ):
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta
        self._clock = clock

    def create_access_token(self, user: User) -> str:
        """Sign a token for ``user`` expiring ``expires_delta`` from now."""
        payload = AuthService.create_token_payload(
            user=user,
            issued_at=self._clock(),
            expires_delta=self.expires_delta,
        )
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def verify_access_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode an access token.

        Expiry is checked against the injected clock, not jose's wall clock.

        Raises:
            InvalidTokenException: On any malformed, tampered or expired token
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except (JWTError, AttributeError, TypeError) as e:
            logger.debug(f"Token rejected: {type(e).__name__}")
            raise InvalidTokenException(reason="signature")

        if not AuthService.has_required_claims(payload):
            logger.debug("Token rejected: missing claims")
            raise InvalidTokenException(reason="claims")

        if int(payload["exp"]) <= int(self._clock().timestamp()):
            logger.debug(f"Token rejected: expired for subject {payload['sub']}")
            raise InvalidTokenException(reason="expired")

        return payload

    def extract_subject(self, token: str) -> Optional[str]:
        """Return the subject id, or None when the token does not verify."""
        try:
            return self.verify_access_token(token)["sub"]
        except InvalidTokenException:
            return None

    @staticmethod
    def expiry_of(payload: Dict[str, Any]) -> datetime:
        return datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
