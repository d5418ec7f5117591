# kudos_wall/adapters/outbound/security/password_hasher.py

import logging

from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext

logger = logging.getLogger(__name__)

DEFAULT_BCRYPT_ROUNDS = 10


class PasswordHasher:
    """
    bcrypt password hashing.

    Every hash embeds its own random salt and work factor, so hashing the
    same password twice yields different strings that both verify.
    Hashing runs in the threadpool to keep the event loop responsive.
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.crypt_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    async def hash(self, password: str) -> str:
        """Return the hash of a plain text password."""
        return await run_in_threadpool(self.crypt_context.hash, password)

    async def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify if the plain text password matches the stored hash. Never raises."""
        try:
            return await run_in_threadpool(self.crypt_context.verify, plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            # Unknown or corrupted hash format
            logger.warning(f"Password hash could not be verified: {type(e).__name__}")
            return False
